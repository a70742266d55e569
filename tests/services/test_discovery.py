"""Tests for base-language source discovery."""

from pathlib import Path

from tests.conftest import write_locale_file

from skysync.domain.filters import compile_filter
from skysync.services.discovery import discover_source_files


def _names(paths: list[Path], root: Path) -> list[str]:
    return sorted(p.relative_to(root).as_posix() for p in paths)


class TestDiscoverSourceFiles:
    def test_finds_base_files(self, string_root: Path) -> None:
        found = discover_source_files(string_root, "en")
        assert _names(found, string_root) == ["a.en.yml", "b.en.yml"]

    def test_recurses_into_subdirectories(self, string_root: Path) -> None:
        write_locale_file(string_root, "admin/admin.en.yml", "en")
        found = discover_source_files(string_root, "en")
        assert "admin/admin.en.yml" in _names(found, string_root)

    def test_excludes_files_without_base_key(self, string_root: Path) -> None:
        write_locale_file(string_root, "c.fr.yml", "fr")
        found = discover_source_files(string_root, "en")
        assert "c.fr.yml" not in _names(found, string_root)

    def test_excludes_previous_downloads(self, string_root: Path) -> None:
        write_locale_file(string_root, "onesky_fr/a.fr.yml", "fr")
        found = discover_source_files(string_root, "en")
        assert _names(found, string_root) == ["a.en.yml", "b.en.yml"]

    def test_malformed_file_is_skipped(self, string_root: Path) -> None:
        (string_root / "broken.en.yml").write_text("en: [unclosed\n", encoding="utf-8")
        found = discover_source_files(string_root, "en")
        assert _names(found, string_root) == ["a.en.yml", "b.en.yml"]

    def test_empty_file_is_skipped(self, string_root: Path) -> None:
        (string_root / "empty.en.yml").write_text("", encoding="utf-8")
        found = discover_source_files(string_root, "en")
        assert "empty.en.yml" not in _names(found, string_root)

    def test_base_key_required_even_when_filter_matches(self, string_root: Path) -> None:
        write_locale_file(string_root, "c.en.yml", "fr")
        locale_filter = compile_filter(only=["c.en.yml"])
        assert discover_source_files(string_root, "en", locale_filter) == []

    def test_only_filter(self, string_root: Path) -> None:
        found = discover_source_files(string_root, "en", compile_filter(only=["a.en.yml"]))
        assert _names(found, string_root) == ["a.en.yml"]

    def test_except_filter(self, string_root: Path) -> None:
        found = discover_source_files(string_root, "en", compile_filter(except_=["a.en.yml"]))
        assert _names(found, string_root) == ["b.en.yml"]

    def test_filter_uses_relative_paths(self, string_root: Path) -> None:
        write_locale_file(string_root, "admin/a.en.yml", "en")
        found = discover_source_files(string_root, "en", compile_filter(only=["admin/a.en.yml"]))
        assert _names(found, string_root) == ["admin/a.en.yml"]

    def test_other_base_locale(self, tmp_path: Path) -> None:
        write_locale_file(tmp_path, "app.ja.yml", "ja")
        write_locale_file(tmp_path, "app.en.yml", "en")
        found = discover_source_files(tmp_path, "ja")
        assert _names(found, tmp_path) == ["app.ja.yml"]
