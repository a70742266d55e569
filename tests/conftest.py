"""Shared pytest fixtures and test doubles for skysync tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from skysync.infrastructure.client import ClientResponse, RemoteUnavailableError


class FakeProjectClient:
    """In-memory ProjectClient recording every call.

    Exports answer ``default_export`` unless ``exports`` has an entry for
    ``(source_file_name, locale)``.  An entry may also be an exception
    instance, which is raised instead.
    """

    def __init__(
        self,
        *,
        exports: dict[tuple[str, str], ClientResponse | Exception] | None = None,
        default_export: ClientResponse | None = None,
        upload_code: int = 201,
        languages: ClientResponse | None = None,
    ) -> None:
        self.exports = exports or {}
        self.default_export = default_export or ClientResponse(200, "key: val\n")
        self.upload_code = upload_code
        self.languages = languages or ClientResponse(200, '{"data": []}')
        self.uploads: list[dict[str, Any]] = []
        self.export_calls: list[tuple[str, str]] = []
        self.closed = False

    def upload_file(
        self, path: Path, *, file_format: str, is_keeping_all_strings: bool
    ) -> ClientResponse:
        self.uploads.append(
            {
                "path": path,
                "file_format": file_format,
                "is_keeping_all_strings": is_keeping_all_strings,
            }
        )
        return ClientResponse(self.upload_code, "")

    def export_translation(self, *, source_file_name: str, locale: str) -> ClientResponse:
        self.export_calls.append((source_file_name, locale))
        answer = self.exports.get((source_file_name, locale), self.default_export)
        if isinstance(answer, Exception):
            raise answer
        return answer

    def list_languages(self) -> ClientResponse:
        return self.languages

    def close(self) -> None:
        self.closed = True


def write_locale_file(root: Path, relative: str, locale: str, body: str = "hello: Hello") -> Path:
    """Write a YAML string file keyed by *locale* under *root*."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    indented = "\n".join(f"  {line}" for line in body.splitlines())
    path.write_text(f"{locale}:\n{indented}\n", encoding="utf-8")
    return path


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fake_client() -> FakeProjectClient:
    return FakeProjectClient()


@pytest.fixture
def string_root(tmp_path: Path) -> Path:
    """String directory holding two English source files."""
    root = tmp_path / "config" / "locales"
    write_locale_file(root, "a.en.yml", "en")
    write_locale_file(root, "b.en.yml", "en")
    return root


@pytest.fixture
def _no_skysync_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop SKYSYNC_* variables that would leak into settings."""
    import os

    for name in list(os.environ):
        if name.startswith("SKYSYNC_"):
            monkeypatch.delenv(name)


@pytest.fixture
def project(
    tmp_path: Path,
    string_root: Path,
    fake_client: FakeProjectClient,
    monkeypatch: pytest.MonkeyPatch,
    _no_skysync_env: None,
) -> Iterator[Path]:
    """Configured project in CWD whose OneSky client is ``fake_client``."""
    (tmp_path / "skysync.toml").write_text(
        '[project]\nbase_locale = "en"\nlocales = ["fr", "de"]\n'
        '[api]\napi_key = "key"\napi_secret = "secret"\nproject_id = "42"\n',
        encoding="utf-8",
    )
    monkeypatch.setattr(
        "skysync.infrastructure.client.OneSkyClient",
        lambda *args, **kwargs: fake_client,
    )
    monkeypatch.chdir(tmp_path)
    yield tmp_path
