"""Tests for upload filter compilation."""

import pytest

from skysync.domain.errors import ConfigurationError
from skysync.domain.filters import AcceptAll, Except, Only, compile_filter

PATHS = ["app.en.yml", "admin/app.en.yml", "devise.en.yml", "notes.yml"]


class TestCompileFilter:
    def test_empty_config_accepts_everything(self) -> None:
        locale_filter = compile_filter([], [])
        assert isinstance(locale_filter, AcceptAll)
        assert all(locale_filter.accepts(p) for p in PATHS)

    def test_none_behaves_like_empty(self) -> None:
        assert isinstance(compile_filter(None, None), AcceptAll)

    def test_only_accepts_exact_members(self) -> None:
        locale_filter = compile_filter(only=["app.en.yml", "admin/app.en.yml"])
        assert isinstance(locale_filter, Only)
        assert locale_filter.accepts("app.en.yml")
        assert locale_filter.accepts("admin/app.en.yml")
        assert not locale_filter.accepts("devise.en.yml")
        assert not locale_filter.accepts("notes.yml")

    def test_only_does_not_match_by_basename(self) -> None:
        locale_filter = compile_filter(only=["app.en.yml"])
        assert not locale_filter.accepts("admin/app.en.yml")

    def test_except_rejects_members(self) -> None:
        locale_filter = compile_filter(except_=["devise.en.yml"])
        assert isinstance(locale_filter, Except)
        assert not locale_filter.accepts("devise.en.yml")
        assert locale_filter.accepts("app.en.yml")
        assert locale_filter.accepts("admin/app.en.yml")

    def test_only_and_except_conflict(self) -> None:
        with pytest.raises(ConfigurationError, match="both `only` and `except`"):
            compile_filter(only=["app.en.yml"], except_=["devise.en.yml"])

    def test_conflict_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            compile_filter(only=["a"], except_=["b"])

    def test_filters_are_frozen(self) -> None:
        locale_filter = compile_filter(only=["a"])
        with pytest.raises(AttributeError):
            locale_filter.paths = frozenset()  # type: ignore[misc]
