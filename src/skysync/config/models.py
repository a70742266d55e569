"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, skysync.toml only contains
overrides.  A fresh project needs only ``[project] locales`` plus API
credentials (usually from ``SKYSYNC_API__*`` env vars).
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from skysync.domain.locales import LocaleConfig

# --- skysync.toml sections ---


class ProjectConfig(BaseModel):
    """[project] section."""

    model_config = {"frozen": True}

    base_locale: str = "en"
    locales: list[str] = Field(default_factory=list)
    string_path: str = "config/locales"

    def locale_config(self) -> LocaleConfig:
        return LocaleConfig(base_locale=self.base_locale, locales=tuple(self.locales))


class UploadConfig(BaseModel):
    """[upload] section.

    ``except`` is a Python keyword, so the attribute is ``except_`` and the
    TOML key stays ``except``.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    only: list[str] = Field(default_factory=list)
    except_: list[str] = Field(default_factory=list, alias="except")
    is_keeping_all_strings: bool | None = None

    @property
    def keep_all_strings(self) -> bool:
        """True unless ``is_keeping_all_strings`` is explicitly false."""
        return self.is_keeping_all_strings is not False


class ApiConfig(BaseModel):
    """[api] section."""

    model_config = {"frozen": True}

    api_key: str = ""
    api_secret: str = ""
    project_id: str = ""
    base_url: str = "https://platform.api.onesky.io/1"
    timeout: float = 30.0
