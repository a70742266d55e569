"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs   (CLI flags passed by Click)
  2. Env vars      (``SKYSYNC_*``; sections nest with ``__``, e.g.
     ``SKYSYNC_API__API_KEY``)
  3. TOML file     (``skysync.toml`` found by walk-up, or ``--config``)
  4. Code defaults (baked into the section models)

OneSky credentials normally come from step 2 so the TOML file can be
committed alongside the string files.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from skysync.config.discovery import resolve_config_path
from skysync.config.models import ApiConfig, ProjectConfig, UploadConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Feed the sections of one ``skysync.toml`` into pydantic-settings."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is None:
            return
        try:
            self._data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_path}: {exc}"
            raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# The TOML path cannot travel through __init__ kwargs (they are the
# highest-priority source), so from_cli parks it here during construction.
_tls = threading.local()


class SkysyncSettings(BaseSettings):
    """Resolved settings for one skysync invocation.

    Attributes:
        project_root: Directory holding ``skysync.toml`` (or CWD if no
            config was found).  ``project.string_path`` is relative to it.
        config_path: The config file actually loaded, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SKYSYNC_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_interact: bool = False

    # --- TOML sections ---
    project: ProjectConfig = Field(default_factory=ProjectConfig)
    upload: UploadConfig = Field(default_factory=UploadConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)

    @property
    def string_root(self) -> Path:
        """Absolute directory holding the project's locale files."""
        return self.project_root / self.project.string_path

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> SkysyncSettings:
        """Build settings for a CLI invocation.

        An explicit *config_path* (or ``SKYSYNC_CONFIG``) must exist; otherwise
        ``skysync.toml`` is looked up from *project_root* (or CWD).  Without an explicit
        *project_root*, the config file's directory becomes the root.

        Raises:
            click.ClickException: If a pinned config file is missing or the TOML
                is malformed.
        """
        toml_path = resolve_config_path(config_path, project_root)

        if project_root is None:
            project_root = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(project_root=project_root, config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
