"""SyncService — upload base files to OneSky, download translations back.

Pipelines:

- upload:   VERIFY → FILTER → DISCOVER → UPLOAD (one call per file)
- download: VERIFY → FILTER → DISCOVER → for each locale, for each file:
            EXPORT → WRITE (notice + body) when the export returned 200

Configuration errors abort before any file or network I/O.  A non-200
export skips that (locale, file) pair only; nothing is written or deleted
for it.  Nothing is retried.
"""

from __future__ import annotations

import json
import logging
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING, Any

from skysync.config.logging import bound_operation
from skysync.domain.errors import ConfigurationError
from skysync.domain.filters import compile_filter
from skysync.domain.locales import (
    TRANSLATION_NOTICE,
    LocaleConfig,
    destination_file_name,
    locale_dir_name,
    remote_locale_code,
)
from skysync.infrastructure.client import RemoteUnavailableError
from skysync.infrastructure.filesystem import (
    make_translation_dir,
    relative_posix,
    write_text_file,
)
from skysync.services.base import BaseService
from skysync.services.discovery import discover_source_files
from skysync.services.result import ServiceResult

if TYPE_CHECKING:
    from skysync.config.models import UploadConfig
    from skysync.infrastructure.client import ProjectClient

logger = logging.getLogger(__name__)

FILE_FORMAT = "RUBY_YAML"


class DownloadMode(StrEnum):
    """Which locales a download fetches."""

    DEFAULT = "default"
    BASE_ONLY = "base_only"
    ALL = "all"


def verify_languages(config: LocaleConfig) -> None:
    """Raise unless at least one target locale is configured."""
    if not config.locales:
        msg = "The language(s) not verified: set [project] locales to at least one locale."
        raise ConfigurationError(msg)


def resolve_locales(config: LocaleConfig, mode: DownloadMode) -> list[str]:
    """Locales to fetch for *mode*, base first when it is included."""
    if mode is DownloadMode.BASE_ONLY:
        return [config.base_locale]
    if mode is DownloadMode.ALL:
        return [config.base_locale, *config.locales]
    return list(config.locales)


class SyncService(BaseService):
    """Upload and download string files for one OneSky project.

    Args:
        client: Remote project client.
        locales: Base and target locales.
        upload: ``[upload]`` filter and keep-strings settings.  Filters
            apply to both directions since downloads fetch the same
            source set.
    """

    def __init__(self, client: ProjectClient, locales: LocaleConfig, upload: UploadConfig) -> None:
        super().__init__(client)
        self._locales = locales
        self._upload = upload

    def _prepare(self, op: str, string_root: Path) -> list[Path] | ServiceResult:
        """Shared VERIFY → FILTER → DISCOVER stage.

        Returns the discovered sources, or a failed result to hand back.
        """
        try:
            verify_languages(self._locales)
        except ConfigurationError as exc:
            return ServiceResult.failure(op, "LANGUAGES_NOT_VERIFIED", str(exc))
        try:
            locale_filter = compile_filter(self._upload.only, self._upload.except_)
        except ConfigurationError as exc:
            return ServiceResult.failure(op, "CONFIG_INVALID", str(exc))

        if not string_root.is_dir():
            return ServiceResult.failure(
                op,
                "STRING_PATH_MISSING",
                f"String path does not exist: {string_root}",
                path=str(string_root),
            )

        return discover_source_files(string_root, self._locales.base_locale, locale_filter)

    # ── Upload ────────────────────────────────────────────────────────

    def upload(self, string_root: Path) -> ServiceResult:
        """Upload every base-language file under *string_root*.

        Each file is reported as uploaded whatever OneSky answers; non-2xx
        codes are surfaced as warnings.
        """
        op = "upload"
        prepared = self._prepare(op, string_root)
        if isinstance(prepared, ServiceResult):
            return prepared

        keep_all = self._upload.keep_all_strings
        uploaded: list[dict[str, Any]] = []
        warnings: list[str] = []

        with bound_operation(op):
            for path in prepared:
                relative = relative_posix(path, string_root)
                logger.info("Uploading %s", path.name)
                try:
                    response = self._client.upload_file(
                        path, file_format=FILE_FORMAT, is_keeping_all_strings=keep_all
                    )
                except RemoteUnavailableError as exc:
                    return ServiceResult.failure(
                        op,
                        "REMOTE_UNAVAILABLE",
                        str(exc),
                        data={"files": uploaded},
                        file=relative,
                    )
                if not 200 <= response.code < 300:
                    warnings.append(f"OneSky answered {response.code} for {relative}")
                uploaded.append({"file": relative, "path": str(path), "code": response.code})

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "files": uploaded,
                "count": len(uploaded),
                "is_keeping_all_strings": keep_all,
            },
            warnings=warnings,
        )

    # ── Download ──────────────────────────────────────────────────────

    def download(
        self, string_root: Path, mode: DownloadMode = DownloadMode.DEFAULT
    ) -> ServiceResult:
        """Fetch translations for every (locale, source file) pair.

        Iterates locale-major, file-minor.  Base-locale translations
        overwrite the sources in place; every other locale is written to
        ``onesky_<locale>/`` under *string_root*.
        """
        op = "download"
        prepared = self._prepare(op, string_root)
        if isinstance(prepared, ServiceResult):
            return prepared

        file_names = [path.name for path in prepared]
        locales = resolve_locales(self._locales, mode)
        written: list[dict[str, str]] = []
        skipped: list[dict[str, Any]] = []

        for locale in locales:
            with bound_operation(op, locale=locale):
                onesky_locale = remote_locale_code(locale)
                for file_name in file_names:
                    try:
                        response = self._client.export_translation(
                            source_file_name=file_name, locale=onesky_locale
                        )
                    except RemoteUnavailableError as exc:
                        return ServiceResult.failure(
                            op,
                            "REMOTE_UNAVAILABLE",
                            str(exc),
                            data={"written": written, "skipped": skipped},
                            locale=locale,
                            file=file_name,
                        )

                    if not response.ok:
                        code = response.code
                        logger.debug("Skipping %s (%s): HTTP %s", file_name, locale, code)
                        skipped.append({"locale": locale, "file": file_name, "code": code})
                        continue

                    target = self._save_translation(string_root, locale, file_name, response.body)
                    written.append({"locale": locale, "path": relative_posix(target, string_root)})

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "mode": mode.value,
                "locales": [
                    {
                        "locale": locale,
                        "dir": "." if self._locales.is_base(locale) else locale_dir_name(locale),
                    }
                    for locale in locales
                ],
                "written": written,
                "skipped": skipped,
                "count": len(written),
            },
        )

    def _save_translation(self, string_root: Path, locale: str, file_name: str, body: str) -> Path:
        target_dir = make_translation_dir(string_root, locale, self._locales)
        target = target_dir / destination_file_name(file_name, locale, self._locales)
        write_text_file(target, TRANSLATION_NOTICE + body)
        logger.info("Saved %s", target.name)
        return target

    # ── Languages ─────────────────────────────────────────────────────

    def list_languages(self) -> ServiceResult:
        """List the languages enabled on the OneSky project."""
        op = "languages"
        try:
            response = self._client.list_languages()
        except RemoteUnavailableError as exc:
            return ServiceResult.failure(op, "REMOTE_UNAVAILABLE", str(exc))

        if response.code != 200:
            return ServiceResult.failure(
                op,
                "REMOTE_ERROR",
                f"OneSky answered {response.code} when listing languages",
                status=response.code,
            )

        try:
            payload = json.loads(response.body)
        except json.JSONDecodeError as exc:
            return ServiceResult.failure(op, "REMOTE_ERROR", f"Malformed languages payload: {exc}")

        if not isinstance(payload, dict):
            return ServiceResult.failure(op, "REMOTE_ERROR", "Malformed languages payload")

        items: list[dict[str, Any]] = []
        for entry in payload.get("data") or []:
            if not isinstance(entry, dict):
                logger.debug("Ignoring malformed language entry: %r", entry)
                continue
            code = str(entry.get("code", "")).replace("-", "_")
            items.append(
                {
                    "code": code,
                    "name": entry.get("english_name", ""),
                    "is_base_language": bool(entry.get("is_base_language", False)),
                    "progress": entry.get("translation_progress", ""),
                    "configured": code in self._locales.locales or self._locales.is_base(code),
                }
            )

        return ServiceResult(ok=True, op=op, data={"items": items, "count": len(items)})
