"""Locale path mapping — where a translation for a locale lands on disk.

Pure functions only; directory creation and writes live in
:mod:`skysync.infrastructure.filesystem`.

Naming convention for base-language files::

    <name>.<base_locale>.<ext>      e.g. app.en.yml

A translation for ``fr`` becomes ``app.fr.yml`` inside ``onesky_fr/``.
Translations for the base locale are written back next to the sources.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePath

# Subdirectory prefix for downloaded (non-base) locales.
DIR_PREFIX = "onesky_"

# Target codes whose filename segment differs from the code itself.
# ms_MY: Rails/I18n ships Malay as ``ms``, OneSky names it ``ms_MY``.
FILENAME_LOCALE_OVERRIDES: dict[str, str] = {
    "ms_MY": "ms",
}

TRANSLATION_NOTICE = "\n".join(
    (
        "# This file is generated by skysync and will be overwritten at the next download",
        "# Therefore, you should not modify this file",
        "# If you want to modify the translation, please do it at OneSky platform",
        "# If you still want to modify this file directly, please upload this file to OneSky"
        " platform after modification in order to update the translation at OneSky",
        "",
        "",
    )
)


@dataclass(frozen=True)
class LocaleConfig:
    """Locale settings passed explicitly to every component.

    Attributes:
        base_locale: Source language the strings are authored in.
        locales: Target locales fetched from OneSky (base excluded).
    """

    base_locale: str
    locales: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Base never appears as a target; it is only requested via --all/--base-only.
        targets = tuple(dict.fromkeys(str(loc) for loc in self.locales if loc != self.base_locale))
        object.__setattr__(self, "base_locale", str(self.base_locale))
        object.__setattr__(self, "locales", targets)

    def is_base(self, locale: str) -> bool:
        return locale == self.base_locale


def locale_dir_name(locale: str) -> str:
    """Directory name for a downloaded locale, e.g. ``onesky_fr``."""
    return f"{DIR_PREFIX}{locale}"


def destination_dir(root: Path, locale: str, config: LocaleConfig) -> Path:
    """Directory a translation for *locale* is written to (not created)."""
    if config.is_base(locale):
        return root
    return root / locale_dir_name(locale)


def filename_locale(locale: str) -> str:
    """Locale segment used in filenames, after applying overrides."""
    return FILENAME_LOCALE_OVERRIDES.get(locale, locale)


def destination_file_name(source_name: str, target_locale: str, config: LocaleConfig) -> str:
    """Map a base-locale filename to its *target_locale* counterpart.

    The second dot-segment of the stem must equal the base locale;
    otherwise the name is passed through unchanged.

    Examples:
        >>> cfg = LocaleConfig("en", ("fr",))
        >>> destination_file_name("app.en.yml", "fr", cfg)
        'app.fr.yml'
        >>> destination_file_name("app.en.yml", "ms_MY", cfg)
        'app.ms.yml'
        >>> destination_file_name("notes.yml", "fr", cfg)
        'notes.yml'
    """
    stem = PurePath(source_name).stem
    segments = stem.split(".")
    if len(segments) < 2 or segments[1] != config.base_locale:
        return source_name

    segments[1] = filename_locale(target_locale)
    suffix = source_name[len(stem) :]
    return ".".join(segments) + suffix


def remote_locale_code(locale: str) -> str:
    """OneSky spells locales with hyphens (``zh-TW``), Rails with underscores."""
    return locale.replace("_", "-")
