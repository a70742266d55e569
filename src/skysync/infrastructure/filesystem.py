"""Filesystem operations for the project string tree.

INVARIANT: Only files inside ``onesky_<locale>/`` directories (or base
files explicitly requested for the base locale) are ever written.  Nothing
is deleted.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from skysync.domain.locales import LocaleConfig, destination_dir

STRING_FILE_SUFFIX = ".yml"
ENCODING = "utf-8"


def iter_string_files(root: Path) -> Iterator[Path]:
    """Yield every ``*.yml`` file under *root*, recursively.

    Order follows directory traversal and is not sorted.
    """
    for path in root.rglob(f"*{STRING_FILE_SUFFIX}"):
        if path.is_file():
            yield path


def relative_posix(path: Path, root: Path) -> str:
    """Path of *path* relative to *root*, always with forward slashes."""
    return path.relative_to(root).as_posix()


def ensure_dir(path: Path) -> Path:
    """Create *path* if missing.  Calling it again is a no-op."""
    path.mkdir(parents=True, exist_ok=True)
    return path


def write_text_file(path: Path, content: str) -> None:
    """Write *content* to *path*, replacing any previous file."""
    path.write_text(content, encoding=ENCODING)


def make_translation_dir(root: Path, locale: str, config: LocaleConfig) -> Path:
    """Resolve and create the directory translations for *locale* go to.

    The base locale maps to *root* itself; every other locale gets its own
    ``onesky_<locale>/`` subdirectory.
    """
    target = destination_dir(root, locale, config)
    if target == root:
        return root
    return ensure_dir(target)
