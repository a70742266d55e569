"""Source discovery — which string files are base-language sources.

A file under the string root is a source when:

1. its path relative to the root passes the upload filter, and
2. its YAML content has a top-level key equal to the base locale.

Unparseable files are skipped, never fatal.
"""

from __future__ import annotations

import logging
from pathlib import Path

from skysync.domain.filters import AcceptAll, LocaleFilter
from skysync.infrastructure.filesystem import iter_string_files, relative_posix
from skysync.infrastructure.structured import load_mapping

logger = logging.getLogger(__name__)


def discover_source_files(
    root: Path,
    base_locale: str,
    locale_filter: LocaleFilter | None = None,
) -> list[Path]:
    """Return base-language files under *root* in traversal order.

    A missing *locale_filter* accepts every path.
    """
    locale_filter = locale_filter or AcceptAll()
    sources: list[Path] = []

    for path in iter_string_files(root):
        relative = relative_posix(path, root)
        if not locale_filter.accepts(relative):
            logger.debug("Filtered out %s", relative)
            continue

        content = load_mapping(path)
        if not content or base_locale not in content:
            logger.debug("No %r root key in %s", base_locale, relative)
            continue

        sources.append(path)

    return sources
