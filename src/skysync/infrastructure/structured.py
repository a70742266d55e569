"""Structured string-file reader.

Locale files are YAML documents keyed by locale at the top level::

    en:
      greeting: Hello
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

logger = logging.getLogger(__name__)


def load_mapping(path: Path) -> dict[str, Any] | None:
    """Parse *path* as YAML and return its top-level mapping.

    Returns None when the file is empty, unreadable, malformed, or its
    root is not a mapping.  Keys are stringified so ``en`` and a bare
    YAML boolean/number key compare the same way callers expect.
    """
    try:
        data = YAML(typ="safe").load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeError, YAMLError):
        logger.debug("Unreadable string file %s", path, exc_info=True)
        return None

    if not isinstance(data, dict):
        return None
    return {str(key): value for key, value in data.items()}
