"""Locate the skysync.toml a run should load.

Sources, highest priority first:

1. ``--config PATH`` on the command line
2. the ``SKYSYNC_CONFIG`` environment variable
3. the nearest ``skysync.toml`` in the working directory or one of its
   parents (the way git finds ``.git/``)

A pinned file (1 or 2) must exist; only the walk may come up empty.
"""

from __future__ import annotations

import os
from pathlib import Path

import click

CONFIG_FILENAME = "skysync.toml"
CONFIG_ENV_VAR = "SKYSYNC_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Nearest ``skysync.toml`` at or above *start* (default: cwd)."""
    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config_path(explicit: str | None = None, start: Path | None = None) -> Path | None:
    """Pick the config file for this run, or None when there is none.

    Raises:
        click.ClickException: If ``--config`` or ``SKYSYNC_CONFIG`` names
            a file that does not exist.
    """
    pinned, origin = explicit, "--config"
    if not pinned:
        pinned, origin = os.environ.get(CONFIG_ENV_VAR), CONFIG_ENV_VAR
    if not pinned:
        return find_config(start)

    path = Path(pinned)
    if not path.is_file():
        raise click.ClickException(f"Config file not found: {pinned} (from {origin})")
    return path
