"""Jinja2 template loading with per-project override support."""

from __future__ import annotations

from pathlib import Path

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader


def build_template_environment(group: str, *, project_root: Path | None = None) -> Environment:
    """Build a Jinja2 environment with project overrides before packaged defaults.

    Overrides are looked up in ``.skysync/templates/<group>/`` inside the
    project, so a team can ship its own starter config.
    """
    loaders: list[BaseLoader] = []
    if project_root is not None:
        override_dir = project_root / ".skysync" / "templates" / group
        loaders.append(FileSystemLoader(str(override_dir)))

    loaders.append(PackageLoader("skysync", f"templates/{group}"))
    return Environment(loader=ChoiceLoader(loaders), keep_trailing_newline=True)
