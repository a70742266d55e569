"""Command: project initialization (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from skysync.commands._base import SyncCommand

if TYPE_CHECKING:
    from skysync.commands._context import AppContext

_INIT_EXAMPLES = """\
  skysync init
  skysync init . --base-locale en --locales "fr,de,ja"
  skysync init --no-interact --locales zh_TW --string-path config/locales /path/to/app"""


@click.command("init", cls=SyncCommand, examples=_INIT_EXAMPLES)
@click.argument("path", required=False, default=".")
@click.option("--base-locale", default=None, help="Language the strings are authored in.")
@click.option("--locales", default=None, help="Comma-separated target locales.")
@click.option("--string-path", default=None, help="Directory of locale files, relative to PATH.")
@click.option("--force", is_flag=True, help="Overwrite an existing skysync.toml.")
@click.pass_obj
def init_cmd(
    app: AppContext,
    path: str,
    base_locale: str | None,
    locales: str | None,
    string_path: str | None,
    force: bool,
) -> None:
    """Write a starter skysync.toml."""
    project_path = Path(path).resolve()
    interactive = not app.settings.no_interact

    if base_locale is None:
        base_locale = click.prompt("Base locale", default="en") if interactive else "en"

    if locales is None:
        locales = (
            click.prompt("Target locales (comma-separated)", default="") if interactive else ""
        )
    locale_list = [loc.strip() for loc in locales.split(",") if loc.strip()]

    if string_path is None:
        string_path = (
            click.prompt("String path", default="config/locales")
            if interactive
            else "config/locales"
        )

    from skysync.services.init import InitService

    app.emit(
        InitService.init_project(
            project_path,
            base_locale=base_locale,
            locales=locale_list,
            string_path=string_path,
            force=force,
        )
    )
