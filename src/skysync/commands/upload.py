"""Command: upload base-language string files to OneSky."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from skysync.commands._base import SyncCommand

if TYPE_CHECKING:
    from skysync.commands._context import AppContext


@click.command(
    cls=SyncCommand,
    examples="""\
  skysync upload
  skysync upload --path config/locales/admin
  skysync --json upload""",
)
@click.option(
    "--path",
    "string_path",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="String directory (defaults to [project] string_path).",
)
@click.pass_obj
def upload(app: AppContext, string_path: Path | None) -> None:
    """Upload every base-language file to OneSky."""
    service = app.sync_service("upload")
    app.emit(service.upload(string_path or app.settings.string_root))
