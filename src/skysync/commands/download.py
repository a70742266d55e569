"""Command: download translations from OneSky into the string tree."""

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
  skysync download
  skysync download --base-only
  skysync download --all
  skysync -q download""",
)
@click.option(
    "--path",
    "string_path",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="String directory (defaults to [project] string_path).",
)
@click.option("--base-only", is_flag=True, help="Download the base language only.")
@click.option("--all", "all_locales", is_flag=True, help="Download base and target languages.")
@click.pass_obj
def download(
    app: AppContext,
    string_path: Path | None,
    base_only: bool,
    all_locales: bool,
) -> None:
    """Download translations into onesky_<locale>/ directories.

    Without flags only the configured target locales are fetched.
    """
    from skysync.services.sync import DownloadMode

    if base_only and all_locales:
        raise click.UsageError("--base-only and --all are mutually exclusive.")

    if base_only:
        mode = DownloadMode.BASE_ONLY
    elif all_locales:
        mode = DownloadMode.ALL
    else:
        mode = DownloadMode.DEFAULT

    service = app.sync_service("download")
    app.emit(service.download(string_path or app.settings.string_root, mode))
