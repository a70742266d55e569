"""Command: list languages enabled on the OneSky project."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from skysync.commands._base import SyncCommand

if TYPE_CHECKING:
    from skysync.commands._context import AppContext


@click.command(cls=SyncCommand, examples="  skysync languages\n  skysync --json languages")
@click.pass_obj
def languages(app: AppContext) -> None:
    """List the project's languages and whether they are configured."""
    app.emit(app.sync_service("languages").list_languages())
