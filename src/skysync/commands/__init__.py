"""Subcommand modules for skysync.

Provides register_commands() which uses deferred imports to keep
``skysync --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from skysync.commands.download import download
    from skysync.commands.init_cmd import init_cmd
    from skysync.commands.languages import languages
    from skysync.commands.upload import upload

    cli.add_command(upload)
    cli.add_command(download)
    cli.add_command(languages)
    cli.add_command(init_cmd)
