"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy OneSky client construction and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import click

from skysync.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from skysync.config.settings import SkysyncSettings
    from skysync.infrastructure.client import ProjectClient
    from skysync.services.result import ServiceResult
    from skysync.services.sync import SyncService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The OneSky client is created on first use so ``--help``, ``init``
    and configuration errors never need credentials.
    """

    def __init__(self, settings: SkysyncSettings) -> None:
        self.settings = settings
        self._client: ProjectClient | None = None

        from skysync.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def client(self) -> ProjectClient:
        """The OneSky client (created lazily, closed with the Click context).

        Raises:
            ConfigurationError: If API credentials are missing.
        """
        if self._client is None:
            from skysync.infrastructure import client as client_mod

            api = self.settings.api
            onesky = client_mod.OneSkyClient(
                api.api_key,
                api.api_secret,
                api.project_id,
                base_url=api.base_url,
                timeout=api.timeout,
            )
            ctx = click.get_current_context(silent=True)
            if ctx is not None:
                ctx.call_on_close(onesky.close)
            self._client = onesky
        return self._client

    def sync_service(self, op: str) -> SyncService:
        """Build a SyncService for *op*, failing the command on bad config."""
        from skysync.domain.errors import ConfigurationError
        from skysync.services.result import ServiceResult
        from skysync.services.sync import SyncService

        try:
            client = self.client
        except ConfigurationError as exc:
            self.fail(ServiceResult.failure(op, "CONFIG_INVALID", str(exc)))

        return SyncService(
            client,
            self.settings.project.locale_config(),
            self.settings.upload,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def fail(self, result: ServiceResult) -> NoReturn:
        """Emit a failed result and exit."""
        self.emit(result)
        raise SystemExit(1)
