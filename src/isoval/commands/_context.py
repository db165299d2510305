"""AppContext: shared Click context for all commands.

Built once by the root group and handed to subcommands through
``@click.pass_obj``. It owns the service instance and the mapping from
a ServiceResult to stdout/stderr and an exit status.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from isoval.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from isoval.config.settings import IsovalSettings
    from isoval.services.result import ServiceResult
    from isoval.services.validate import ValidationService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The service is created on first use so ``--help`` and ``--version``
    never import the schema catalogue.
    """

    def __init__(self, settings: IsovalSettings) -> None:
        self.settings = settings
        self._service: ValidationService | None = None

        from isoval.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> ValidationService:
        """The validation service (created lazily on first access)."""
        if self._service is None:
            from isoval.services.validate import ValidationService

            self._service = ValidationService(self.settings)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and exit with status 1 when it failed.

        Successes go to stdout with warnings on stderr; failures go to
        stderr.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
