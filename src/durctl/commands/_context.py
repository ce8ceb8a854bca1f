"""AppContext: shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Owns logging setup and result emission (stdout vs
stderr routing, exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from durctl.config.logging import configure_logging
from durctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from durctl.config.settings import DurSettings
    from durctl.services.result import ServiceResult


class AppContext:
    """Settings plus output plumbing for one CLI invocation."""

    def __init__(self, settings: DurSettings) -> None:
        self.settings = settings

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from durctl.services.telemetry import enable_telemetry

            enable_telemetry()

    def emit(self, result: ServiceResult) -> None:
        """Print a ServiceResult.

        * Success: stdout, exit 0. Warnings go to stderr so piped output
          stays clean (JSON mode already carries them in the payload).
        * Failure: stderr, exit 1.
        """
        output_settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            color=self.settings.output.color,
            width=self.settings.output.width,
        )
        output = format_result(result, settings=output_settings)
        if result.ok:
            click.echo(output)
            if not output_settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
