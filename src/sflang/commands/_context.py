"""AppContext — the object every subcommand receives via ``@click.pass_obj``."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sflang.config.logging import configure_logging
from sflang.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from sflang.config.settings import SflSettings
    from sflang.services.result import ServiceResult


class AppContext:
    """Settings for this invocation plus result printing.

    Logging is configured here, once per invocation, before any service runs.
    """

    def __init__(self, settings: SflSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def output_settings(self) -> OutputSettings:
        s = self.settings
        return OutputSettings(
            json_output=s.json_output,
            quiet=s.quiet,
            verbose=s.verbose,
            width=s.output.width,
            show_keys=s.output.show_keys,
        )

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; a failed result goes to stderr and exits with 1.

        Warnings follow a successful human or quiet render on stderr.  JSON
        output already carries them in its ``warnings`` array.
        """
        out = self.output_settings
        rendered = format_result(result, settings=out)
        if not result.ok:
            click.echo(rendered, err=True)
            raise SystemExit(1)

        click.echo(rendered)
        if out.json_output:
            return
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)
