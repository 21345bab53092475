"""The ``sflang`` command-line entry point."""

from __future__ import annotations

import click

from sflang import __version__
from sflang.commands import register_commands
from sflang.commands._context import AppContext
from sflang.config.settings import SflSettings


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(__version__, "-V", "--version", prog_name="sflang")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only OK/ERROR status lines.")
@click.option("-v", "--verbose", is_flag=True, help="Show details and debug logs.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Use this sflang.toml instead of searching for one.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """Compile SF markup documents.

    SF documents are sequences of ``tag "data" key=value;`` statements.
    Run ``sflang COMMAND --examples`` for sample invocations.
    """
    ctx.obj = AppContext(SflSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
