"""Command: resolve inline formatting markers in one text payload."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sflang.commands._base import SflCommand

if TYPE_CHECKING:
    from sflang.commands._context import AppContext


@click.command(
    "format",
    cls=SflCommand,
    examples="""\
  sflang format 'plain \\B bold \\B and \\I italic \\I'
  sflang -v format '\\B outer \\I inner \\I \\B'
  sflang --json format '\\U underlined \\U'""",
)
@click.argument("text")
@click.pass_obj
def format_cmd(app: AppContext, text: str) -> None:
    """Resolve \\B, \\I and \\U markers in TEXT into styled runs."""
    from sflang.services.format import FormatService

    app.emit(FormatService(app.settings).resolve(text))
