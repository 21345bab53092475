"""Command: compile an SF document."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from sflang.commands._base import SflCommand

if TYPE_CHECKING:
    from sflang.commands._context import AppContext

STDIN = "-"


@click.command(
    "compile",
    cls=SflCommand,
    examples="""\
  sflang compile page.sf
  cat page.sf | sflang compile -
  sflang --json compile page.sf""",
)
@click.argument(
    "source",
    type=click.Path(exists=True, dir_okay=False, allow_dash=True, path_type=Path),
)
@click.pass_obj
def compile_cmd(app: AppContext, source: Path) -> None:
    """Compile SOURCE (a file path, or - for stdin) into an element tree."""
    from sflang.services.compile import CompileService

    service = CompileService(app.settings)
    if str(source) == STDIN:
        text = click.get_text_stream("stdin", encoding="utf-8").read()
        app.emit(service.compile_source(text, name="<stdin>"))
    else:
        app.emit(service.compile_file(source))
