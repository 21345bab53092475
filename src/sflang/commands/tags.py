"""Command: list the known tags and the option keys each one binds."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sflang.commands._base import SflCommand

if TYPE_CHECKING:
    from sflang.commands._context import AppContext


@click.command(
    cls=SflCommand,
    examples="""\
  sflang tags
  sflang -v tags
  sflang --json tags""",
)
@click.pass_obj
def tags(app: AppContext) -> None:
    """List tag families, their elements, and accepted option keys."""
    from sflang.services.tags import TagService

    app.emit(TagService(app.settings).list_tags())
