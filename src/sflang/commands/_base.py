"""Click command class adding an ``--examples`` flag to sflang commands."""

from __future__ import annotations

from functools import partial
from typing import Any

import click


def _print_examples(
    examples: str, ctx: click.Context, _param: click.Parameter, value: bool
) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(examples)
    ctx.exit(0)


class SflCommand(click.Command):
    """A command that prints usage examples on ``--examples`` and exits.

    Examples are kept out of ``--help`` so the help text stays short.
    """

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=partial(_print_examples, examples),
                    help="Show usage examples and exit.",
                )
            )
