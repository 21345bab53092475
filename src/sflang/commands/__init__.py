"""sflang subcommands.

Command modules are imported inside :func:`register_commands` so that each
one pulls in its service only when it runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Attach ``compile``, ``format`` and ``tags`` to *cli*."""
    from sflang.commands.compile_cmd import compile_cmd
    from sflang.commands.format_cmd import format_cmd
    from sflang.commands.tags import tags

    for command in (compile_cmd, format_cmd, tags):
        cli.add_command(command)
