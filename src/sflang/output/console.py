"""Rich console, theme, and inline-flag styles for sflang output.

Renderers draw into an in-memory console and return the text, so the same
output works for terminals, pipes, and CliRunner.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.style import Style
from rich.theme import Theme

from sflang.domain.types import FormatFlag

DEFAULT_WIDTH = 100

SFL_THEME = Theme(
    {
        "sfl.ok": "bold green",
        "sfl.error": "bold red",
        "sfl.op": "bold cyan",
        "sfl.key": "dim",
        "sfl.tag": "bold blue",
        "sfl.element": "cyan",
        "sfl.container": "bold magenta",
        "sfl.data": "",
        "sfl.placeholder": "dim italic",
    }
)


def create_console(*, width: int | None = None) -> Console:
    """An in-memory themed console; *width* defaults to ``DEFAULT_WIDTH``."""
    return Console(
        file=StringIO(),
        theme=SFL_THEME,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    """Text written so far to a console from :func:`create_console`."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_flags(flags: FormatFlag) -> Style:
    """Rich style matching a set of inline format flags."""
    return Style(
        bold=FormatFlag.BOLD in flags or None,
        italic=FormatFlag.ITALIC in flags or None,
        underline=FormatFlag.UNDERLINE in flags or None,
    )
