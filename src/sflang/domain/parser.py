"""Statement parser — tag, quoted data literal, and raw option list.

Each statement is matched once against an anchored pattern.  A statement
that does not match is dropped: SF is tolerant of authoring mistakes and
never aborts a document for a malformed statement.

The reserved ``bg`` tag yields no command; its decoded data is reported
through the ``on_background`` callback instead.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator

from sflang.domain.elements import Command
from sflang.domain.escapes import decode_literal
from sflang.domain.options import parse_options
from sflang.domain.scanner import scan_statements

logger = logging.getLogger(__name__)

DEFAULT_TAG = "format"
BACKGROUND_TAG = "bg"

BackgroundCallback = Callable[[str], None]

_STATEMENT_PARSE_PATTERN = re.compile(
    r'^(\S*?)[\s\\]*"((?:[^"\\]|\\.)*)"(?:[\s\\]*(.*))?;$',
    re.DOTALL,
)


def parse_statement(
    statement: str,
    *,
    on_background: BackgroundCallback | None = None,
) -> Command | None:
    """Parse one statement substring into a :class:`Command`.

    Returns None when the statement does not match the grammar or when it
    is a ``bg`` statement (reported through *on_background*).
    """
    match = _STATEMENT_PARSE_PATTERN.match(statement.strip())
    if match is None:
        logger.debug("Dropping unparseable statement: %r", statement)
        return None

    tag = match.group(1) or DEFAULT_TAG
    data = decode_literal(match.group(2))

    if tag == BACKGROUND_TAG:
        if on_background is not None:
            on_background(data)
        return None

    options = parse_options(match.group(3) or "")
    return Command(tag=tag, data=data, options=options)


def parse_document(
    source: str,
    *,
    on_background: BackgroundCallback | None = None,
) -> Iterator[Command]:
    """Lazily scan and parse *source*, yielding commands in document order."""
    for statement in scan_statements(source):
        command = parse_statement(statement, on_background=on_background)
        if command is not None:
            yield command
