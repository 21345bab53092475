"""Backslash escape decoding shared by data literals and quoted option values."""

from __future__ import annotations

import re

# One escape pair: a backslash and the character it escapes.
_ESCAPE_PAIR = re.compile(r"\\(.)", re.DOTALL)


def decode_literal(raw: str, *, newlines: bool = True) -> str:
    """Decode the body of a quoted literal.

    Escape pairs are consumed left to right, so a backslash is only an
    escape when preceded by an even run of backslashes:

    - ``\\"`` becomes ``"`` and ``\\\\`` becomes ``\\``
    - ``\\n`` becomes a newline when *newlines* is true
    - every other pair (``\\B``, ``\\I``, ``\\U``, ...) is kept verbatim
    """

    def _replace(match: re.Match[str]) -> str:
        char = match.group(1)
        if char in ('"', "\\"):
            return char
        if char == "n" and newlines:
            return "\n"
        return match.group(0)

    return _ESCAPE_PAIR.sub(_replace, raw)
