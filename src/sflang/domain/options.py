"""Option-list parser — ``key=value`` pairs after the data literal.

Values are typed on the way in:

- quoted (``"..."``): string, decoded like the data literal minus ``\\n``
- ``true``/``t``/``T`` and ``false``/``f``/``F``: booleans
- anything else: a number, or the NaN sentinel when it is not one

An unparseable bare value never falls back to a string.
"""

from __future__ import annotations

import math
import re

from sflang.domain.escapes import decode_literal
from sflang.domain.types import OptionValue

# Quoted values may contain commas; bare values run to the next comma.
_OPTION_PATTERN = re.compile(
    r'([^,\s=]*)\s*=\s*("(?:[^"\\]|\\.)*"|[^,]*)',
    re.DOTALL,
)

_TRUE_TOKENS = frozenset({"true", "t", "T"})
_FALSE_TOKENS = frozenset({"false", "f", "F"})

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INFINITY_PATTERN = re.compile(r"([+-]?)Infinity")
_RADIX_PATTERN = re.compile(r"0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def parse_number(token: str) -> int | float:
    """Parse a bare numeric token, returning NaN when it is not a number.

    Accepts decimal integers and decimals with optional exponent,
    ``Infinity`` with an optional sign, and ``0x``/``0o``/``0b`` integers.
    An empty token is zero.
    """
    token = token.strip()
    if not token:
        return 0
    if _INTEGER_PATTERN.fullmatch(token):
        return int(token)
    if _DECIMAL_PATTERN.fullmatch(token):
        return float(token)
    infinity = _INFINITY_PATTERN.fullmatch(token)
    if infinity:
        return -math.inf if infinity.group(1) == "-" else math.inf
    if _RADIX_PATTERN.fullmatch(token):
        return int(token, 0)
    return math.nan


def parse_value(raw: str) -> OptionValue:
    """Type a single raw option value."""
    value = raw.strip()
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return decode_literal(value[1:-1], newlines=False)
    if value in _TRUE_TOKENS:
        return True
    if value in _FALSE_TOKENS:
        return False
    return parse_number(value)


def parse_options(raw: str) -> dict[str, OptionValue]:
    """Parse a raw option list into an insertion-ordered mapping.

    Later duplicates overwrite earlier values while keeping the key's
    first position.  Entries with an empty key are skipped.
    """
    options: dict[str, OptionValue] = {}
    for match in _OPTION_PATTERN.finditer(raw):
        key, value = match.group(1), match.group(2)
        if not key:
            continue
        options[key] = parse_value(value)
    return options
