"""Value kinds and inline format flags.

``OptionValue`` is the tagged union carried by parsed options.  Every
consumer classifies a value through :func:`value_kind` instead of ad-hoc
``isinstance`` checks, so ``bool`` (an ``int`` subclass) is never mistaken
for a number.
"""

from __future__ import annotations

import math
from enum import Flag

OptionValue = str | int | float | bool


class ValueKind(Flag):
    """Accepted option value kinds for a style binding."""

    NUMBER = 1
    STRING = 2
    BOOLEAN = 4

    NS = NUMBER | STRING
    SB = STRING | BOOLEAN
    BN = BOOLEAN | NUMBER
    EVERYTHING = NUMBER | STRING | BOOLEAN


class FormatFlag(Flag):
    """Inline styling flags accumulated while resolving nested markers."""

    NONE = 0
    BOLD = 1
    ITALIC = 2
    UNDERLINE = 4


def value_kind(value: OptionValue) -> ValueKind:
    """Classify *value* into exactly one :class:`ValueKind` member."""
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    msg = f"Unsupported option value: {value!r}"
    raise TypeError(msg)


def is_nan(value: OptionValue) -> bool:
    """True for the not-a-number sentinel produced by unparseable bare values."""
    return isinstance(value, float) and math.isnan(value)


def flag_names(flags: FormatFlag) -> list[str]:
    """Return lowercase names of the set members in Bold, Italic, Underline order."""
    return [
        member.name.lower()
        for member in (FormatFlag.BOLD, FormatFlag.ITALIC, FormatFlag.UNDERLINE)
        if member in flags
    ]
