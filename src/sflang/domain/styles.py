"""Declarative option-key → style-attribute binding.

A binding table maps each option key to one or more target attributes,
the value kinds it accepts, and an optional transform.  Binding never
raises for document content: unknown keys, kind mismatches, and the NaN
sentinel are ignored.

Transform contract: ``transform(key, value, target)`` returns the value
to assign, or None to leave *target* untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from sflang.domain.errors import BindingDefinitionError
from sflang.domain.types import OptionValue, ValueKind, is_nan, value_kind

logger = logging.getLogger(__name__)

Transform = Callable[[str, OptionValue, str], OptionValue | None]


@dataclass(frozen=True)
class StyleBinding:
    """Targets, accepted kinds, and optional transform for one option key."""

    targets: tuple[str, ...]
    accepts: ValueKind
    transform: Transform | None = None

    def __post_init__(self) -> None:
        if not self.targets:
            msg = "A style binding needs at least one target attribute"
            raise BindingDefinitionError(msg)

    def accepts_value(self, value: OptionValue) -> bool:
        """Whether *value* passes this binding's type gate."""
        if is_nan(value):
            return False
        return bool(value_kind(value) & self.accepts)


BindingTable = Mapping[str, StyleBinding]


def binding(
    *targets: str,
    accepts: ValueKind,
    transform: Transform | None = None,
) -> StyleBinding:
    """Shorthand for declaring table entries."""
    return StyleBinding(targets=targets, accepts=accepts, transform=transform)


def compose(*tables: BindingTable) -> dict[str, StyleBinding]:
    """Merge tables left to right; later tables override earlier keys."""
    merged: dict[str, StyleBinding] = {}
    for table in tables:
        merged.update(table)
    return merged


def bind_options(
    table: BindingTable,
    options: Mapping[str, OptionValue],
    result: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Apply *options* to *result* through *table* and return *result*.

    Options are applied in insertion order, so a later option that targets
    the same attribute wins.
    """
    if result is None:
        result = {}
    for key, value in options.items():
        entry = table.get(key)
        if entry is None:
            continue
        if not entry.accepts_value(value):
            logger.debug("Ignoring option %s=%r: kind not accepted", key, value)
            continue
        for target in entry.targets:
            if entry.transform is None:
                result[target] = value
                continue
            transformed = entry.transform(key, value, target)
            if transformed is not None:
                result[target] = transformed
    return result


def ignored_options(table: BindingTable, options: Mapping[str, OptionValue]) -> list[str]:
    """Return the option keys that *table* would not bind, in order."""
    return [
        key
        for key, value in options.items()
        if key not in table or not table[key].accepts_value(value)
    ]


# ---------------------------------------------------------------------------
# Shared base table (box model, colour, sizing, layout)
# ---------------------------------------------------------------------------

BASE_STYLE: dict[str, StyleBinding] = {
    "mtop": binding("margin-top", accepts=ValueKind.NS),
    "mbottom": binding("margin-bottom", accepts=ValueKind.NS),
    "mleft": binding("margin-left", accepts=ValueKind.NS),
    "mright": binding("margin-right", accepts=ValueKind.NS),
    "ptop": binding("padding-top", accepts=ValueKind.NS),
    "pbottom": binding("padding-bottom", accepts=ValueKind.NS),
    "pleft": binding("padding-left", accepts=ValueKind.NS),
    "pright": binding("padding-right", accepts=ValueKind.NS),
    "border": binding("border", accepts=ValueKind.STRING),
    "bradius": binding("border-radius", accepts=ValueKind.NS),
    "color": binding("color", accepts=ValueKind.STRING),
    "cursor": binding("cursor", accepts=ValueKind.STRING),
    "blend": binding("mix-blend-mode", accepts=ValueKind.STRING),
    "width": binding("width", accepts=ValueKind.NS),
    "height": binding("height", accepts=ValueKind.NS),
    "mwidth": binding("max-width", accepts=ValueKind.NS),
    "mheight": binding("max-height", accepts=ValueKind.NS),
    "display": binding("display", accepts=ValueKind.STRING),
    "position": binding("position", accepts=ValueKind.STRING),
    "float": binding("float", accepts=ValueKind.STRING),
}

# Box attributes that belong to the block, not to its inline runs.
BOX_ATTRIBUTES: frozenset[str] = frozenset(
    {
        "margin-top",
        "margin-bottom",
        "margin-left",
        "margin-right",
        "padding-top",
        "padding-bottom",
        "padding-left",
        "padding-right",
        "border",
    }
)


def inline_style(block_style: Mapping[str, Any]) -> dict[str, Any]:
    """Return *block_style* without box attributes, for inline runs."""
    return {k: v for k, v in block_style.items() if k not in BOX_ATTRIBUTES}


# ---------------------------------------------------------------------------
# Link and image extensions
# ---------------------------------------------------------------------------


def _underline(_key: str, value: OptionValue, _target: str) -> OptionValue | None:
    # true keeps the renderer's default decoration; false removes it.
    return None if value else "none"


def _newtab(_key: str, value: OptionValue, target: str) -> OptionValue | None:
    if not value:
        return None
    return {"target": "_blank", "rel": "noopener noreferrer"}.get(target)


LINK_STYLE: dict[str, StyleBinding] = {
    "underline": binding("text-decoration", accepts=ValueKind.BOOLEAN, transform=_underline),
}

LINK_PROPS: dict[str, StyleBinding] = {
    "href": binding("href", accepts=ValueKind.STRING),
    "newtab": binding("target", "rel", accepts=ValueKind.BOOLEAN, transform=_newtab),
}

IMAGE_PROPS: dict[str, StyleBinding] = {
    "alt": binding("alt", accepts=ValueKind.STRING),
}
