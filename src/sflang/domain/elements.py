"""Commands and the element tree produced by the tree builder.

All types are frozen dataclasses compared by value.  They hold option
dicts, so they are explicitly unhashable.  ``to_dict()`` produces the
JSON-ready shape used by the service layer and the ``--json`` output mode.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from typing import Any

from sflang.domain.types import OptionValue


@dataclass(frozen=True)
class Command:
    """One parsed ``tag "data" options;`` statement."""

    tag: str
    data: str
    options: dict[str, OptionValue] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    def to_dict(self) -> dict[str, Any]:
        return {
            "tag": self.tag,
            "data": self.data,
            "options": json_options(self.options),
        }


@dataclass(frozen=True)
class CommandElement:
    """A top-level command outside any container."""

    command: Command

    __hash__ = None  # type: ignore[assignment]

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "command", **self.command.to_dict()}


@dataclass(frozen=True)
class ContainerStart:
    """Marker emitted when a container opens, carrying its style options."""

    name: str
    options: dict[str, OptionValue] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "container_start",
            "name": self.name,
            "options": json_options(self.options),
        }


@dataclass(frozen=True)
class ContainerElement:
    """A closed (or force-closed) container and its member commands."""

    name: str
    options: dict[str, OptionValue] = field(default_factory=dict)
    children: tuple[Command, ...] = ()

    __hash__ = None  # type: ignore[assignment]

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "container",
            "name": self.name,
            "options": json_options(self.options),
            "children": [child.to_dict() for child in self.children],
        }


Element = CommandElement | ContainerStart | ContainerElement


def json_options(options: dict[str, OptionValue]) -> dict[str, OptionValue | None]:
    """Return *options* with non-finite numbers (NaN, infinities) replaced by None."""
    return {
        key: None if isinstance(value, float) and not math.isfinite(value) else value
        for key, value in options.items()
    }


def command_key(index: int, command: Command) -> str:
    """Derive a stable re-render key for the command at *index*.

    Index, tag, and data are concatenated with a compact JSON rendering of
    the options in insertion order.
    """
    serialized = json.dumps(
        json_options(command.options),
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return f"{index}{command.tag}{command.data}{serialized}"
