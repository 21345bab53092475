"""Element tree builder — group the flat command stream into containers.

At most one container is open at a time.  While it is open, a second
container-start statement is an ordinary member, and the container only
closes on an end statement naming it.  An unclosed container is closed
at end of input with whatever members it accumulated.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from sflang.domain.elements import (
    Command,
    CommandElement,
    ContainerElement,
    ContainerStart,
    Element,
)
from sflang.domain.errors import DocumentTooLargeError
from sflang.domain.inline import DEFAULT_MAX_FRAGMENTS
from sflang.domain.parser import BackgroundCallback, parse_document
from sflang.domain.types import OptionValue

logger = logging.getLogger(__name__)

DEFAULT_MAX_COMMANDS = 100
CONTAINER_START_TAG = "cstart"
CONTAINER_END_TAG = "cend"


@dataclass(frozen=True)
class CompileLimits:
    """Resource ceilings and container tag names for one compilation."""

    max_commands: int = DEFAULT_MAX_COMMANDS
    max_fragments: int = DEFAULT_MAX_FRAGMENTS
    start_tag: str = CONTAINER_START_TAG
    end_tag: str = CONTAINER_END_TAG


def build_elements(
    commands: Iterable[Command],
    *,
    limits: CompileLimits | None = None,
) -> list[Element]:
    """Group *commands* into top-level elements.

    *commands* is consumed lazily, so the command ceiling also bounds how
    much of the source is parsed.

    Raises:
        DocumentTooLargeError: If more than ``limits.max_commands`` commands
            are consumed.
    """
    limits = limits or CompileLimits()
    elements: list[Element] = []
    open_name: str | None = None
    open_options: dict[str, OptionValue] = {}
    members: list[Command] = []

    for count, command in enumerate(commands, start=1):
        if count > limits.max_commands:
            msg = f"Document has more than {limits.max_commands} commands"
            raise DocumentTooLargeError(msg, limit=limits.max_commands)

        if open_name is None:
            if command.tag == limits.start_tag:
                open_name, open_options, members = command.data, dict(command.options), []
                elements.append(ContainerStart(name=open_name, options=open_options))
            else:
                elements.append(CommandElement(command))
            continue

        if command.tag == limits.end_tag and command.data == open_name:
            elements.append(ContainerElement(open_name, dict(open_options), tuple(members)))
            open_name = None
            continue

        members.append(command)

    if open_name is not None:
        logger.debug("Force-closing unterminated container %r", open_name)
        elements.append(ContainerElement(open_name, dict(open_options), tuple(members)))
    return elements


def compile_document(
    source: str | Sequence[Command],
    *,
    on_background: BackgroundCallback | None = None,
    limits: CompileLimits | None = None,
) -> list[Element]:
    """Compile SF text, or an already-parsed command sequence, into elements.

    Passing a command sequence is how container members are rendered
    recursively.  The same *on_background* callback is forwarded at every
    nesting depth.
    """
    commands: Iterable[Command]
    if isinstance(source, str):
        commands = parse_document(source, on_background=on_background)
    else:
        commands = source
    return build_elements(commands, limits=limits)
