"""Tag families — which element each tag becomes and how its options bind.

Every family composes :data:`~sflang.domain.styles.BASE_STYLE` with its
own extension.  Tags outside :data:`TAGS` resolve to an empty placeholder
rather than an error.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from sflang.domain.elements import Command
from sflang.domain.inline import DEFAULT_MAX_FRAGMENTS, FormatGroup, resolve_format
from sflang.domain.styles import (
    BASE_STYLE,
    IMAGE_PROPS,
    LINK_PROPS,
    LINK_STYLE,
    BindingTable,
    StyleBinding,
    bind_options,
    compose,
    ignored_options,
    inline_style,
)


@dataclass(frozen=True)
class TagFamily:
    """Rendering contract for one or more tag names.

    Attributes:
        element: Target element name for the rendering backend.
        style: Binding table for style attributes.
        props: Binding table for element properties (``href``, ``alt``...).
        default_props: Properties set before options are bound.
        default_style: Builds the initial style from the command data.
        data_role: ``"text"`` (plain text), ``"inline"`` (marker-resolved
            text), ``"src"`` (resource location), or ``"style"`` (the data
            feeds *default_style* only).
    """

    element: str
    style: BindingTable = field(default_factory=lambda: dict(BASE_STYLE))
    props: BindingTable = field(default_factory=dict)
    default_props: Mapping[str, Any] = field(default_factory=dict)
    default_style: Callable[[str], dict[str, Any]] | None = None
    data_role: str = "text"

    def bindings(self) -> dict[str, StyleBinding]:
        """All option keys this family understands."""
        return compose(self.style, self.props)


def _divider_style(data: str) -> dict[str, Any]:
    return {"border-top": data, "margin-top": 10, "margin-bottom": 5, "width": "100%"}


_LINK = TagFamily(
    element="a",
    style=compose(BASE_STYLE, LINK_STYLE),
    props=LINK_PROPS,
)

TAGS: dict[str, TagFamily] = {
    "img": TagFamily(
        element="img",
        props=IMAGE_PROPS,
        default_props={"alt": ""},
        data_role="src",
    ),
    "a": _LINK,
    "link": _LINK,
    "span": TagFamily(element="span"),
    "format": TagFamily(element="div", data_role="inline"),
    "p": TagFamily(element="p"),
    "big": TagFamily(element="h1"),
    "middle": TagFamily(element="h2"),
    "small": TagFamily(element="h3"),
    "divider": TagFamily(element="div", default_style=_divider_style, data_role="style"),
}


@dataclass(frozen=True)
class ResolvedCommand:
    """A command bound against its tag family, ready for a renderer.

    ``element`` is None for unknown tags (render an empty placeholder).
    ``inline_style`` is set for inline payloads and applies to every run.
    """

    tag: str
    element: str | None
    style: dict[str, Any] = field(default_factory=dict)
    props: dict[str, Any] = field(default_factory=dict)
    text: str | None = None
    inline: FormatGroup | None = None
    inline_style: dict[str, Any] | None = None
    ignored: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "tag": self.tag,
            "element": self.element,
            "style": self.style,
            "props": self.props,
        }
        if self.text is not None:
            out["text"] = self.text
        if self.inline is not None:
            out["inline"] = self.inline.to_dict()
        if self.inline_style is not None:
            out["inline_style"] = self.inline_style
        return out


def lookup_family(tag: str) -> TagFamily | None:
    """Return the family for *tag*, or None when the tag is unknown."""
    return TAGS.get(tag)


def resolve_command(
    command: Command,
    *,
    max_fragments: int = DEFAULT_MAX_FRAGMENTS,
) -> ResolvedCommand:
    """Bind *command* against its tag family.

    Raises:
        TooManyFragmentsError: If an inline payload exceeds *max_fragments*.
    """
    family = lookup_family(command.tag)
    if family is None:
        return ResolvedCommand(
            tag=command.tag,
            element=None,
            ignored=tuple(command.options),
        )

    style: dict[str, Any] = family.default_style(command.data) if family.default_style else {}
    style = bind_options(family.style, command.options, style)
    props = bind_options(family.props, command.options, dict(family.default_props))
    ignored = tuple(ignored_options(family.bindings(), command.options))

    text: str | None = None
    inline: FormatGroup | None = None
    run_style: dict[str, Any] | None = None
    if family.data_role == "src":
        props["src"] = command.data
    elif family.data_role == "inline":
        inline = resolve_format(command.data, max_fragments=max_fragments)
        run_style = inline_style(style)
    elif family.data_role == "text":
        text = command.data

    return ResolvedCommand(
        tag=command.tag,
        element=family.element,
        style=style,
        props=props,
        text=text,
        inline=inline,
        inline_style=run_style,
        ignored=ignored,
    )
