"""CompileService — compile SF documents into resolved element trees.

Each element is serialised with its re-render key and its binding against
the tag family; container members are compiled again as a pre-parsed
command sequence, so a container-start member opens a container one
level further down.  Background colours requested by ``bg`` statements
are collected at every depth.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog

from sflang.domain.elements import (
    Command,
    CommandElement,
    ContainerElement,
    ContainerStart,
    Element,
    command_key,
)
from sflang.domain.errors import ResourceLimitError
from sflang.domain.styles import BASE_STYLE, bind_options, ignored_options
from sflang.domain.tags import lookup_family, resolve_command
from sflang.domain.tree import CompileLimits, compile_document
from sflang.services.base import BaseService
from sflang.services.result import ServiceError, ServiceResult

log = structlog.get_logger(__name__)


class _DocumentRenderer:
    """Serialises one compilation; holds the warnings and background sink."""

    def __init__(self, limits: CompileLimits) -> None:
        self.limits = limits
        self.warnings: list[str] = []
        self.backgrounds: list[str] = []
        self.commands = 0

    def on_background(self, color: str) -> None:
        self.backgrounds.append(color)

    def compile(self, source: str | list[Command]) -> list[dict[str, Any]]:
        elements = compile_document(
            source,
            on_background=self.on_background,
            limits=self.limits,
        )
        return [self._element(index, element) for index, element in enumerate(elements)]

    def _element(self, index: int, element: Element) -> dict[str, Any]:
        out = element.to_dict()
        if isinstance(element, CommandElement):
            out["key"] = command_key(index, element.command)
            out["resolved"] = self._resolve(element.command)
        elif isinstance(element, ContainerStart):
            out["style"] = self._container_style(element)
        elif isinstance(element, ContainerElement):
            out["elements"] = self.compile(list(element.children))
        return out

    def _resolve(self, command: Command) -> dict[str, Any]:
        self.commands += 1
        if command.tag == self.limits.end_tag:
            self.warnings.append(f"Container end {command.data!r} has no open container")
        elif lookup_family(command.tag) is None:
            self.warnings.append(f"Unknown tag {command.tag!r} rendered as empty placeholder")
        resolved = resolve_command(command, max_fragments=self.limits.max_fragments)
        if resolved.element is not None and resolved.ignored:
            keys = ", ".join(resolved.ignored)
            self.warnings.append(f"Ignored options on {command.tag!r}: {keys}")
        return resolved.to_dict()

    def _container_style(self, start: ContainerStart) -> dict[str, Any]:
        ignored = ignored_options(BASE_STYLE, start.options)
        if ignored:
            keys = ", ".join(ignored)
            self.warnings.append(f"Ignored options on container {start.name!r}: {keys}")
        return bind_options(BASE_STYLE, start.options)


class CompileService(BaseService):
    """Compile SF source text or files."""

    def compile_source(self, source: str, *, name: str = "<string>") -> ServiceResult:
        """Compile *source* and return the serialised element tree.

        Resource ceilings produce a failed result with code
        ``DOCUMENT_TOO_LARGE`` or ``TOO_MANY_FRAGMENTS``.
        """
        renderer = _DocumentRenderer(self._limits)
        with structlog.contextvars.bound_contextvars(source=name):
            try:
                elements = renderer.compile(source)
            except ResourceLimitError as exc:
                log.warning("compile.limit_exceeded", code=exc.code, limit=exc.limit)
                return ServiceResult.from_limit_error("compile", exc, source=name)
            log.debug("compile.complete", elements=len(elements), commands=renderer.commands)

        background = renderer.backgrounds[-1] if renderer.backgrounds else None
        return ServiceResult(
            ok=True,
            op="compile",
            data={
                "source": name,
                "background": background,
                "elements": elements,
            },
            warnings=renderer.warnings,
            meta={
                "elements": len(elements),
                "commands": renderer.commands,
                "backgrounds": len(renderer.backgrounds),
            },
        )

    def compile_file(self, path: Path) -> ServiceResult:
        """Read *path* as UTF-8 and compile it."""
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            return ServiceResult(
                ok=False,
                op="compile",
                error=ServiceError(
                    code="READ_ERROR",
                    message=f"Cannot read {path}: {exc}",
                    detail={"path": str(path)},
                ),
            )
        return self.compile_source(source, name=str(path))
