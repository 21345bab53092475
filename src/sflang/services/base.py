"""BaseService — shared foundation for sflang services.

Every service receives the resolved :class:`SflSettings` at construction
time and derives its compile limits from the ``[compiler]`` section.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sflang.domain.tree import CompileLimits

if TYPE_CHECKING:
    from sflang.config.settings import SflSettings


class BaseService:
    """Abstract base for service-layer classes.

    Usage::

        class CompileService(BaseService):
            def compile_source(self, source: str) -> ServiceResult:
                elements = compile_document(source, limits=self._limits)
                ...
    """

    def __init__(self, settings: SflSettings) -> None:
        self._settings = settings

    @property
    def _limits(self) -> CompileLimits:
        compiler = self._settings.compiler
        return CompileLimits(
            max_commands=compiler.max_commands,
            max_fragments=compiler.max_fragments,
            start_tag=compiler.container_start_tag,
            end_tag=compiler.container_end_tag,
        )
