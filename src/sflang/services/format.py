"""FormatService — resolve inline markers in a single text payload."""

from __future__ import annotations

import structlog

from sflang.domain.errors import ResourceLimitError
from sflang.domain.inline import flatten_runs, resolve_format
from sflang.services.base import BaseService
from sflang.services.result import ServiceResult

log = structlog.get_logger(__name__)


class FormatService(BaseService):
    """Inline-only resolution, as applied to ``format`` command payloads."""

    def resolve(self, text: str) -> ServiceResult:
        try:
            tree = resolve_format(text, max_fragments=self._limits.max_fragments)
        except ResourceLimitError as exc:
            log.warning("format.limit_exceeded", code=exc.code, limit=exc.limit)
            return ServiceResult.from_limit_error("format", exc)

        runs = [run.to_dict() for run in flatten_runs(tree)]
        return ServiceResult(
            ok=True,
            op="format",
            data={"text": text, "runs": runs, "tree": tree.to_dict()},
        )
