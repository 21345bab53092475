"""ServiceResult and ServiceError — the contract between services and the CLI.

Every public service method returns a ServiceResult.  Resource
limit errors raised by the compiler are converted into a failed result
here, never swallowed.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from sflang.domain.errors import ResourceLimitError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (``"compile"``, ``"format"``, ``"tags"``).
        data: Operation-specific payload on success.
        warnings: Tolerated authoring problems (unknown tags, ignored options).
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (source name, counts).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def from_limit_error(cls, op: str, exc: ResourceLimitError, **detail: Any) -> ServiceResult:
        """Build a failed result for a compiler resource ceiling."""
        return cls(
            ok=False,
            op=op,
            error=ServiceError(
                code=exc.code,
                message=str(exc),
                detail={"limit": exc.limit, **detail},
            ),
        )
