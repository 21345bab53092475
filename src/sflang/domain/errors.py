"""Compiler exceptions.

Authoring mistakes never raise: bad statements are dropped and unknown
tags or options are ignored.  Only the resource ceilings and malformed
binding tables raise, and those propagate to the caller.
"""

from __future__ import annotations


class SfError(Exception):
    """Base class for all sflang compiler errors."""


class BindingDefinitionError(SfError):
    """A style binding was declared without any target attribute."""


class ResourceLimitError(SfError):
    """A parse exceeded one of the fixed resource ceilings."""

    code = "RESOURCE_LIMIT"

    def __init__(self, message: str, *, limit: int) -> None:
        super().__init__(message)
        self.limit = limit


class DocumentTooLargeError(ResourceLimitError):
    """More commands than ``max_commands`` were produced by one parse."""

    code = "DOCUMENT_TOO_LARGE"


class TooManyFragmentsError(ResourceLimitError):
    """An inline payload resolved into more than ``max_fragments`` nodes."""

    code = "TOO_MANY_FRAGMENTS"
