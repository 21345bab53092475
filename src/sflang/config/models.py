"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, ``sflang.toml`` only contains
overrides.  An empty (or missing) file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from sflang.domain.inline import DEFAULT_MAX_FRAGMENTS
from sflang.domain.tree import CONTAINER_END_TAG, CONTAINER_START_TAG, DEFAULT_MAX_COMMANDS


class CompilerConfig(BaseModel):
    """[compiler] section."""

    model_config = {"frozen": True}

    max_commands: int = Field(default=DEFAULT_MAX_COMMANDS, ge=1)
    max_fragments: int = Field(default=DEFAULT_MAX_FRAGMENTS, ge=1)
    container_start_tag: str = Field(default=CONTAINER_START_TAG, min_length=1)
    container_end_tag: str = Field(default=CONTAINER_END_TAG, min_length=1)


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=100, ge=40)
    show_keys: bool = False

