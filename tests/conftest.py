"""Shared pytest fixtures and test helpers for sflang tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from sflang.config.settings import SflSettings


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run every test from an empty directory with no SFLANG_* overrides.

    Also restores the root logger, since the CLI reconfigures logging on
    every invocation.
    """
    for name in list(os.environ):
        if name.startswith("SFLANG_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    sfl_level = logging.getLogger("sflang").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("sflang").setLevel(sfl_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> SflSettings:
    """Default settings with no config file in scope."""
    return SflSettings.from_cli(start=tmp_path)

