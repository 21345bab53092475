"""Locate and read ``sflang.toml``.

Lookup order: an explicit ``--config`` path, then the ``SFLANG_CONFIG``
environment variable, then the nearest ``sflang.toml`` in the working
directory or any of its parents.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "sflang.toml"
CONFIG_ENV_VAR = "SFLANG_CONFIG"


def _existing(path: Path) -> Path | None:
    return path if path.is_file() else None


def _candidates(start: Path) -> Iterator[Path]:
    for directory in (start, *start.parents):
        yield directory / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect for *start* (default: cwd), if any."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return _existing(Path(override))
    base = (start or Path.cwd()).resolve()
    return next((c for c in _candidates(base) if c.is_file()), None)


def resolve_config(config_path: str | Path | None, start: Path | None = None) -> Path | None:
    """Apply ``--config`` when given, else fall back to :func:`find_config`.

    A ``--config`` path that does not exist means "no config file"; it does
    not fall through to discovery.
    """
    if config_path:
        return _existing(Path(config_path))
    return find_config(start)


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML, reporting syntax errors as a CLI error."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc

