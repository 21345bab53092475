"""SflSettings — one frozen object for CLI flags, env vars, and ``sflang.toml``.

Sources, highest priority first: keyword arguments (the CLI flags),
``SFLANG_*`` environment variables with ``__`` between nested keys, the
TOML file, then the defaults in :mod:`sflang.config.models`.
"""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from sflang.config.discovery import read_toml, resolve_config
from sflang.config.models import CompilerConfig, OutputConfig

# Parsed TOML for the settings object currently being built.
_toml_data: ContextVar[dict[str, Any]] = ContextVar("sflang_toml_data", default={})


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Serve the already-parsed ``sflang.toml`` sections to pydantic-settings."""

    def __init__(self, settings_cls: type[BaseSettings], data: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._data = data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        fields = self.settings_cls.model_fields
        return {name: value for name, value in self._data.items() if name in fields}


class SflSettings(BaseSettings):
    """Everything a command needs to know about how it was invoked."""

    model_config = {
        "frozen": True,
        "env_prefix": "SFLANG_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    compiler: CompilerConfig = Field(default_factory=CompilerConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, _toml_data.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> SflSettings:
        """Build settings for one invocation.

        Raises:
            click.ClickException: If the config file is not valid TOML.
        """
        toml_path = resolve_config(config_path, start)
        token = _toml_data.set(read_toml(toml_path) if toml_path else {})
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _toml_data.reset(token)
