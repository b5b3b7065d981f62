"""RentSettings — one frozen object built from every configuration layer.

Precedence, strongest first:

1. CLI flags handed over by Click (init kwargs)
2. ``RENTCTL_*`` environment variables (``__`` reaches into sections)
3. ``rentctl.toml`` found by :func:`rentctl.config.discovery.find_config`
4. Defaults declared on the section models
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from rentctl.config.discovery import find_config, parse_toml
from rentctl.config.models import DatabaseConfig, PricingConfig

# pydantic-settings builds sources from the class, so the TOML file chosen
# by from_cli() travels through this variable for the duration of __init__.
_active_toml: ContextVar[Path | None] = ContextVar("rentctl_active_toml", default=None)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings layer backed by a single ``rentctl.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data = self._read(toml_path) if toml_path and toml_path.is_file() else {}

    @staticmethod
    def _read(toml_path: Path) -> dict[str, Any]:
        try:
            return parse_toml(toml_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_path}: {exc}"
            raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


class RentSettings(BaseSettings):
    """Resolved configuration for one rentctl invocation.

    Attributes:
        root: Fleet directory. Database paths are relative to it.
        config_path: The TOML file that was read, if any.
        database: Where the JSON database lives.
        pricing: Locale, currency, date style, and tax brackets.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "RENTCTL_",
        "env_nested_delimiter": "__",
    }

    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    pricing: PricingConfig = Field(default_factory=PricingConfig)

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
            TomlSettingsSource(settings_cls, _active_toml.get()),
        )

    @property
    def database_dir(self) -> Path:
        return self.root / self.database.dir

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root: Path | None = None,
        **cli_flags: Any,
    ) -> RentSettings:
        """Build settings for a CLI run.

        An explicit *config_path* that does not exist is ignored. Without
        an explicit *root*, the fleet root is the directory holding the
        config file, or the working directory when there is none.
        """
        if config_path:
            candidate = Path(config_path)
            toml_path = candidate if candidate.is_file() else None
        else:
            toml_path = find_config(root)

        if root is None:
            root = toml_path.parent if toml_path else Path.cwd()

        token = _active_toml.set(toml_path)
        try:
            return cls(root=root, config_path=toml_path, **cli_flags)
        finally:
            _active_toml.reset(token)
