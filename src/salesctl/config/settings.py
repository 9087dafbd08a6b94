"""SalesSettings: one frozen object merging every configuration layer.

Highest priority first:

1. keyword arguments (the root CLI group's flags, ``--db`` included)
2. ``SALESCTL_*`` environment variables (``__`` separates sections,
   e.g. ``SALESCTL_DATABASE__PATH``)
3. ``salesctl.toml``, from ``--config``, ``SALESCTL_CONFIG`` or walk-up
4. defaults declared on the section models

The TOML layer is a custom pydantic-settings source. The file to read is
decided in :meth:`SalesSettings.from_cli` and handed to the source
through a context variable, since pydantic builds sources inside the
constructor.
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from salesctl.config.discovery import find_config
from salesctl.config.models import CustomersConfig, DatabaseConfig

_active_toml: ContextVar[Path | None] = ContextVar("salesctl_active_toml", default=None)


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path*; syntax errors become a ClickException naming the file."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings layer backed by a parsed ``salesctl.toml``."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data = read_toml(toml_path) if toml_path is not None else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


class SalesSettings(BaseSettings):
    """Resolved configuration for one salesctl invocation.

    Attributes:
        project_root: Directory holding ``salesctl.toml``, or the CWD
            when there is none. Relative database paths hang off it.
        config_path: The TOML file in effect, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SALESCTL_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    customers: CustomersConfig = Field(default_factory=CustomersConfig)

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

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> SalesSettings:
        """Build settings for a CLI run.

        An explicit *config_path* must exist. Without one the config is
        discovered from *project_root* (or the CWD). Flags given as None
        are dropped so they never hide a value from a lower layer. A value
        that fails validation, from any layer, raises ClickException.
        """
        if config_path:
            toml_path: Path | None = Path(config_path)
            if not toml_path.is_file():
                raise click.ClickException(f"Config file not found: {config_path}")
        else:
            toml_path = find_config(project_root)

        if project_root is None:
            project_root = toml_path.parent if toml_path else Path.cwd()

        overrides = {key: value for key, value in cli_flags.items() if value is not None}

        token = _active_toml.set(toml_path)
        try:
            return cls(project_root=project_root, config_path=toml_path, **overrides)
        except ValidationError as exc:
            raise click.ClickException(f"Invalid configuration: {exc}") from exc
        finally:
            _active_toml.reset(token)
