"""Unified settings: CLI flags, env vars, and TOML config in one object.

Sources, strongest first:

1. keyword arguments (the CLI flags Click parsed)
2. ``ISOVAL_*`` environment variables, ``__`` separating nested sections
   (``ISOVAL_CODEC__PRETTY_PRINT=false``)
3. the config file: ``isoval.toml`` or ``[tool.isoval]`` in ``pyproject.toml``
4. defaults baked into :mod:`isoval.config.models`
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, InitSettingsSource, PydanticBaseSettingsSource

from isoval.config.discovery import find_config, read_config_data
from isoval.config.models import CodecConfig, ValidationConfig


class ConfigFileSource(PydanticBaseSettingsSource):
    """Settings read from the file named by the ``config_path`` init kwarg."""

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None) -> None:
        super().__init__(settings_cls)
        self.path = path
        self._table: dict[str, Any] = {}
        if path is None or not path.is_file():
            return
        try:
            self._table = read_config_data(path)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._table.get(field_name), field_name, field_name in self._table

    def __call__(self) -> dict[str, Any]:
        return dict(self._table)


class IsovalSettings(BaseSettings):
    """Frozen settings shared by the CLI and the service layer.

    Attributes:
        config_path: The file the ``[validation]``/``[codec]`` tables came
            from, or None when running on defaults.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ISOVAL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    codec: CodecConfig = Field(default_factory=CodecConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        path = None
        if isinstance(init_settings, InitSettingsSource):
            path = init_settings.init_kwargs.get("config_path")
        return init_settings, env_settings, ConfigFileSource(settings_cls, path)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **flags: Any,
    ) -> IsovalSettings:
        """Build settings for one CLI invocation.

        An explicit *config_path* that does not exist is ignored; without
        one, the nearest config file above *start* (default: cwd) is used.
        """
        if config_path:
            explicit = Path(config_path)
            path = explicit if explicit.is_file() else None
        else:
            path = find_config(start)
        return cls(config_path=path, **flags)
