"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``PROTOCTL_*`` prefix
  3. TOML file    — ``protoctl.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

The project root is resolved here, at the CLI boundary, and handed to
the services as a plain value.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from protoctl.config.discovery import find_config
from protoctl.config.models import (
    BuildConfig,
    DepsConfig,
    LintConfig,
    SchemasConfig,
    ToolsConfig,
)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``protoctl.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class ProtoSettings(BaseSettings):
    """Settings for one protoctl invocation.

    Attributes:
        project_root: Directory holding the schema tree and lint config.
        config_path: The TOML file that was loaded, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PROTOCTL_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    schemas: SchemasConfig = Field(default_factory=SchemasConfig)
    lint: LintConfig = Field(default_factory=LintConfig)
    build: BuildConfig = Field(default_factory=BuildConfig)
    deps: DepsConfig = Field(default_factory=DepsConfig)
    tools: ToolsConfig = Field(default_factory=ToolsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
    ) -> ProtoSettings:
        """Construct settings from a CLI invocation.

        Discovers ``protoctl.toml`` via walk-up from *project_root* (or the
        cwd), unless *config_path* names one explicitly. Without an
        explicit root, the config file's directory is the project root,
        falling back to the cwd.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(project_root)

        resolved_root = project_root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(
                project_root=resolved_root.resolve(),
                config_path=toml_path,
            )
        finally:
            _tls.toml_path = None
