"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, ``protoctl.toml`` only holds
overrides. A repository following the default layout needs no config file.
"""

from __future__ import annotations

from pydantic import BaseModel

DEFAULT_DEPENDENCIES: tuple[str, ...] = (
    "github.com/bufbuild/buf/cmd/buf@v1.25.1",
    "github.com/googleapis/api-linter/cmd/api-linter@v1.55.2",
    "google.golang.org/protobuf/cmd/protoc-gen-go@v1.31.0",
)


class SchemasConfig(BaseModel):
    """[schemas] section."""

    model_config = {"frozen": True}

    dir: str = "nexus"
    suffix: str = ".proto"


class LintConfig(BaseModel):
    """[lint] section."""

    model_config = {"frozen": True}

    config: str = "./api-linter.yaml"


class BuildConfig(BaseModel):
    """[build] section."""

    model_config = {"frozen": True}

    languages: tuple[str, ...] = ("go", "java")
    temp_prefix: str = "proto-build"


class DepsConfig(BaseModel):
    """[deps] section — ``module@version`` strings, installed in order."""

    model_config = {"frozen": True}

    packages: tuple[str, ...] = DEFAULT_DEPENDENCIES


class ToolsConfig(BaseModel):
    """[tools] section — executable names or paths of external tools."""

    model_config = {"frozen": True}

    api_linter: str = "api-linter"
    buf: str = "buf"
    protoc: str = "protoc"
    installer: str = "go"

