from __future__ import annotations

from pathlib import Path
from typing import Any

import tomllib
from pydantic import BaseModel, ConfigDict, Field, field_validator

from contract.artifacts import DEFAULT_NAMESPACES
from linkmap.aliases import CONSTRUCTOR_NAME

CONFIG_FILENAME = "linkmap.toml"


class LinkMapConfig(BaseModel):
    """Configuration for link-mapping generation."""

    model_config = ConfigDict(extra="forbid")

    namespaces: list[str] = Field(
        default_factory=lambda: list(DEFAULT_NAMESPACES),
        description="Namespace tags written to the document",
    )
    include_default_label: bool = Field(
        default=True,
        description="Write defaultLabel on each record (false = legacy lean shape)",
    )
    constructor_name: str = Field(
        default=CONSTRUCTOR_NAME,
        description="Leaf member name whose bare alias is not emitted",
    )
    output_path: str | None = Field(
        default=None,
        description="Output path used when none is given on the command line",
    )

    @field_validator("namespaces")
    @classmethod
    def validate_namespaces(cls, v: list[str]) -> list[str]:
        if not v:
            msg = "namespaces must list at least one tag"
            raise ValueError(msg)
        if any(not tag.strip() for tag in v):
            msg = "namespaces must not contain empty tags"
            raise ValueError(msg)
        return v

    @field_validator("constructor_name")
    @classmethod
    def validate_non_empty(cls, v: str) -> str:
        if not v:
            msg = "value must be a non-empty string"
            raise ValueError(msg)
        return v


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


def resolve_output_path(root: Path, output_path: str) -> Path:
    """Resolve a config-provided output_path relative to the project root."""
    if not output_path:
        msg = "output_path must be a non-empty path"
        raise ConfigError(msg)

    path = Path(output_path).expanduser()
    if not path.is_absolute():
        path = root / path
    return path.resolve()


def load_config(root: Path) -> LinkMapConfig:
    """Load configuration from linkmap.toml if it exists."""
    config_path = Path(root) / CONFIG_FILENAME

    if not config_path.is_file():
        return LinkMapConfig()

    try:
        with config_path.open("rb") as f:
            data: dict[str, Any] = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return LinkMapConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e
