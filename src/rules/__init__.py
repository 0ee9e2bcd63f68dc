"""Configuration for linkmap-typedoc."""

from rules.config import (
    CONFIG_FILENAME,
    ConfigError,
    LinkMapConfig,
    load_config,
    resolve_output_path,
)

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "LinkMapConfig",
    "load_config",
    "resolve_output_path",
]
