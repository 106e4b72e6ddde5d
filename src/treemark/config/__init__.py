"""Configuration loading, schema, and defaults."""

from treemark.config.loader import ConfigError, load_config
from treemark.config.schema import (
    OutputConfig,
    StatusConfig,
    SymbolsConfig,
    TreemarkConfig,
)

__all__ = [
    "ConfigError",
    "OutputConfig",
    "StatusConfig",
    "SymbolsConfig",
    "TreemarkConfig",
    "load_config",
]
