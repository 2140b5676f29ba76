"""
WEIGHTGRAPH INFRASTRUCTURE - System-Level Modules

This package contains infrastructure components:
- config: TOML-backed configuration (msgspec structs)
- logging_setup: Handler/level configuration for the package loggers
"""

from infrastructure.config import (
    ConfigError,
    GraphConfig,
    LoggingConfig,
    WeightGraphConfig,
    load_config,
    load_toml_config,
)
from infrastructure.logging_setup import configure_logging

__all__ = [
    "ConfigError",
    "GraphConfig",
    "LoggingConfig",
    "WeightGraphConfig",
    "load_config",
    "load_toml_config",
    "configure_logging",
]
