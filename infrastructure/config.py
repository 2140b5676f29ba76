"""
WEIGHTGRAPH CONFIG - TOML-backed Configuration

Configuration is loaded once from config/weightgraph.toml (or a path the
caller supplies) and converted into frozen msgspec structs.

Usage:
    from infrastructure.config import load_config

    config = load_config()
    result = Graph.from_config(structure, config.graph)
"""
from pathlib import Path
from typing import Any, Dict, Optional, Union
import tomllib
import warnings

import msgspec

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "weightgraph.toml"

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ConfigError(Exception):
    """Raised when a configuration section has the wrong shape."""
    pass


# =============================================================================
# CONFIG STRUCTS
# =============================================================================

class GraphConfig(msgspec.Struct, frozen=True, kw_only=True):
    """Default construction flags for create_graph()."""
    directed: bool = False
    weighted: bool = False


class LoggingConfig(msgspec.Struct, frozen=True, kw_only=True):
    """Settings applied to the `core` and `infrastructure` loggers."""
    level: str = "WARNING"
    format: str = DEFAULT_LOG_FORMAT


class WeightGraphConfig(msgspec.Struct, frozen=True, kw_only=True):
    graph: GraphConfig = msgspec.field(default_factory=GraphConfig)
    logging: LoggingConfig = msgspec.field(default_factory=LoggingConfig)


# =============================================================================
# LOADING
# =============================================================================

def load_toml_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load raw configuration from a TOML file.

    Returns:
        Dict with all configuration sections; {} if the file is missing
        or unreadable (a warning is emitted)
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        warnings.warn(f"Failed to load config from TOML: {e}")
        return {}


def load_config(
    path: Optional[Union[str, Path]] = None,
    config_dict: Optional[Dict[str, Any]] = None,
) -> WeightGraphConfig:
    """
    Load and type-check configuration.

    Args:
        path: TOML file to read (defaults to config/weightgraph.toml)
        config_dict: Optional pre-loaded config; skips reading the file

    Raises:
        ConfigError: If a known section has the wrong shape
    """
    if config_dict is None:
        config_dict = load_toml_config(path)

    try:
        return msgspec.convert(config_dict, WeightGraphConfig)
    except msgspec.ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
