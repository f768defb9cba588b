"""Config subsystem public API.

Provides:
    get_config() -> AggregatedConfig (schema_version + validated sections)
    load_config(dir) -> same, from an explicit directory, uncached
    as_dict()    -> dict representation
    ConfigError  -> raised on validation / unknown key
"""

from .loader import (  # noqa: F401
    AggregatedConfig,
    ConfigError,
    as_dict,
    clear_config_cache,
    get_config,
    load_config,
)

__all__ = [
    "AggregatedConfig",
    "get_config",
    "load_config",
    "as_dict",
    "ConfigError",
    "clear_config_cache",
]
