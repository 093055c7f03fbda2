"""Configuration loading for settings and credentials."""

from chticket.config.settings import (
    get_config,
    get_config_loaded_sources,
    load_config,
    load_configuration,
    reload_config,
    require_configuration,
)

__all__ = [
    "load_config",
    "get_config",
    "reload_config",
    "get_config_loaded_sources",
    "load_configuration",
    "require_configuration",
]
