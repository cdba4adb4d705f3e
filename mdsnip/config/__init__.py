from __future__ import annotations

from .load import load_config
from .model import ConfigError, SnipConfig, DEFAULT_INCLUDE
from .paths import CONFIG_FILE, config_path

__all__ = [
    "load_config",
    "ConfigError",
    "SnipConfig",
    "DEFAULT_INCLUDE",
    "CONFIG_FILE",
    "config_path",
]
