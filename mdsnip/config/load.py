"""
Loader for the project configuration file (mdsnip.yaml).
"""

from __future__ import annotations

import logging
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .model import ConfigError, SnipConfig
from .paths import config_path

logger = logging.getLogger(__name__)

_yaml = YAML(typ="safe")


def _read_yaml_map(path: Path) -> dict:
    """Reads a YAML file and returns a mapping (empty if the file is absent)."""
    if not path.is_file():
        return {}
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise ConfigError(f"Failed to parse {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")
    return raw


def load_config(root: Path) -> SnipConfig:
    """
    Loads <root>/mdsnip.yaml. A missing file yields the default config.

    Raises:
        ConfigError: malformed YAML, non-mapping root or invalid keys
    """
    path = config_path(root)
    if not path.is_file():
        logger.debug("No %s found, using defaults", path.name)
        return SnipConfig()
    logger.debug("Loading config from %s", path)
    return SnipConfig.from_dict(_read_yaml_map(path))


__all__ = ["load_config"]
