from __future__ import annotations

from pathlib import Path

# Single source of truth for the configuration file location.
CONFIG_FILE = "mdsnip.yaml"


def config_path(root: Path) -> Path:
    """Path to the project configuration file <root>/mdsnip.yaml."""
    return (root / CONFIG_FILE).resolve()
