from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from ..errors import SnipUserError
from ..importer import ImportOptions

DEFAULT_INCLUDE = ["**/*.md"]


class ConfigError(SnipUserError, ValueError):
    """Invalid mdsnip.yaml content."""
    pass


# --- helpers ---------------------------------------------------------------
def _assert_only_keys(d: Dict[str, Any] | None, allowed: Iterable[str], *, ctx: str) -> None:
    if d is None:
        return
    allowed_set = set(allowed)
    extra = set(d.keys()) - allowed_set
    if extra:
        raise ConfigError(f"{ctx}: unknown key(s): {', '.join(sorted(extra))}")


def _bool(d: Dict[str, Any], key: str, default: bool, *, ctx: str) -> bool:
    val = d.get(key, default)
    if not isinstance(val, bool):
        raise ConfigError(f"{ctx}.{key} must be a boolean, got: {val!r}")
    return val


def _patterns(d: Dict[str, Any], key: str, default: List[str], *, ctx: str) -> List[str]:
    raw = d.get(key, None)
    if raw is None:
        return list(default)
    if isinstance(raw, str):
        return [raw]
    if isinstance(raw, (list, tuple)) and all(isinstance(x, str) for x in raw):
        return list(raw)
    raise ConfigError(f"{ctx}.{key} must be a string or a list of strings")


@dataclass
class SnipConfig:
    """
    Project configuration (mdsnip.yaml).
    """
    base_dir: Optional[str] = None
    ignore_missing_files: bool = False
    use_async: bool = False
    # which documents the CLI processes by default (.gitignore syntax)
    include: List[str] = field(default_factory=lambda: list(DEFAULT_INCLUDE))
    exclude: List[str] = field(default_factory=list)
    respect_gitignore: bool = True

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> SnipConfig:
        if not d:
            # Config not set → defaults
            return SnipConfig()
        if not isinstance(d, dict):
            raise ConfigError("SnipConfig must be a mapping")
        ctx = "SnipConfig"
        _assert_only_keys(
            d,
            ["base_dir", "ignore_missing_files", "async", "include", "exclude", "respect_gitignore"],
            ctx=ctx,
        )
        base_dir = d.get("base_dir", None)
        if base_dir is not None and not isinstance(base_dir, str):
            raise ConfigError(f"{ctx}.base_dir must be a string or null")

        return SnipConfig(
            base_dir=base_dir or None,
            ignore_missing_files=_bool(d, "ignore_missing_files", False, ctx=ctx),
            use_async=_bool(d, "async", False, ctx=ctx),
            include=_patterns(d, "include", DEFAULT_INCLUDE, ctx=ctx),
            exclude=_patterns(d, "exclude", [], ctx=ctx),
            respect_gitignore=_bool(d, "respect_gitignore", True, ctx=ctx),
        )

    def to_options(self, root: Path) -> ImportOptions:
        """Relative base_dir is taken from the project root, not from the CWD."""
        base: Optional[Path] = None
        if self.base_dir is not None:
            base = (root / self.base_dir).resolve()
        return ImportOptions(
            base_dir=base,
            ignore_missing_files=self.ignore_missing_files,
            use_async=self.use_async,
        )


__all__ = ["SnipConfig", "ConfigError", "DEFAULT_INCLUDE"]
