"""
Directive arguments carried by the info string of a code block.

    ```js file=./demo.js start="// BEGIN demo" end="// END demo"

Tokens are split shell-style, so quoted values may contain spaces.
A bare word without '=' becomes a boolean flag.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from .errors import DirectiveSyntaxError

ArgValue = Union[str, bool]


@dataclass(frozen=True)
class DirectiveArgs:
    file: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None
    extra: Dict[str, ArgValue] = field(default_factory=dict)


def _as_str(value: ArgValue | None) -> Optional[str]:
    # bare `start` with no value carries no marker text
    if value is None or isinstance(value, bool):
        return None
    return value


def parse_directive(meta: str) -> DirectiveArgs:
    """Parses `key=value` pairs from the meta part of a code block info string."""
    try:
        tokens = shlex.split(meta, posix=True)
    except ValueError as e:
        raise DirectiveSyntaxError(f"Invalid code block directive {meta!r}: {e}") from e

    values: Dict[str, ArgValue] = {}
    for tok in tokens:
        if "=" in tok:
            key, val = tok.split("=", 1)
            values[key.strip()] = val
        else:
            values[tok.strip()] = True

    return DirectiveArgs(
        file=_as_str(values.pop("file", None)),
        start=_as_str(values.pop("start", None)),
        end=_as_str(values.pop("end", None)),
        extra=values,
    )


__all__ = ["DirectiveArgs", "parse_directive"]
