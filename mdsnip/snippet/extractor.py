from __future__ import annotations

import re
from typing import List, Literal, Optional, Sequence

from .locator import locate_marker
from .rewriter import rewrite_snippet
from ..errors import AmbiguousMarkerError, MarkerNotFoundError

MarkerRole = Literal["start", "end"]

_LEADING_SPACES = re.compile(r"^( *)")


def _resolve_marker(lines: Sequence[str], marker: str, *, role: MarkerRole, source: str) -> int:
    """Exactly one matching line is required; otherwise the extraction stops."""
    numbers = locate_marker(lines, marker)
    if not numbers:
        raise MarkerNotFoundError(role, marker, source)
    if len(numbers) > 1:
        raise AmbiguousMarkerError(role, marker, source, numbers)
    return numbers[0]


def remove_common_indentation(lines: Sequence[str]) -> List[str]:
    """
    Strips the smallest run of leading spaces shared by all non-empty lines.
    Relative indentation is preserved; empty lines do not lower the minimum.
    """
    common: Optional[int] = None
    for line in lines:
        if line == "":
            continue
        m = _LEADING_SPACES.match(line)
        width = len(m.group(1)) if m else 0
        common = width if common is None else min(common, width)

    if not common:
        return list(lines)
    return [line[common:] for line in lines]


def extract_snippet(
    content: str,
    start: Optional[str] = None,
    end: Optional[str] = None,
    *,
    source: str = "<string>",
) -> str:
    """
    Cuts the excerpt delimited by `start`/`end` out of a file's text.

    Window:
      • without `start` it begins at the first line, otherwise on the line after the marker;
      • without `end` it ends on the last line, otherwise on the marker line (inclusive).
    The last line of the window is always dropped, the rest is dedented,
    joined and passed through rewrite_snippet().

    Raises:
        MarkerNotFoundError: marker does not occur in the file
        AmbiguousMarkerError: marker occurs on several lines
    """
    lines = content.strip().split("\n")

    starting_line = 0
    ending_line = len(lines) - 1

    if start:
        starting_line = _resolve_marker(lines, start, role="start", source=source) + 1
    if end:
        ending_line = _resolve_marker(lines, end, role="end", source=source)

    window = lines[starting_line:ending_line + 1]

    # the trailing delimiter line never reaches the output
    body = remove_common_indentation(window[:-1])

    return rewrite_snippet("\n".join(body))


__all__ = ["extract_snippet", "remove_common_indentation", "MarkerRole"]
