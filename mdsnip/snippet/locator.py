from __future__ import annotations

from typing import List, Sequence


def locate_marker(lines: Sequence[str], needle: str) -> List[int]:
    """
    Indices of all lines containing `needle` (plain, case-sensitive substring).
    A line counts once no matter how many times the needle occurs in it.
    Absence and ambiguity are the caller's business: an empty list is returned as is.
    """
    return [i for i, line in enumerate(lines) if needle in line]


__all__ = ["locate_marker"]
