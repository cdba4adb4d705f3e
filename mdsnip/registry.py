from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Iterator, List, Optional


class ReferencedFiles:
    """
    Files referenced by imported code blocks.

    Paths are stored relative to `cwd` (POSIX), deduplicated, in the order
    they were first seen. The registry only grows: one instance accumulates
    across all documents processed with it, and it is read at the end
    (e.g. to declare build dependencies).
    """

    def __init__(self, cwd: Optional[Path] = None):
        self.cwd = (cwd or Path.cwd()).resolve()
        # dict as an insertion-ordered set
        self._paths: Dict[str, None] = {}

    def add(self, abs_path: Path | str) -> str:
        rel = Path(os.path.relpath(Path(abs_path), self.cwd)).as_posix()
        self._paths.setdefault(rel, None)
        return rel

    def as_list(self) -> List[str]:
        return list(self._paths)

    def __contains__(self, rel_path: object) -> bool:
        return rel_path in self._paths

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._paths))

    def __len__(self) -> int:
        return len(self._paths)


__all__ = ["ReferencedFiles"]
