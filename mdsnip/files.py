"""Discovery of Markdown documents to process (include/exclude + .gitignore)."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

import pathspec


def _spec(patterns: Sequence[str]) -> Optional[pathspec.PathSpec]:
    if not patterns:
        return None
    return pathspec.GitIgnoreSpec.from_lines(patterns)


def _read_gitignore(root: Path) -> List[str]:
    gitignore = root / ".gitignore"
    patterns: List[str] = []
    if gitignore.is_file():
        for ln in gitignore.read_text(encoding="utf-8", errors="ignore").splitlines():
            ln = ln.strip()
            if ln and not ln.startswith("#"):
                patterns.append(ln)
    return patterns


def iter_documents(
    root: Path,
    include: Sequence[str],
    exclude: Sequence[str] = (),
    *,
    respect_gitignore: bool = True,
) -> Iterator[Path]:
    """
    Sorted absolute paths of all files under *root* matching `include`.
    • never enters .git
    • drops paths matching `exclude` or the root .gitignore (if respected)
    """
    root = root.resolve()
    include_spec = _spec(include)
    if include_spec is None:
        return

    ignore_patterns = list(exclude)
    if respect_gitignore:
        ignore_patterns.extend(_read_gitignore(root))
    ignore_spec = _spec(ignore_patterns)

    found: List[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        if ".git" in dirnames:
            dirnames.remove(".git")
        for fn in filenames:
            p = Path(dirpath, fn)
            rel_posix = p.relative_to(root).as_posix()
            if not include_spec.match_file(rel_posix):
                continue
            if ignore_spec and ignore_spec.match_file(rel_posix):
                continue
            found.append(p)

    found.sort()
    yield from found


__all__ = ["iter_documents"]
