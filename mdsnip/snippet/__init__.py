"""
Snippet engine: marker lookup, window extraction, dedent and the
command-snippet rewriting pass. Pure functions, no I/O.
"""

from __future__ import annotations

from .extractor import extract_snippet, remove_common_indentation
from .locator import locate_marker
from .rewriter import normalize_paths, rewrite_snippet

__all__ = [
    "extract_snippet",
    "remove_common_indentation",
    "locate_marker",
    "normalize_paths",
    "rewrite_snippet",
]
