"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from SnipUserError.

Programming errors and bugs should NOT inherit from SnipUserError:
they will propagate with full tracebacks.
"""

from __future__ import annotations

from typing import List


class SnipUserError(Exception):
    """
    Base class for all user-facing errors in mdsnip.

    These errors indicate problems that the user can fix:
    bad markers, broken directives, missing files, etc.
    """
    pass


class MarkerNotFoundError(SnipUserError):
    """A start/end marker does not occur in any line of the source file."""

    def __init__(self, role: str, marker: str, source: str):
        self.role = role
        self.marker = marker
        self.source = source
        super().__init__(f'Code block {role} marker "{marker}" not found in file {source}')


class AmbiguousMarkerError(SnipUserError):
    """A start/end marker occurs on more than one line."""

    def __init__(self, role: str, marker: str, source: str, lines: List[int]):
        self.role = role
        self.marker = marker
        self.source = source
        self.lines = list(lines)
        joined = ",".join(str(i) for i in self.lines)
        super().__init__(
            f"Ambiguous code block {role} marker. Found more than once in {source}, at lines {joined}"
        )


class LanguageTagMissingError(SnipUserError):
    """A block carries `file=...` in place of its language tag."""

    def __init__(self, doc: str):
        self.doc = doc
        super().__init__(f"Language tag missing on code block snippet in {doc}")


class DirectiveSyntaxError(SnipUserError):
    pass


class SnippetFileNotFoundError(SnipUserError, FileNotFoundError):
    """Referenced file is absent and missing files are not ignored."""

    def __init__(self, file_ref: str):
        self.file_ref = file_ref
        super().__init__(f"File not found: {file_ref}")

    def __str__(self) -> str:
        return f"File not found: {self.file_ref}"


__all__ = [
    "SnipUserError",
    "MarkerNotFoundError",
    "AmbiguousMarkerError",
    "LanguageTagMissingError",
    "DirectiveSyntaxError",
    "SnippetFileNotFoundError",
]
