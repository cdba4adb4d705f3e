"""
File read collaborator for the importer.

The snippet engine never touches the filesystem: the importer asks a
FileReader for text and hands the string over. Both sync and async
callers go through the same interface; a missing file always surfaces
as FileNotFoundError.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Protocol, runtime_checkable

# shared with every writer of text that came through LocalFileReader
ENCODING_ERRORS = "surrogateescape"


@runtime_checkable
class FileReader(Protocol):
    """Source of referenced file contents."""

    def read_text(self, path: Path) -> str:
        """
        Reads the whole file.

        Raises:
            FileNotFoundError: if the file does not exist
        """
        ...

    async def read_text_async(self, path: Path) -> str:
        """Same as read_text() without blocking the event loop."""
        ...


class LocalFileReader:
    """
    Reads UTF-8 files from disk.

    Undecodable bytes survive as lone surrogates (surrogateescape), so a
    document written back with the same error handler keeps its bytes.
    """

    def read_text(self, path: Path) -> str:
        if not path.is_file():
            raise FileNotFoundError(str(path))
        # newline="" keeps CRLF documents as they are on disk
        with path.open(encoding="utf-8", errors=ENCODING_ERRORS, newline="") as f:
            return f.read()

    async def read_text_async(self, path: Path) -> str:
        return await asyncio.to_thread(self.read_text, path)


__all__ = ["FileReader", "LocalFileReader", "ENCODING_ERRORS"]
