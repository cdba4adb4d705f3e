"""
Unified test infrastructure for mdsnip.

Modules:
- file_utils: Utilities for creating files and directories
- cli_utils: Running the CLI in a subprocess and parsing its JSON output
- readers: In-memory FileReader doubles
"""

from .file_utils import write, write_markdown
from .cli_utils import run_cli, jload
from .readers import MemoryReader

__all__ = [
    "write",
    "write_markdown",
    "run_cli",
    "jload",
    "MemoryReader",
]
