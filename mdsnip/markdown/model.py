from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class CodeBlock:
    """Fenced code block of the document."""
    start_line: int            # index of the opening fence line (0-based)
    end_line_excl: int         # first line after the closing fence (or len(lines) if unclosed)
    indent: str                # indentation of the opening fence (0..3 spaces)
    fence: str                 # "```", "~~~~", ...
    lang: Optional[str]        # first word of the info string
    meta: Optional[str]        # rest of the info string
    body: List[str] = field(default_factory=list)
    closed: bool = True

    @property
    def value(self) -> str:
        return "\n".join(self.body)

    def has_lang(self) -> bool:
        return bool(self.lang)


@dataclass
class ParsedDoc:
    """
    Result of scanning a Markdown document:
      • source lines;
      • fenced code blocks in document order;
      • whether the text ended with a newline (restored on render);
      • the line terminator generated lines get ("\n" or "\r\n").

    Lines are split on "\n" only: a CRLF document keeps its "\r" on every
    line, and form feeds or Unicode separators inside prose stay in place.
    """
    lines: List[str]
    blocks: List[CodeBlock]
    trailing_newline: bool = True
    newline: str = "\n"


__all__ = ["CodeBlock", "ParsedDoc"]
