from __future__ import annotations

import re
from typing import List, Optional, Tuple

from .model import CodeBlock, ParsedDoc

_FENCE = re.compile(r"^(?P<indent> {0,3})(?P<fence>`{3,}|~{3,})(?P<info>.*)$")


def _split_info(info: str) -> Tuple[Optional[str], Optional[str]]:
    """Info string "js file=a.js start=X" → ("js", "file=a.js start=X")."""
    info = info.strip()
    if not info:
        return None, None
    parts = info.split(None, 1)
    lang = parts[0]
    meta = parts[1].strip() if len(parts) > 1 else None
    return lang, (meta or None)


def _chomp(line: str) -> str:
    return line[:-1] if line.endswith("\r") else line


def _strip_indent(line: str, width: int) -> str:
    """Content lines lose up to `width` leading spaces (the fence indentation)."""
    i = 0
    while i < width and i < len(line) and line[i] == " ":
        i += 1
    return line[i:]


def parse_code_blocks(text: str) -> ParsedDoc:
    """
    Lightweight scanner for fenced code blocks (``` / ~~~).
    An unclosed block runs to the end of the document.
    """
    lines = text.split("\n") if text else []
    if text.endswith("\n"):
        lines.pop()
    blocks: List[CodeBlock] = []

    i = 0
    n = len(lines)
    while i < n:
        m = _FENCE.match(lines[i])
        if not m:
            i += 1
            continue
        open_marks = m.group("fence")
        tick = open_marks[0]
        info = m.group("info")
        # backtick fences cannot carry backticks in the info string
        if tick == "`" and "`" in info:
            i += 1
            continue
        need = len(open_marks)
        # Closing fence: same char, at least `need` times, optional trailing spaces.
        close_pat = re.compile(rf"^(?: {{0,3}}){re.escape(tick)}{{{need},}}[ \t]*\r?$")
        indent = m.group("indent")
        lang, meta = _split_info(info)

        start = i
        i += 1
        while i < n and not close_pat.match(lines[i]):
            i += 1
        closed = i < n
        body = [_strip_indent(_chomp(ln), len(indent)) for ln in lines[start + 1:i]]
        end = i + 1 if closed else n

        blocks.append(CodeBlock(
            start_line=start,
            end_line_excl=end,
            indent=indent,
            fence=open_marks,
            lang=lang,
            meta=meta,
            body=body,
            closed=closed,
        ))
        i = end

    return ParsedDoc(
        lines=lines,
        blocks=blocks,
        trailing_newline=text.endswith("\n"),
        newline="\r\n" if "\r\n" in text else "\n",
    )


__all__ = ["parse_code_blocks"]
