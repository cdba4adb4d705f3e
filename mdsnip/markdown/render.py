from __future__ import annotations

import re
from typing import Dict, List

from .model import CodeBlock, ParsedDoc


def _chomp(line: str) -> str:
    return line[:-1] if line.endswith("\r") else line


def _fence_for(block: CodeBlock, body_lines: List[str]) -> str:
    """
    The fence must stay longer than any fence-like run inside the new body,
    otherwise the body would close the block early.
    """
    tick = block.fence[0]
    run_pat = re.compile(rf"^ {{0,3}}({re.escape(tick)}{{3,}})[ \t]*$")
    need = len(block.fence)
    for ln in body_lines:
        m = run_pat.match(ln)
        if m and len(m.group(1)) >= need:
            need = len(m.group(1)) + 1
    return tick * need


def _render_block(doc: ParsedDoc, block: CodeBlock, body: str) -> List[str]:
    body_lines = [_chomp(ln) for ln in body.split("\n")] if body else []
    fence = _fence_for(block, body_lines)
    opening = doc.lines[block.start_line]
    info = opening[len(block.indent) + len(block.fence):]

    # the opening line keeps its own terminator through `info`
    eol = "\r" if doc.newline == "\r\n" else ""
    out: List[str] = [f"{block.indent}{fence}{info}"]
    for ln in body_lines:
        out.append((f"{block.indent}{ln}" if ln else "") + eol)
    out.append(f"{block.indent}{fence}{eol}")
    return out


def render_code_blocks(doc: ParsedDoc, bodies: Dict[int, str]) -> str:
    """
    Rebuilds the document replacing bodies of blocks with the given indices
    (positions in doc.blocks). Everything outside those blocks is kept verbatim.
    """
    if not bodies:
        out_lines = list(doc.lines)
    else:
        out_lines = []
        cur = 0
        for idx, block in enumerate(doc.blocks):
            if idx not in bodies:
                continue
            out_lines.extend(doc.lines[cur:block.start_line])
            out_lines.extend(_render_block(doc, block, bodies[idx]))
            cur = block.end_line_excl
        out_lines.extend(doc.lines[cur:])

    text = "\n".join(out_lines)
    if doc.trailing_newline and out_lines:
        text += "\n"
    return text


__all__ = ["render_code_blocks"]
