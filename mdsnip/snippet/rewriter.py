"""
Presentation pass for command-line snippets.

Documentation sources embed compiler invocations written against test
fixtures (`${NIL_GLOBAL}`, `--config <file>`, absolute paths into the
dependency tree). Before such a snippet lands in a code block it is cut down
to the command itself and the fixture details are replaced with neutral
placeholders. Anything that does not look like such an invocation is left
untouched.

The rules are fixed. Every literal involved is a module constant so the
special case stays auditable.
"""

from __future__ import annotations

import re

# Placeholder that stands for the nil value in the sources.
NIL_SENTINEL = "NIL_GLOBAL"
NIL_LITERAL = "nil"

# Tool name that also marks a command worth sanitizing.
TOOL_LITERAL = "solc"

NIL_PLACEHOLDER = "${" + NIL_SENTINEL + "}"

TRIGGER_PATTERN = re.compile(f"{re.escape(NIL_PLACEHOLDER)}|{re.escape(TOOL_LITERAL)}")
NIL_PLACEHOLDER_PATTERN = re.compile(re.escape(NIL_PLACEHOLDER))
CONFIG_FLAG_PATTERN = re.compile(r"--config\s+\S+")
QUOTE_PATTERN = re.compile(r"['`]")
PLACEHOLDER_PATTERN = re.compile(r"\$\{([^}]+)\}")

# Greedy prefix up to the last separator; the tail is the final segment.
PATH_PATTERN = re.compile(r"(\S*/)(\S+)")
PATH_PREFIX = "path/to/"

CONFIG_FLAG_LEFTOVER = "CONFIG_FLAG"
DEPENDENCY_DIR_SENTINEL = "NODE_MODULES"
TERMINATOR = ";"


def _render_placeholder(m: re.Match) -> str:
    name = m.group(1)
    return NIL_LITERAL if name == NIL_SENTINEL else name.upper()


def normalize_paths(text: str) -> str:
    """`/usr/local/bin/foo` → `path/to/foo`; tokens without '/' stay as they are."""
    return PATH_PATTERN.sub(lambda m: PATH_PREFIX + m.group(2), text)


def rewrite_snippet(text: str) -> str:
    """
    Sanitizes a command-style snippet; returns anything else unchanged.

    Never raises: an input without a trigger token is the identity case.
    """
    m = TRIGGER_PATTERN.search(text)
    if m is None:
        return text

    # drop prompts/narration in front of the command
    result = text[m.start():]

    result = NIL_PLACEHOLDER_PATTERN.sub(NIL_LITERAL, result)
    result = CONFIG_FLAG_PATTERN.sub("", result)
    result = QUOTE_PATTERN.sub("", result)
    result = PLACEHOLDER_PATTERN.sub(_render_placeholder, result)

    result = normalize_paths(result)
    result = result.replace(CONFIG_FLAG_LEFTOVER, "", 1).strip()
    if result.endswith(TERMINATOR):
        result = result[:-len(TERMINATOR)]
    result = result.replace(DEPENDENCY_DIR_SENTINEL, "", 1)

    return result


__all__ = [
    "NIL_SENTINEL",
    "NIL_LITERAL",
    "NIL_PLACEHOLDER",
    "TOOL_LITERAL",
    "TRIGGER_PATTERN",
    "CONFIG_FLAG_PATTERN",
    "PLACEHOLDER_PATTERN",
    "PATH_PATTERN",
    "PATH_PREFIX",
    "CONFIG_FLAG_LEFTOVER",
    "DEPENDENCY_DIR_SENTINEL",
    "normalize_paths",
    "rewrite_snippet",
]
