"""
Utilities for working with CLI in tests.
"""

import json
import os
import re
import subprocess
import sys
from pathlib import Path

# Repository root, so that `python -m mdsnip.cli` resolves without installation
_REPO_ROOT = Path(__file__).resolve().parents[2]


def run_cli(root: Path, *args: str, binary: bool = False) -> subprocess.CompletedProcess:
    """
    Runs mdsnip.cli with specified arguments in the given directory.

    Args:
        root: Working directory for command execution
        *args: Command line arguments for mdsnip.cli
        binary: Keep stdout/stderr as raw bytes

    Returns:
        CompletedProcess with execution results
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(p for p in (str(_REPO_ROOT), env.get("PYTHONPATH", "")) if p)
    env.pop("MDSNIP_DEBUG", None)
    if binary:
        return subprocess.run([sys.executable, "-m", "mdsnip.cli", *args], cwd=root, env=env, capture_output=True)
    return subprocess.run(
        [sys.executable, "-m", "mdsnip.cli", *args],
        cwd=root, env=env, capture_output=True, text=True, encoding="utf-8"
    )


def jload(s: str):
    """
    Parses a JSON string, automatically removing ANSI escape codes.
    """
    # Remove all ANSI escape sequences of the form \x1b[<digits>m
    clean = re.sub(r'\x1b\[[0-9;]*m', '', s)
    return json.loads(clean)


__all__ = ["run_cli", "jload"]
