import textwrap
from pathlib import Path

import pytest

from tests.infrastructure.file_utils import write, write_markdown

DEMO_SOURCE = textwrap.dedent('''\
    import os

    # BEGIN hello
    def hello():
        return "hi"
    # END hello

    class Box:
        # BEGIN method
        def open(self):
            return os.getcwd()
        # END method
''')


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Minimal project: src/demo.py with markers + docs/guide.md importing two snippets."""
    root = tmp_path
    write(root / "src" / "demo.py", DEMO_SOURCE)
    write_markdown(root / "docs" / "guide.md", """
        # Guide

        ```python file=../src/demo.py start="BEGIN hello" end="END hello"
        ```

        Methods:

        ```python file=../src/demo.py start="BEGIN method" end="END method"
        stale body
        ```
    """)
    return root


@pytest.fixture(autouse=True)
def _no_debug_env(monkeypatch):
    monkeypatch.delenv("MDSNIP_DEBUG", raising=False)
