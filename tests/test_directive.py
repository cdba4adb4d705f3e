import pytest

from mdsnip.directive import parse_directive
from mdsnip.errors import DirectiveSyntaxError


def test_basic_arguments():
    args = parse_directive("file=./demo.js start=BEGIN end=END")
    assert args.file == "./demo.js"
    assert args.start == "BEGIN"
    assert args.end == "END"
    assert args.extra == {}


def test_quoted_values_keep_spaces():
    args = parse_directive('file=a.py start="# region demo" end=\'# endregion\'')
    assert args.start == "# region demo"
    assert args.end == "# endregion"


def test_value_may_contain_equals_sign():
    args = parse_directive('file=a.py start="x = 1"')
    assert args.start == "x = 1"


def test_bare_words_become_flags():
    args = parse_directive("file=a.py title showLineNumbers")
    assert args.file == "a.py"
    assert args.extra == {"title": True, "showLineNumbers": True}


def test_without_file():
    args = parse_directive('title="Example"')
    assert args.file is None
    assert args.extra == {"title": "Example"}


def test_bare_marker_key_carries_no_marker():
    args = parse_directive("file=a.py start")
    assert args.start is None


def test_unbalanced_quotes():
    with pytest.raises(DirectiveSyntaxError):
        parse_directive('file="a.py')
