from mdsnip.markdown.parser import parse_code_blocks
from mdsnip.markdown.render import render_code_blocks

DOC = """\
# Title

```js file=./a.js start=S
old
```

~~~
plain
~~~

Tail
"""


def test_blocks_and_info_string():
    doc = parse_code_blocks(DOC)
    assert len(doc.blocks) == 2
    first, second = doc.blocks
    assert first.lang == "js"
    assert first.meta == "file=./a.js start=S"
    assert first.body == ["old"]
    assert (first.start_line, first.end_line_excl) == (2, 5)
    assert second.lang is None and second.meta is None
    assert second.value == "plain"


def test_lang_only_has_no_meta():
    doc = parse_code_blocks("```python\nx\n```\n")
    assert doc.blocks[0].lang == "python"
    assert doc.blocks[0].meta is None


def test_unclosed_block_runs_to_end():
    doc = parse_code_blocks("```py\nx = 1\n")
    block = doc.blocks[0]
    assert not block.closed
    assert block.body == ["x = 1"]
    assert block.end_line_excl == 2


def test_indented_fence_strips_its_indentation():
    doc = parse_code_blocks("  ```js\n  a\n    b\n  ```\n")
    block = doc.blocks[0]
    assert block.indent == "  "
    assert block.body == ["a", "  b"]


def test_shorter_fence_does_not_close():
    doc = parse_code_blocks("````\n```\n````\n")
    assert doc.blocks[0].body == ["```"]


def test_backtick_info_with_backtick_is_not_a_fence():
    doc = parse_code_blocks("```a`b\n")
    assert doc.blocks == []


def test_render_replaces_only_selected_block():
    doc = parse_code_blocks(DOC)
    out = render_code_blocks(doc, {0: "new\nlines"})
    assert out == (
        "# Title\n\n"
        "```js file=./a.js start=S\nnew\nlines\n```\n\n"
        "~~~\nplain\n~~~\n\n"
        "Tail\n"
    )


def test_render_without_bodies_keeps_text():
    doc = parse_code_blocks(DOC)
    assert render_code_blocks(doc, {}) == DOC


def test_render_empty_body():
    doc = parse_code_blocks("```js file=a.js\nold\n```\n")
    assert render_code_blocks(doc, {0: ""}) == "```js file=a.js\n```\n"


def test_render_lengthens_fence_when_body_contains_one():
    doc = parse_code_blocks("```md file=a.md\n```\n")
    out = render_code_blocks(doc, {0: "```\ninside\n```"})
    assert out == "````md file=a.md\n```\ninside\n```\n````\n"


def test_render_closes_unclosed_block():
    doc = parse_code_blocks("```js file=a.js\nold")
    assert render_code_blocks(doc, {0: "new"}) == "```js file=a.js\nnew\n```"


def test_render_keeps_fence_indentation():
    doc = parse_code_blocks("- item\n\n  ```js file=a.js\n  ```\n")
    out = render_code_blocks(doc, {0: "a\n\n  b"})
    assert out == "- item\n\n  ```js file=a.js\n  a\n\n    b\n  ```\n"


def test_crlf_document_keeps_its_line_endings():
    text = "# T\r\n\r\n```txt file=a.txt\r\nold\r\n```\r\n"
    doc = parse_code_blocks(text)
    block = doc.blocks[0]
    assert block.meta == "file=a.txt"
    assert block.body == ["old"]
    assert doc.newline == "\r\n"
    assert render_code_blocks(doc, {}) == text
    assert render_code_blocks(doc, {0: "x\ny"}) == "# T\r\n\r\n```txt file=a.txt\r\nx\r\ny\r\n```\r\n"


def test_form_feed_and_line_separator_stay_in_prose():
    text = "para\u2028graph\x0cform\n\n```txt\nold\n```\n"
    doc = parse_code_blocks(text)
    assert doc.lines[0] == "para\u2028graph\x0cform"
    assert render_code_blocks(doc, {0: "new"}) == "para\u2028graph\x0cform\n\n```txt\nnew\n```\n"
