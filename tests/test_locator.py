from mdsnip.snippet.locator import locate_marker


def test_single_occurrence_returns_its_index():
    lines = ["alpha", "# BEGIN", "beta", "gamma"]
    assert locate_marker(lines, "BEGIN") == [1]


def test_no_occurrence_returns_empty_list():
    assert locate_marker(["a", "b"], "missing") == []
    assert locate_marker([], "x") == []


def test_multiple_lines_reported_in_order():
    lines = ["MARK one", "other", "two MARK", "MARK"]
    assert locate_marker(lines, "MARK") == [0, 2, 3]


def test_line_counted_once_even_with_repeats():
    assert locate_marker(["END END END", "x"], "END") == [0]


def test_plain_substring_not_regex():
    lines = ["a.b", "axb", "(x)"]
    assert locate_marker(lines, "a.b") == [0]
    assert locate_marker(lines, "(x)") == [2]


def test_case_sensitive():
    assert locate_marker(["begin", "BEGIN"], "BEGIN") == [1]
