# tests/auditor/test_list_checker.py
import pytest

from wcag_auditor.checks.lists import ListMarkupChecker, match_list_marker


@pytest.fixture
def checker():
    return ListMarkupChecker()


@pytest.mark.parametrize("text, expected", [
    ("- item", "unordered"),
    ("• item", "unordered"),
    ("* item", "unordered"),
    ("-- item", "unordered"),
    ("1. item", "ordered"),
    ("12) item", "ordered"),
    ("b. item", "ordered"),
    ("-item", None),
    ("Plain sentence.", None),
])
def test_match_list_marker(text, expected):
    matched = match_list_marker(text)
    assert (matched[1] if matched else None) == expected


def test_three_pseudo_items_warn(parse, checker):
    result = checker.check(parse("<p>- Apples</p><p>- Pears</p><p>- Plums</p>"))
    assert result.errors == []
    assert len(result.warnings) == 1
    warning = result.warnings[0]
    assert warning.criterion == "1.3.1"
    assert warning.extra["pseudo_list_count"] == 3
    assert warning.extra["list_type"] == "unordered"
    assert warning.element == "<p>- Apples...</p>"


def test_two_pseudo_items_do_not_warn(parse, checker):
    result = checker.check(parse("<p>- Apples</p><p>- Pears</p>"))
    assert result.warnings == []


def test_detection_groups_across_types(parse, checker):
    """Detection only breaks on a non-matching paragraph; the first item decides the type."""
    doc = parse("<p>1. One</p><p>- Two</p><p>- Three</p><p>Break</p><p>- a</p><p>- b</p>")
    result = checker.check(doc)
    assert len(result.warnings) == 1
    assert result.warnings[0].extra["pseudo_list_count"] == 3
    assert result.warnings[0].extra["list_type"] == "ordered"


def test_convert_unordered(parse, checker):
    doc = parse("<h1>Fruit</h1><p>- Apples</p><p>- Pears</p><p>- Plums</p><p>The end.</p>")
    assert checker.convert_pseudo_lists(doc) == 1
    assert doc.inner_html() == (
        "<h1>Fruit</h1><ul><li>Apples</li><li>Pears</li><li>Plums</li></ul><p>The end.</p>"
    )


def test_convert_ordered(parse, checker):
    doc = parse("<p>1. First</p><p>2) Second</p><p>3. Third</p>")
    assert checker.convert_pseudo_lists(doc) == 1
    assert doc.inner_html() == "<ol><li>First</li><li>Second</li><li>Third</li></ol>"


def test_convert_splits_on_type_change(parse, checker):
    doc = parse("<p>1. One</p><p>- Two</p><p>- Three</p>")
    assert checker.convert_pseudo_lists(doc) == 0
    assert doc.find_all("ul") == []
    assert len(doc.find_all("p")) == 3


def test_unclosed_paragraphs_are_separate_items(parse, checker):
    doc = parse("<p>- apple<p>- pear<p>- plum")
    assert checker.check(doc).warnings[0].extra["pseudo_list_count"] == 3
    assert checker.convert_pseudo_lists(doc) == 1
    assert doc.inner_html() == "<ul><li>apple</li><li>pear</li><li>plum</li></ul>"
