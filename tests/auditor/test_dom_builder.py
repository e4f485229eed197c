# tests/auditor/test_dom_builder.py
from bs4 import ParserRejectedMarkup

from wcag_auditor.dom import builder
from wcag_auditor.dom.builder import parse
from wcag_auditor.dom.core import element_snippet, get_attr, heading_level, inner_html_of, word_count


def test_fragment_is_wrapped():
    """A fragment ends up under a synthetic wrapper that is not part of the output."""
    doc = parse("<p>Hello</p><p>World</p>")
    assert doc.is_fragment
    assert doc.root.name == "div"
    assert doc.html_element is None
    assert doc.inner_html() == "<p>Hello</p><p>World</p>"
    assert inner_html_of(doc.root) == "<p>Hello</p><p>World</p>"


def test_full_document_root_is_body():
    doc = parse('<!DOCTYPE html><html lang="en"><head><title>T</title></head><body><p>x</p></body></html>')
    assert not doc.is_fragment
    assert doc.has_doctype
    assert doc.root.name == "body"
    assert doc.html_element.get("lang") == "en"
    assert "<html" in doc.inner_html()


def test_parse_never_raises_on_bad_input():
    for markup in ["", None, 42, "<div><p>unclosed <b>bold", "</span></div>", "plain text"]:
        doc = parse(markup)
        assert doc.root is not None
        assert isinstance(doc.inner_html(), str)


def test_bom_is_stripped():
    doc = parse("\ufeff<p>x</p>")
    assert doc.inner_html() == "<p>x</p>"


def test_reparse_is_stable():
    html = '<h1 id="t">Title</h1><ul><li>One</li><li>Two</li></ul><p class="a b">Text</p>'
    first = parse(html).inner_html()
    assert parse(first).inner_html() == first


def test_dom_helpers():
    doc = parse('<h3 class="x y">Some words here</h3><img src="a.png">')
    heading = doc.find_all("h3")[0]
    assert heading_level(heading) == 3
    assert get_attr(heading, "class") == "x y"
    assert get_attr(heading, "missing") is None
    assert element_snippet(doc.find_all("img")[0]) == '<img src="a.png"/>'
    assert word_count("It's a well-known fact, 42 times.") == 5


def test_unclosed_paragraphs_become_siblings():
    doc = parse("<p>- apple<p>- pear<p>- plum")
    assert doc.inner_html() == "<p>- apple</p><p>- pear</p><p>- plum</p>"
    assert [p.parent is doc.root for p in doc.find_all("p")] == [True, True, True]


def test_unclosed_paragraph_keeps_following_content():
    doc = parse("<div><p>one<p>two <b>bold</b></div><p>three</p>")
    assert doc.inner_html() == "<div><p>one</p><p>two <b>bold</b></p></div><p>three</p>"


def test_rejected_marked_section_keeps_content():
    doc = parse("<p>keep me</p><![foo]><img src=a.jpg>")
    assert "keep me" in doc.text()
    assert len(doc.find_all("img")) == 1


def test_markup_rejected_twice_is_kept_as_text(monkeypatch):
    real_soup = builder.BeautifulSoup

    def picky_soup(markup, features):
        if "<" in markup:
            raise ParserRejectedMarkup("rejected")
        return real_soup(markup, features)

    monkeypatch.setattr(builder, "BeautifulSoup", picky_soup)
    doc = parse("<p>keep me</p>")
    assert doc.is_fragment
    assert doc.text() == "<p>keep me</p>"


def test_html_mentioned_in_comment_or_script_is_still_a_fragment():
    assert parse("<!-- copied from <html> template --><h1>T</h1>").is_fragment
    assert parse('<script>document.write("<html>")</script><p>x</p>').is_fragment
    assert not parse("<HTML><body><p>x</p></body></HTML>").is_fragment
