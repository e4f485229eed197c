# tests/auditor/test_remediation_controller.py
import pytest

from wcag_auditor.controllers.remediation_controller import (
    FIX_HEADINGS_MSG,
    FIX_LISTS_MSG,
    FIX_TABLES_MSG,
    RemediationController,
    is_bold_only_paragraph,
    remediate,
)
from wcag_auditor.controllers.validation_controller import validate
from wcag_auditor.model import RemediationOptions

MESSY = (
    "<h1>Guide</h1>"
    "<h3>Steps</h3>"
    "<p>- Open the box</p><p>- Read the manual</p><p>- Plug it in</p>"
    "<table><tr><td>Part</td><td>Qty</td></tr><tr><td>Cable</td><td>1</td></tr></table>"
    "<p><strong>Troubleshooting</strong></p>"
)


def test_all_fixes_in_order():
    result = remediate(MESSY)
    assert result.fixes_applied == [
        FIX_HEADINGS_MSG,
        FIX_TABLES_MSG,
        FIX_LISTS_MSG,
        "Converted 1 bold-only paragraphs to headings",
    ]
    assert result.fix_count == 4
    assert "<h2>Steps</h2>" in result.content
    assert "<h3>" not in result.content
    assert "<ul><li>Open the box</li><li>Read the manual</li><li>Plug it in</li></ul>" in result.content
    assert '<th scope="col">Part</th>' in result.content
    assert "<h2>Troubleshooting</h2>" in result.content


def test_remediation_improves_validation():
    before = validate(MESSY)
    after = validate(remediate(MESSY).content)
    assert after.score > before.score
    assert not [e for e in after.errors if e.criterion == "1.3.1" and "skipped" in e.description]


def test_second_pass_finds_nothing():
    first = remediate(MESSY)
    second = remediate(first.content)
    assert second.fix_count == 0
    assert second.fixes_applied == []
    assert second.content == first.content


def test_compliant_content_is_untouched():
    html = "<h1>Title</h1><h2>Part</h2><ul><li>a</li></ul>"
    result = remediate(html)
    assert result.fix_count == 0
    assert result.content == html


def test_fixes_can_be_disabled():
    result = remediate(MESSY, {"fix_tables": False, "fix_lists": False})
    assert result.fixes_applied == [FIX_HEADINGS_MSG, "Converted 1 bold-only paragraphs to headings"]
    assert "<td>Part</td>" in result.content
    assert "<p>- Open the box</p>" in result.content


def test_bold_fix_follows_heading_option():
    opts = RemediationOptions(fix_headings=False)
    assert not opts.bold_paragraphs_enabled
    result = RemediationController().remediate(MESSY, opts)
    assert "<h3>Steps</h3>" in result.content
    assert "<p><strong>Troubleshooting</strong></p>" in result.content

    opts = RemediationOptions(fix_headings=False, fix_bold_paragraphs=True)
    result = RemediationController().remediate(MESSY, opts)
    assert "<h2>Troubleshooting</h2>" in result.content


def test_full_document_is_returned_whole():
    html = '<!DOCTYPE html><html lang="en"><body><h1>A</h1><h4>B</h4></body></html>'
    result = remediate(html)
    assert result.fixes_applied == [FIX_HEADINGS_MSG]
    assert result.content.startswith("<!DOCTYPE html>")
    assert '<html lang="en">' in result.content
    assert "<h2>B</h2>" in result.content


@pytest.mark.parametrize("html, expected", [
    ("<p><strong>Heading</strong></p>", True),
    ("<p> <b>One</b> <strong>Two</strong> </p>", True),
    ("<p><strong>Bold</strong> and plain</p>", False),
    ("<p><em>Italic</em></p>", False),
    ("<p><strong></strong></p>", False),
    ("<p><strong>" + "x" * 121 + "</strong></p>", False),
])
def test_is_bold_only_paragraph(parse, html, expected):
    assert is_bold_only_paragraph(parse(html).find_all("p")[0]) is expected


@pytest.mark.parametrize("html", ["", "plain", "<p><b>unclosed", "<table><tr><td>a</td>"])
def test_remediate_is_total(html):
    result = remediate(html)
    assert isinstance(result.content, str)
    assert result.fix_count == len(result.fixes_applied)


def test_unclosed_paragraph_list_is_not_duplicated():
    result = remediate("<p>- apple<p>- pear<p>- plum")
    assert result.content == "<ul><li>apple</li><li>pear</li><li>plum</li></ul>"
    assert result.fixes_applied == [FIX_LISTS_MSG]


def test_rejected_markup_is_not_discarded():
    result = remediate("<p>keep me</p><![foo]>")
    assert "<p>keep me</p>" in result.content


def test_none_option_values_use_defaults():
    result = remediate("<h1>A</h1><h3>B</h3>", {"fix_headings": None, "fix_tables": None})
    assert result.fixes_applied == [FIX_HEADINGS_MSG]
