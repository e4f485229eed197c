# tests/auditor/test_validation_controller.py
import logging

import pytest

from wcag_auditor.checks.base import BaseChecker
from wcag_auditor.controllers.validation_controller import (
    ValidationController,
    build_remediation_actions,
    calculate_score,
    default_checkers,
    resolve_options,
    validate,
)
from wcag_auditor.model import Issue, RemediationOptions, ValidationOptions, ValidationResult

COMPLIANT = '<div lang="en"><h1>Annual report</h1><h2>Revenue</h2><p>Revenue grew.</p></div>'


def make_issue(criterion, severity="error", suggestion="Fix it."):
    return Issue(criterion=criterion, severity=severity, description="d", suggestion=suggestion)


def test_simple_fragment_is_valid():
    result = validate("<h1>T</h1><h2>S</h2><p>x</p>")
    assert isinstance(result, ValidationResult)
    assert result.errors == []
    assert result.score >= 70
    assert result.valid


def test_missing_alt_always_errors():
    result = validate('<p>Intro</p><img src="chart.png">')
    assert "1.1.1" in [e.criterion for e in result.errors]
    assert not result.valid


def test_three_missing_alts_score():
    result = validate("<img src=a.jpg><img src=b.jpg><img src=c.jpg>")
    assert [e.criterion for e in result.errors] == ["1.1.1"] * 3
    assert result.score <= 85


def test_compliant_content_scores_100():
    result = validate(COMPLIANT)
    assert result.score == 100
    assert result.valid
    assert result.summary == []
    assert result.remediation_actions == []


@pytest.mark.parametrize("criterion, penalty", [
    ("1.1.1", 5), ("1.3.1", 3), ("1.4.3", 3), ("2.4.4", 2), ("2.4.6", 2),
    ("2.4.10", 5), ("3.1.1", 2), ("3.1.2", 2), ("4.1.1", 2), ("9.9.9", 3),
])
def test_error_penalties(criterion, penalty):
    assert calculate_score([make_issue(criterion)], []) == 100 - penalty


def test_warnings_cost_one_point_and_score_is_clamped():
    warnings = [make_issue("1.1.1", "warning")] * 4
    assert calculate_score([], warnings) == 96
    assert calculate_score([make_issue("1.1.1")] * 30, warnings) == 0


def test_strict_mode_threshold():
    html = '<div lang="en"><h1>Links</h1>' + '<a href="/a">here</a>' * 6 + "</div>"
    standard = validate(html)
    strict = validate(html, {"strict_mode": True})
    assert standard.errors == [] and standard.score == 94
    assert standard.valid
    assert not strict.valid


def test_any_error_makes_content_invalid():
    result = validate('<div lang="en"><h1>Title</h1><h3>Sub</h3></div>')
    assert result.score == 97
    assert not result.valid


def test_checks_can_be_disabled():
    html = "<img src=a.jpg><h1>T</h1><h3>S</h3>"
    result = validate(html, ValidationOptions(check_images=False, check_headings=False, check_language=False))
    assert result.errors == []
    assert result.warnings == []
    # Plain mappings work too, unknown keys are ignored
    result = validate(html, {"check_images": False, "unknown": 1})
    assert "1.1.1" not in [e.criterion for e in result.errors]


def test_summary_and_actions():
    html = '<img src="a.jpg"><img src="b.jpg"><a href="/x">click here</a>'
    result = validate(html)
    summary = {s.criterion: (s.error_count, s.warning_count) for s in result.summary}
    assert summary == {"1.1.1": (2, 0), "2.4.4": (0, 1), "3.1.1": (0, 1)}
    assert [s.criterion for s in result.summary] == ["1.1.1", "2.4.4", "3.1.1"]
    # Two identical alt suggestions collapse into one action
    assert [a.criterion for a in result.remediation_actions] == ["1.1.1", "2.4.4", "3.1.1"]


def test_remediation_actions_keep_first_occurrence():
    errors = [make_issue("1.1.1", suggestion="A"), make_issue("1.3.1", suggestion="B")]
    warnings = [make_issue("2.4.4", "warning", suggestion="A"), make_issue("2.4.6", "warning", suggestion="")]
    actions = build_remediation_actions(errors, warnings)
    assert [(a.criterion, a.severity, a.action) for a in actions] == [("1.1.1", "error", "A"), ("1.3.1", "error", "B")]


@pytest.mark.parametrize("html", ["", "just text", "<div><p>unclosed <b>bold", "<<<>>>", "<table><tr><th>"])
def test_validate_is_total(html):
    result = validate(html)
    assert 0 <= result.score <= 100


def test_failing_checker_is_skipped():
    class BrokenChecker(BaseChecker):
        option_key = "check_broken"

        def check(self, doc):
            raise RuntimeError("boom")

    controller = ValidationController(checkers=[BrokenChecker()] + default_checkers())
    result = controller.validate("<img src=a.jpg>")
    assert "1.1.1" in [e.criterion for e in result.errors]


def test_issue_element_is_truncated():
    issue = Issue(criterion="1.1.1", severity="error", description="d", element="x" * 250)
    assert issue.element == "x" * 200 + "..."


MIXED_DOCUMENT = (
    '<html lang="en"><body>'
    "<h1>Quarterly figures</h1>"
    '<p style="color: #777; background-color: #fff">Grey note</p>'
    '<img src="chart.png" alt="Revenue chart">'
    '<a href="/more">here</a>'
    "<p>- North</p><p>- South</p><p>- West</p>"
    "<table><tr><td>Region</td><td>Total</td></tr><tr><td>North</td><td>12</td></tr></table>"
    "</body></html>"
)


@pytest.mark.parametrize("checker", default_checkers(), ids=lambda c: type(c).__name__)
def test_each_checker_runs_on_a_mixed_document(parse, checker):
    result = checker.check(parse(MIXED_DOCUMENT))
    assert isinstance(result.errors, list) and isinstance(result.warnings, list)


def test_default_pipeline_logs_no_checker_failures(caplog):
    with caplog.at_level(logging.ERROR):
        result = validate(MIXED_DOCUMENT)
    assert "failed, skipping" not in caplog.text
    assert [e.criterion for e in result.errors] == ["1.4.3", "1.3.1"]
    assert [w.criterion for w in result.warnings] == ["2.4.4", "1.3.1", "1.3.1"]


def test_low_contrast_is_reported_by_validate():
    result = validate('<p style="color:#777; background-color:#fff">Grey</p>')
    assert [e.criterion for e in result.errors] == ["1.4.3"]
    assert result.errors[0].extra["contrast_ratio"] == 4.48
    assert result.score == 96
    assert not result.valid


def test_gradient_background_is_not_reported_by_validate():
    result = validate('<p style="color:#999; background: linear-gradient(white, black)">x</p>')
    assert result.errors == []


def test_none_option_values_use_defaults():
    assert resolve_options({"check_images": None, "strict_mode": None}) == ValidationOptions()
    assert resolve_options({"fix_headings": None, "fix_lists": False}, RemediationOptions) == RemediationOptions(fix_lists=False)
    result = validate("<img src=a.jpg>", {"check_images": None})
    assert "1.1.1" in [e.criterion for e in result.errors]


def test_fragment_with_html_in_a_comment_gets_language_warning():
    result = validate("<!-- copied from <html> template --><h1>T</h1><p>x</p>")
    assert [w.criterion for w in result.warnings] == ["3.1.1"]


def test_rejected_markup_is_still_inspected():
    result = validate("<img src=a.jpg><![foo]>")
    assert "1.1.1" in [e.criterion for e in result.errors]
