# src/wcag_auditor/controllers/validation_controller.py
import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from ..checks.base import BaseChecker
from ..checks.contrast import ColorContrastChecker
from ..checks.headings import HeadingHierarchyAnalyzer
from ..checks.images import AltTextRequirementChecker
from ..checks.language import LanguageChecker
from ..checks.links import LinkTextChecker
from ..checks.lists import ListMarkupChecker
from ..checks.tables import TableAccessibilityChecker
from ..dom.builder import DOMBuilder
from ..model import (
    CriterionSummary,
    Issue,
    RemediationAction,
    ValidationOptions,
    ValidationResult,
)

logger = logging.getLogger(__name__)

# Score deduction per error, by WCAG criterion
PENALTY_MAP: Dict[str, int] = {
    '1.1.1': 5,
    '1.3.1': 3,
    '1.4.3': 3,
    '2.4.4': 2,
    '2.4.6': 2,
    '2.4.10': 5,
    '3.1.1': 2,
    '3.1.2': 2,
    '4.1.1': 2,
}
DEFAULT_PENALTY = 3
WARNING_PENALTY = 1

STANDARD_THRESHOLD = 70
STRICT_THRESHOLD = 95

OptionsInput = Optional[Union[ValidationOptions, Mapping[str, Any]]]


def default_checkers() -> List[BaseChecker]:
    """The fixed, ordered checker pipeline."""
    return [
        ColorContrastChecker(),
        HeadingHierarchyAnalyzer(),
        AltTextRequirementChecker(),
        LinkTextChecker(),
        ListMarkupChecker(),
        TableAccessibilityChecker(),
        LanguageChecker(),
    ]


def calculate_score(errors: List[Issue], warnings: List[Issue]) -> int:
    """100 minus per-criterion error penalties and one point per warning, clamped to [0, 100]."""
    score = 100
    for error in errors:
        score -= PENALTY_MAP.get(error.criterion, DEFAULT_PENALTY)
    score -= WARNING_PENALTY * len(warnings)
    return max(0, min(100, score))


def build_summary(errors: List[Issue], warnings: List[Issue]) -> List[CriterionSummary]:
    """Groups issue counts by criterion, in order of first appearance."""
    summary: Dict[str, CriterionSummary] = {}
    for issue in errors + warnings:
        entry = summary.setdefault(issue.criterion, CriterionSummary(criterion=issue.criterion))
        if issue.severity == "error":
            entry.error_count += 1
        else:
            entry.warning_count += 1
    return list(summary.values())


def build_remediation_actions(errors: List[Issue], warnings: List[Issue]) -> List[RemediationAction]:
    """Distinct suggestions across all issues, first occurrence wins."""
    actions = []
    seen = set()
    for issue in errors + warnings:
        if not issue.suggestion or issue.suggestion in seen:
            continue
        seen.add(issue.suggestion)
        actions.append(RemediationAction(
            criterion=issue.criterion,
            severity=issue.severity,
            action=issue.suggestion
        ))
    return actions


def resolve_options(options: OptionsInput, model=ValidationOptions):
    """
    Accepts an options model, a plain mapping, or None (all defaults).
    Keys mapped to None fall back to their default.
    """
    if options is None:
        return model()
    if isinstance(options, model):
        return options
    return model.model_validate({k: v for k, v in dict(options).items() if v is not None})


class ValidationController:
    """
    Orchestrates the checker pipeline over a single parsed document and
    aggregates the findings into a ValidationResult.

    Holds no per-call state; one instance can serve concurrent callers.
    """

    def __init__(self, checkers: Optional[List[BaseChecker]] = None, builder: Optional[DOMBuilder] = None):
        self.checkers = checkers if checkers is not None else default_checkers()
        self.builder = builder or DOMBuilder()

    def validate(self, html: str, options: OptionsInput = None) -> ValidationResult:
        """
        Validates HTML content against the enabled WCAG checks.

        Args:
            html (str): Fragment or full document.
            options: ValidationOptions or a mapping of the same keys.

        Returns:
            ValidationResult: score, validity, issues, summary and actions.
        """
        opts = resolve_options(options)
        doc = self.builder.parse(html)

        all_errors: List[Issue] = []
        all_warnings: List[Issue] = []

        for checker in self.checkers:
            if not getattr(opts, checker.option_key, True):
                continue
            try:
                result = checker.check(doc)
            except Exception as e:
                logger.error("Checker %s failed, skipping: %s", type(checker).__name__, e, exc_info=True)
                continue

            logger.debug(
                "%s: %d errors, %d warnings",
                type(checker).__name__, len(result.errors), len(result.warnings)
            )
            all_errors.extend(result.errors)
            all_warnings.extend(result.warnings)

        score = calculate_score(all_errors, all_warnings)
        threshold = STRICT_THRESHOLD if opts.strict_mode else STANDARD_THRESHOLD

        return ValidationResult(
            valid=score >= threshold and not all_errors,
            score=score,
            errors=all_errors,
            warnings=all_warnings,
            summary=build_summary(all_errors, all_warnings),
            remediation_actions=build_remediation_actions(all_errors, all_warnings)
        )


def validate(html: str, options: OptionsInput = None) -> ValidationResult:
    """Shortcut for ValidationController().validate(html, options)."""
    return ValidationController().validate(html, options)
