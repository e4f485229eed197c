# src/wcag_auditor/model.py
from typing import Any, Dict, List, Literal, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

ELEMENT_SNIPPET_LIMIT = 200


class Issue(BaseModel):
    """
    A single accessibility finding produced by a checker.

    Issues are immutable once created; checker specific data (table index,
    contrast ratio, pseudo-list size, ...) travels in `extra`.
    """
    model_config = ConfigDict(frozen=True)

    criterion: str  # WCAG success criterion, e.g. '1.1.1'
    severity: Literal["error", "warning"]
    element: str = ""  # HTML snippet, truncated with '...'
    description: str
    suggestion: str = ""
    extra: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("element", mode="before")
    @classmethod
    def truncate_element(cls, v: Any) -> str:
        """Keeps element snippets short enough for reports."""
        v = "" if v is None else str(v)
        if len(v) > ELEMENT_SNIPPET_LIMIT:
            return v[:ELEMENT_SNIPPET_LIMIT] + "..."
        return v


class CheckResult(NamedTuple):
    errors: List[Issue]
    warnings: List[Issue]


class CriterionSummary(BaseModel):
    criterion: str
    error_count: int = 0
    warning_count: int = 0


class RemediationAction(BaseModel):
    criterion: str
    severity: Literal["error", "warning"]
    action: str


class ValidationResult(BaseModel):
    """Outcome of a single validate() call."""
    valid: bool
    score: int = Field(ge=0, le=100)
    errors: List[Issue] = Field(default_factory=list)
    warnings: List[Issue] = Field(default_factory=list)
    summary: List[CriterionSummary] = Field(default_factory=list)
    remediation_actions: List[RemediationAction] = Field(default_factory=list)


class RemediationResult(BaseModel):
    """Outcome of a single remediate() call."""
    content: str
    fixes_applied: List[str] = Field(default_factory=list)
    fix_count: int = 0


class ValidationOptions(BaseModel):
    """
    Which checks to run and how strictly to judge the score.

    Every check defaults to enabled. `strict_mode` raises the pass
    threshold from 70 to 95.
    """
    model_config = ConfigDict(extra="ignore")

    check_contrast: bool = True
    check_headings: bool = True
    check_images: bool = True
    check_links: bool = True
    check_lists: bool = True
    check_tables: bool = True
    check_language: bool = True
    strict_mode: bool = False


class RemediationOptions(BaseModel):
    """
    Which deterministic fixes to apply.

    `fix_bold_paragraphs` left as None follows `fix_headings`, since promoting
    bold paragraphs is itself a heading fix.
    """
    model_config = ConfigDict(extra="ignore")

    fix_headings: bool = True
    fix_tables: bool = True
    fix_lists: bool = True
    fix_bold_paragraphs: Optional[bool] = None

    @property
    def bold_paragraphs_enabled(self) -> bool:
        if self.fix_bold_paragraphs is None:
            return self.fix_headings
        return self.fix_bold_paragraphs
