# src/wcag_auditor/checks/base.py
from abc import ABC, abstractmethod
from typing import Any, Tuple

from ..dom.models import HTMLDocument
from ..model import CheckResult, Issue


class BaseChecker(ABC):
    """
    Interface for all WCAG rule engines.

    `option_key` is the stable identifier used by ValidationOptions to switch
    the checker off (e.g. 'check_images'); `criteria` lists the WCAG success
    criteria the checker can report.
    """
    option_key: str = ""
    criteria: Tuple[str, ...] = ()

    @abstractmethod
    def check(self, doc: HTMLDocument) -> CheckResult:
        """Inspects the document and returns (errors, warnings)."""
        raise NotImplementedError

    @staticmethod
    def error(criterion: str, description: str, suggestion: str, element: str = "", **extra: Any) -> Issue:
        return Issue(
            criterion=criterion,
            severity="error",
            element=element,
            description=description,
            suggestion=suggestion,
            extra=extra
        )

    @staticmethod
    def warning(criterion: str, description: str, suggestion: str, element: str = "", **extra: Any) -> Issue:
        return Issue(
            criterion=criterion,
            severity="warning",
            element=element,
            description=description,
            suggestion=suggestion,
            extra=extra
        )
