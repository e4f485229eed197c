# src/wcag_auditor/checks/language.py
from bs4 import Tag

from ..dom.models import HTMLDocument
from ..model import CheckResult
from .base import BaseChecker


class LanguageChecker(BaseChecker):
    """
    WCAG 3.1.1 Language of Page.

    Full documents must declare lang (or xml:lang) on <html>. A fragment has
    no <html> of its own; it passes when one of its top-level elements
    declares a language, otherwise an informational warning is raised since
    the host page is expected to set it.
    """
    option_key = "check_language"
    criteria = ("3.1.1",)

    def check(self, doc: HTMLDocument) -> CheckResult:
        errors, warnings = [], []

        html_el = doc.html_element
        if html_el is not None:
            if not html_el.has_attr("lang") and not html_el.has_attr("xml:lang"):
                warnings.append(self.warning(
                    "3.1.1",
                    "The HTML element is missing a lang attribute.",
                    'Add a lang attribute to the <html> element (e.g., lang="en").',
                    element="<html>"
                ))
            return CheckResult(errors, warnings)

        if doc.is_fragment:
            top_level = [child for child in doc.root.children if isinstance(child, Tag)]
            if not any(child.has_attr("lang") for child in top_level):
                warnings.append(self.warning(
                    "3.1.1",
                    "Content fragment has no language identifier. "
                    "The host page template typically sets this at the page level.",
                    "Ensure the page template includes lang attribute on the <html> element."
                ))

        return CheckResult(errors, warnings)
