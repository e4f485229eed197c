# src/wcag_auditor/checks/links.py
import re

from ..dom.core import element_snippet, get_attr
from ..dom.models import HTMLDocument
from ..model import CheckResult
from .base import BaseChecker

GENERIC_LINK_TEXT = {
    'click here',
    'read more',
    'more',
    'here',
    'link',
    'this',
    'learn more',
    'details',
    'info',
    'continue',
    'go',
}

BARE_URL_PATTERN = re.compile(r'^https?://', re.IGNORECASE)


class LinkTextChecker(BaseChecker):
    """
    WCAG 2.4.4 Link Purpose (In Context).

    A link needs an accessible name: its own text, aria-label,
    aria-labelledby, or a descendant image carrying an alt attribute.
    Names supplied through aria attributes are trusted as-is.
    """
    option_key = "check_links"
    criteria = ("2.4.4",)

    def check(self, doc: HTMLDocument) -> CheckResult:
        errors, warnings = [], []

        for link in doc.find_all("a"):
            snippet = element_snippet(link)
            link_text = link.get_text().strip()
            aria_label = (get_attr(link, "aria-label") or "").strip()
            aria_labelledby = (get_attr(link, "aria-labelledby") or "").strip()
            has_alt_image = link.find("img", alt=True) is not None

            if not (link_text or aria_label or aria_labelledby or has_alt_image):
                errors.append(self.error(
                    "2.4.4",
                    "Link has no accessible name (no text, aria-label, aria-labelledby, or child image with alt).",
                    "Add descriptive text to the link or use aria-label to provide an accessible name.",
                    element=snippet
                ))
                continue

            if aria_label or aria_labelledby:
                continue

            if link_text.lower() in GENERIC_LINK_TEXT:
                warnings.append(self.warning(
                    "2.4.4",
                    f'Generic link text: "{link_text}". Link text should describe the destination.',
                    "Replace with descriptive text that indicates where the link goes or what action it performs.",
                    element=snippet
                ))
                continue

            if BARE_URL_PATTERN.match(link_text):
                warnings.append(self.warning(
                    "2.4.4",
                    "Link text is a bare URL. Use descriptive text instead.",
                    "Replace the URL with descriptive text about the link destination.",
                    element=snippet
                ))

        return CheckResult(errors, warnings)
