# src/wcag_auditor/checks/headings.py
import logging
import re
from typing import List

from ..dom.core import HEADING_TAGS, heading_level, text_snippet, word_count
from ..dom.models import HTMLDocument
from ..model import CheckResult
from .base import BaseChecker

logger = logging.getLogger(__name__)

LONG_CONTENT_WORDS = 500

GENERIC_HEADING_PATTERNS = [
    re.compile(r'^introduction$', re.IGNORECASE),
    re.compile(r'^conclusion$', re.IGNORECASE),
    re.compile(r'^overview$', re.IGNORECASE),
    re.compile(r'^summary$', re.IGNORECASE),
    re.compile(r'^untitled$', re.IGNORECASE),
    re.compile(r'^heading$', re.IGNORECASE),
    re.compile(r'^section\s*\d*$', re.IGNORECASE),
]


def corrected_levels(levels: List[int]) -> List[int]:
    """
    Computes a heading sequence without skipped levels.

    The first heading keeps its level. A later heading keeps its level when it
    does not go deeper than the previous *corrected* level + 1; otherwise it is
    clamped to previous + 1 (capped at 6).
    """
    corrected = []
    prev = 0
    for level in levels:
        if prev and level > prev + 1:
            level = min(6, prev + 1)
        corrected.append(level)
        prev = level
    return corrected


class HeadingHierarchyAnalyzer(BaseChecker):
    """
    WCAG 1.3.1 / 2.4.6 / 2.4.10 heading structure.

    Skip detection compares each heading with the literal level of the heading
    before it, so every jump in the source is reported. fix_hierarchy() uses
    the corrected sequence instead, so the rewrite is self-consistent.
    """
    option_key = "check_headings"
    criteria = ("1.3.1", "2.4.6", "2.4.10")

    def check(self, doc: HTMLDocument) -> CheckResult:
        errors, warnings = [], []
        nodes = doc.find_all(HEADING_TAGS)

        if not nodes:
            words = word_count(doc.text())
            if words > LONG_CONTENT_WORDS:
                errors.append(self.error(
                    "2.4.10",
                    f"Content has {words} words but no headings. Long content should be organized with headings.",
                    "Add heading elements (h1-h6) to break up and organize the content.",
                    word_count=words
                ))
            return CheckResult(errors, warnings)

        headings = [(heading_level(node), node.get_text().strip()) for node in nodes]
        h1_count = sum(1 for level, _ in headings if level == 1)

        if h1_count == 0:
            warnings.append(self.warning(
                "2.4.6",
                "No H1 heading found in the content.",
                "Add an H1 heading to establish the main topic of the content."
            ))
        elif h1_count > 1:
            warnings.append(self.warning(
                "2.4.6",
                f"Multiple H1 headings found ({h1_count}). A page should typically have one H1.",
                "Consider using only one H1 and converting others to H2 or lower."
            ))

        prev_level = 0
        for level, text in headings:
            snippet = f"<h{level}>{text_snippet(text, 60)}</h{level}>"

            if not text:
                errors.append(self.error(
                    "2.4.6",
                    f"Empty H{level} heading found.",
                    "Add meaningful text to the heading or remove it if not needed.",
                    element=snippet,
                    heading_level=level
                ))
                continue

            if prev_level and level > prev_level + 1:
                errors.append(self.error(
                    "1.3.1",
                    f"Heading level skipped from H{prev_level} to H{level}.",
                    f"Change to H{prev_level + 1} to maintain proper heading hierarchy.",
                    element=snippet,
                    heading_level=level
                ))

            if any(pattern.match(text) for pattern in GENERIC_HEADING_PATTERNS):
                warnings.append(self.warning(
                    "2.4.6",
                    f'Generic heading text: "{text}". Headings should be descriptive.',
                    "Use a more descriptive heading that conveys the section content.",
                    element=snippet,
                    heading_level=level
                ))

            prev_level = level

        return CheckResult(errors, warnings)

    def fix_hierarchy(self, doc: HTMLDocument) -> int:
        """
        Retags headings whose corrected level differs from their own.
        Attributes and children are untouched. Returns the number of retagged headings.
        """
        nodes = doc.find_all(HEADING_TAGS)
        if not nodes:
            return 0

        changed = 0
        levels = [heading_level(node) for node in nodes]
        for node, old_level, new_level in zip(nodes, levels, corrected_levels(levels)):
            if new_level != old_level:
                node.name = f"h{new_level}"
                changed += 1

        logger.debug("Heading hierarchy: retagged %d of %d headings", changed, len(nodes))
        return changed
