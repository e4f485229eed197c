# src/wcag_auditor/controllers/remediation_controller.py
import logging
from typing import Any, Callable, List, Mapping, Optional, Union

from bs4 import NavigableString, Tag

from ..checks.headings import HeadingHierarchyAnalyzer
from ..checks.lists import ListMarkupChecker
from ..checks.tables import TableAccessibilityChecker
from ..dom.builder import DOMBuilder
from ..dom.models import HTMLDocument
from ..model import RemediationOptions, RemediationResult
from .validation_controller import resolve_options

logger = logging.getLogger(__name__)

BOLD_PARAGRAPH_MAX_CHARS = 120
BOLD_TAGS = ("strong", "b")

FIX_HEADINGS_MSG = "Fixed heading hierarchy (eliminated skipped levels)"
FIX_TABLES_MSG = "Added scope attributes to table headers"
FIX_LISTS_MSG = "Converted pseudo-lists to proper HTML list markup"


def is_bold_only_paragraph(p: Tag) -> bool:
    """
    True for a <p> whose only non-whitespace content is <strong>/<b> elements
    and whose text is short enough to be a heading.
    """
    text = p.get_text().strip()
    if not text or len(text) > BOLD_PARAGRAPH_MAX_CHARS:
        return False

    has_bold = False
    for child in p.children:
        if isinstance(child, Tag):
            if child.name not in BOLD_TAGS:
                return False
            has_bold = True
        elif type(child) is NavigableString and child.strip():
            return False
    return has_bold


class RemediationController:
    """
    Applies deterministic accessibility fixes to a private copy of the markup.

    Fixes run in a fixed order: heading hierarchy, table scope, pseudo-lists,
    bold-only paragraphs. A fix is reported only if it changed the tree.
    """

    def __init__(self, builder: Optional[DOMBuilder] = None):
        self.builder = builder or DOMBuilder()
        self.heading_analyzer = HeadingHierarchyAnalyzer()
        self.table_checker = TableAccessibilityChecker()
        self.list_checker = ListMarkupChecker()

    def remediate(
            self,
            html: str,
            options: Optional[Union[RemediationOptions, Mapping[str, Any]]] = None
    ) -> RemediationResult:
        """
        Remediates accessibility issues in HTML content.

        Args:
            html (str): Fragment or full document; the string itself is never modified.
            options: RemediationOptions or a mapping of the same keys.

        Returns:
            RemediationResult: the rewritten markup and the applied fix descriptions.
        """
        opts = resolve_options(options, RemediationOptions)
        doc = self.builder.parse(html)
        fixes: List[str] = []

        if opts.fix_headings:
            self._apply(doc, fixes, self.heading_analyzer.fix_hierarchy, FIX_HEADINGS_MSG)

        if opts.fix_tables:
            self._apply(doc, fixes, self.table_checker.add_scope_attributes, FIX_TABLES_MSG)

        if opts.fix_lists:
            self._apply(doc, fixes, self.list_checker.convert_pseudo_lists, FIX_LISTS_MSG)

        if opts.bold_paragraphs_enabled:
            try:
                count = self.fix_bold_paragraphs(doc)
            except Exception as e:
                logger.error("Bold paragraph fix failed, skipping: %s", e, exc_info=True)
                count = 0
            if count > 0:
                fixes.append(f"Converted {count} bold-only paragraphs to headings")

        for fix in fixes:
            logger.info("Applied fix: %s", fix)

        return RemediationResult(
            content=doc.inner_html(),
            fixes_applied=fixes,
            fix_count=len(fixes)
        )

    @staticmethod
    def _apply(doc: HTMLDocument, fixes: List[str], rewrite: Callable[[HTMLDocument], Any], message: str) -> None:
        """Runs one rewrite and records `message` only if the serialized tree changed."""
        before = doc.serialize()
        try:
            rewrite(doc)
        except Exception as e:
            logger.error("Fix '%s' failed, skipping: %s", message, e, exc_info=True)
            return
        if doc.serialize() != before:
            fixes.append(message)

    def fix_bold_paragraphs(self, doc: HTMLDocument) -> int:
        """Replaces bold-only paragraphs with an <h2> carrying their plain text."""
        targets = [p for p in doc.find_all("p") if is_bold_only_paragraph(p)]

        for p in targets:
            h2 = doc.soup.new_tag("h2")
            h2.string = p.get_text().strip()
            p.replace_with(h2)

        return len(targets)


def remediate(html: str, options: Optional[Union[RemediationOptions, Mapping[str, Any]]] = None) -> RemediationResult:
    """Shortcut for RemediationController().remediate(html, options)."""
    return RemediationController().remediate(html, options)
