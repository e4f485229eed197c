# src/wcag_auditor/checks/lists.py
import logging
import re
from typing import List, Optional, Pattern, Tuple

from bs4 import Tag

from ..dom.core import text_snippet
from ..dom.models import HTMLDocument
from ..model import CheckResult
from .base import BaseChecker

logger = logging.getLogger(__name__)

MIN_LIST_ITEMS = 3

# Ordered: the first matching pattern decides the list type.
LIST_PATTERNS: List[Tuple[Pattern, str]] = [
    (re.compile(r'^\s*[-–—•●○]\s+'), 'unordered'),
    (re.compile(r'^\s*\*\s+'), 'unordered'),
    (re.compile(r'^\s*--\s+'), 'unordered'),
    (re.compile(r'^\s*\d+[.)]\s+'), 'ordered'),
    (re.compile(r'^\s*[a-z][.)]\s+', re.IGNORECASE), 'ordered'),
]

LIST_TAGS = {'unordered': 'ul', 'ordered': 'ol'}

# (paragraph, its text, matched pattern, list type)
ListItem = Tuple[Tag, str, Pattern, str]


def match_list_marker(text: str) -> Optional[Tuple[Pattern, str]]:
    """Returns (pattern, list type) for text that starts with a list marker."""
    for pattern, list_type in LIST_PATTERNS:
        if pattern.match(text):
            return pattern, list_type
    return None


class ListMarkupChecker(BaseChecker):
    """
    WCAG 1.3.1 pseudo-lists: runs of <p> elements faking a list with
    leading bullets, dashes or numbering.
    """
    option_key = "check_lists"
    criteria = ("1.3.1",)

    def check(self, doc: HTMLDocument) -> CheckResult:
        errors, warnings = [], []

        for group in self._group_candidates(doc, split_on_type=False):
            count = len(group)
            _, first_text, _, list_type = group[0]
            tag = LIST_TAGS[list_type]
            warnings.append(self.warning(
                "1.3.1",
                f"{count} consecutive paragraphs look like a pseudo-list. Use proper <{tag}> markup.",
                f"Convert these {count} paragraphs to a proper HTML {list_type} list.",
                element=f"<p>{text_snippet(first_text, 60)}...</p>",
                pseudo_list_count=count,
                list_type=list_type
            ))

        return CheckResult(errors, warnings)

    def convert_pseudo_lists(self, doc: HTMLDocument) -> int:
        """
        Replaces each run of at least three same-type pseudo-list paragraphs
        with a <ul>/<ol>. Markers are stripped and each item becomes a plain
        text <li>. Returns the number of lists created.
        """
        converted = 0

        for group in self._group_candidates(doc, split_on_type=True):
            first_node, _, _, list_type = group[0]
            # Unclosed <p> tags nest; an enclosing paragraph may already be gone
            if first_node.decomposed or first_node.parent is None:
                continue

            list_el = doc.soup.new_tag(LIST_TAGS[list_type])
            first_node.insert_before(list_el)

            for node, text, pattern, _ in group:
                li = doc.soup.new_tag("li")
                li.string = pattern.sub('', text, count=1).strip()
                list_el.append(li)
                if not node.decomposed:
                    node.decompose()
            converted += 1

        if converted:
            logger.debug("Converted %d pseudo-lists", converted)
        return converted

    def _group_candidates(self, doc: HTMLDocument, split_on_type: bool) -> List[List[ListItem]]:
        """
        Collects runs of consecutive marker paragraphs (in document order).
        A non-matching paragraph always ends a run; with `split_on_type` a
        change between ordered and unordered ends it too.
        """
        groups: List[List[ListItem]] = []
        current: List[ListItem] = []

        def flush():
            if len(current) >= MIN_LIST_ITEMS:
                groups.append(list(current))
            current.clear()

        for p in doc.find_all("p"):
            text = p.get_text()
            matched = match_list_marker(text)
            if matched is None:
                flush()
                continue

            pattern, list_type = matched
            if split_on_type and current and current[-1][3] != list_type:
                flush()
            current.append((p, text, pattern, list_type))

        flush()
        return groups
