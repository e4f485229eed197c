# src/wcag_auditor/dom/builder.py
import logging
import re
from html import escape

from bs4 import BeautifulSoup, Doctype, ParserRejectedMarkup

from .models import HTMLDocument

logger = logging.getLogger(__name__)

# Marked sections other than CDATA (e.g. '<![if gte mso 9]>') make html.parser give up
MARKED_SECTION_PATTERN = re.compile(r"<!\[(?!CDATA\[)", re.IGNORECASE)


def close_open_paragraphs(soup: BeautifulSoup) -> int:
    """
    html.parser nests a <p> inside a still-open <p>; browsers close the open
    one instead. Moves every directly nested <p> (and whatever follows it)
    out to become a sibling of its parent. Returns the number of moves.
    """
    moved = 0
    for p in reversed(soup.find_all("p")):
        parent = p.parent
        if parent is None or parent.name != "p":
            continue
        anchor = parent
        for node in [p] + list(p.next_siblings):
            node = node.extract()
            anchor.insert_after(node)
            anchor = node
        moved += 1
    return moved


class DOMBuilder:
    """
    Builder responsible for parsing raw HTML into a mutable HTMLDocument.

    Parsing is tolerant: unclosed tags and stray end tags are recovered by
    the html.parser backend, and no input makes parse() raise.
    """

    @staticmethod
    def _make_soup(html: str) -> BeautifulSoup:
        try:
            return BeautifulSoup(html, 'html.parser')
        except ParserRejectedMarkup as e:
            logger.warning("Parser rejected markup, escaping marked sections and retrying: %s", e)

        try:
            return BeautifulSoup(MARKED_SECTION_PATTERN.sub("&lt;![", html), 'html.parser')
        except ParserRejectedMarkup as e:
            # Last resort: keep the content as text rather than dropping it
            logger.warning("Parser rejected markup again, treating input as text: %s", e)
            return BeautifulSoup(escape(html, quote=False), 'html.parser')

    def parse(self, html: str) -> HTMLDocument:
        """
        Parses a fragment or a full document.

        Args:
            html (str): The raw HTML string. None and non-strings are coerced.

        Returns:
            HTMLDocument: A tree whose `root` addresses the content.
        """
        if html is None:
            html = ""
        elif not isinstance(html, str):
            html = str(html)

        # Basic cleanup of potentially dirty HTML (e.g., BOM)
        clean_html = html.replace('\ufeff', '')
        soup = self._make_soup(clean_html)

        if close_open_paragraphs(soup):
            logger.debug("Closed implicitly ended paragraphs")

        is_fragment = soup.find("html") is None
        has_doctype = any(isinstance(item, Doctype) for item in soup.contents)

        if is_fragment:
            wrapper = soup.new_tag("div")
            for child in list(soup.contents):
                if isinstance(child, Doctype):
                    continue
                wrapper.append(child.extract())
            soup.append(wrapper)
            root = wrapper
        else:
            root = soup.body or soup.html or soup

        logger.debug("Parsed %s (%d chars)", "fragment" if is_fragment else "document", len(clean_html))
        return HTMLDocument(soup=soup, root=root, is_fragment=is_fragment, has_doctype=has_doctype)


def parse(html: str) -> HTMLDocument:
    """Shortcut for DOMBuilder().parse(html)."""
    return DOMBuilder().parse(html)
