# src/wcag_auditor/dom/core.py
import re
from html import escape
from typing import Optional

from bs4 import Tag

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]

WORD_PATTERN = re.compile(r"[^\W\d_]+(?:['-][^\W\d_]+)*")


def inner_html_of(tag: Tag) -> str:
    """Serializes the children of a node without the node itself."""
    return tag.decode_contents()


def opening_tag(tag: Tag) -> str:
    """Renders only the start tag of an element, e.g. '<span style="...">'."""
    parts = [tag.name]
    for key, value in tag.attrs.items():
        if isinstance(value, (list, tuple)):
            value = " ".join(value)
        parts.append(f'{key}="{escape(str(value), quote=True)}"')
    return "<" + " ".join(parts) + ">"


def text_snippet(text: Optional[str], limit: int) -> str:
    """Cuts text to `limit` characters and HTML-escapes it."""
    return escape((text or "")[:limit], quote=True)


def element_snippet(tag: Tag) -> str:
    """Serialized element; Issue truncates it to the report limit."""
    return str(tag)


def get_attr(tag: Tag, name: str) -> Optional[str]:
    """
    Returns an attribute as a plain string.
    Multi-valued attributes (class, rel, headers) come back space-joined.
    """
    value = tag.get(name)
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def word_count(text: str) -> int:
    """Counts alphabetic words, allowing inner apostrophes and hyphens."""
    return len(WORD_PATTERN.findall(text or ""))


def heading_level(tag: Tag) -> int:
    try:
        return int(tag.name[1])
    except (ValueError, IndexError, TypeError):
        return 0
