# src/wcag_auditor/dom/models.py
from typing import List

from bs4 import BeautifulSoup, Tag
from pydantic import BaseModel, ConfigDict


class HTMLDocument(BaseModel):
    """
    Represents a parsed, mutable HTML document.

    Fragments are moved under a synthetic wrapper <div> (`root`) so every
    top-level node has an addressable parent. For full documents `root` is
    the <body> (or the soup itself when the markup has no body).
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    soup: BeautifulSoup
    root: Tag
    is_fragment: bool = True
    has_doctype: bool = False

    @property
    def html_element(self):
        """The document's own <html> element; fragments never have one."""
        if self.is_fragment:
            return None
        return self.soup.find("html")

    def find_all(self, name=None, **kwargs) -> List[Tag]:
        """Document-order search over the whole tree."""
        return self.soup.find_all(name, **kwargs)

    def text(self) -> str:
        return self.root.get_text(" ")

    def serialize(self) -> str:
        """Serializes the complete tree, wrapper included."""
        return str(self.soup)

    def inner_html(self) -> str:
        """
        Returns the caller-facing markup: the wrapper's children for fragments,
        the whole document otherwise.
        """
        if self.is_fragment:
            return self.root.decode_contents()
        return str(self.soup)
