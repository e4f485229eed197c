# tests/conftest.py
import pytest

from wcag_auditor.dom.builder import DOMBuilder


@pytest.fixture
def parse():
    """Parses markup into an HTMLDocument, the way the controllers do."""
    builder = DOMBuilder()
    return builder.parse
