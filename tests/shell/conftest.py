# tests/shell/conftest.py
import json

import pytest

from wcag_shell.core.managers.config_manager import ConfigManager
from wcag_shell.core.utils.path_utils import PathUtils

# A small, predictable configuration for the shell tests
MOCK_SETTINGS_CONTENT = {
    "debug": {
        "level": "WARNING",
        "modules": {}
    },
    "accessibility": {
        "enforcement_enabled": True,
        "strictness": "standard",
        "auto_remediate_headings": True,
        "auto_remediate_tables": True,
        "auto_remediate_lists": True
    },
    "report": {
        "default_format": "json"
    }
}


@pytest.fixture
def config_env(tmp_path, monkeypatch):
    """
    Sets up an isolated environment for the ConfigManager:
    - creates a temporary package root holding a mock 'settings.json',
    - points PathUtils at it,
    - reloads the singleton, and reloads it again from the real file afterwards.
    """
    package_root = tmp_path / "wcag_shell"
    package_root.mkdir()
    settings_file = package_root / "settings.json"
    settings_file.write_text(json.dumps(MOCK_SETTINGS_CONTENT))

    monkeypatch.setattr(PathUtils, "get_shell_package_root", lambda: package_root)

    manager = ConfigManager()
    manager.reset()

    yield manager

    monkeypatch.undo()
    manager.reset()


@pytest.fixture
def html_file(tmp_path):
    """Writes markup to a temporary .html file and returns its path as a string."""
    def _write(markup, name="page.html"):
        path = tmp_path / name
        path.write_text(markup, encoding="utf-8")
        return str(path)
    return _write
