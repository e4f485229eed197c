# src/wcag_shell/core/services/options_service.py
import logging
from typing import Any, Dict, Optional

from wcag_auditor.model import RemediationOptions, ValidationOptions
from wcag_shell.core.managers.config_manager import ConfigManager, config_manager

logger = logging.getLogger(__name__)


def _drop_unset(overrides: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    return {k: v for k, v in (overrides or {}).items() if v is not None}


def build_validation_options(
        overrides: Optional[Dict[str, Any]] = None,
        manager: Optional[ConfigManager] = None
) -> ValidationOptions:
    """
    Assembles ValidationOptions from settings, letting explicit overrides win.
    `strict_mode` defaults to accessibility.strictness == 'strict'.
    """
    manager = manager or config_manager
    values: Dict[str, Any] = {
        "strict_mode": manager.get_nested("accessibility.strictness", "standard") == "strict",
    }
    values.update(_drop_unset(overrides))
    return ValidationOptions.model_validate(values)


def build_remediation_options(
        overrides: Optional[Dict[str, Any]] = None,
        manager: Optional[ConfigManager] = None
) -> RemediationOptions:
    """Assembles RemediationOptions from the accessibility.auto_remediate_* settings."""
    manager = manager or config_manager
    values: Dict[str, Any] = {
        "fix_headings": manager.get_nested("accessibility.auto_remediate_headings", True),
        "fix_tables": manager.get_nested("accessibility.auto_remediate_tables", True),
        "fix_lists": manager.get_nested("accessibility.auto_remediate_lists", True),
    }
    values.update(_drop_unset(overrides))
    return RemediationOptions.model_validate(values)


def enforcement_enabled(manager: Optional[ConfigManager] = None) -> bool:
    return bool((manager or config_manager).get_nested("accessibility.enforcement_enabled", True))
