# src/wcag_shell/core/command_registry.py
import logging
from typing import Callable, Dict, List

from wcag_shell.core.handlers.config_handler import handle_config
from wcag_shell.core.handlers.remediate_handler import handle_remediate
from wcag_shell.core.handlers.report_handler import handle_report
from wcag_shell.core.handlers.validate_handler import handle_validate

logger = logging.getLogger(__name__)

CommandRegistry: Dict[str, Callable[[List[str]], int]] = {
    "validate": handle_validate,
    "remediate": handle_remediate,
    "report": handle_report,
    "config": handle_config,
}

COMMAND_HELP_TEXTS: Dict[str, str] = {
    "validate": "Validate an HTML file and print the result as JSON.",
    "remediate": "Apply deterministic fixes and print the rewritten HTML.",
    "report": "Render a JSON/HTML/CSV report for one or more HTML files.",
    "config": "List, set or reset configuration values.",
}
