# src/wcag_shell/core/handlers/validate_handler.py
import argparse
import logging
from typing import List

from wcag_auditor.controllers.validation_controller import ValidationController
from wcag_shell.core.exceptions import WcagShellError
from wcag_shell.core.services.json_service import to_json
from wcag_shell.core.services.options_service import build_validation_options, enforcement_enabled
from wcag_shell.core.utils.input_reader import read_input

logger = logging.getLogger(__name__)

CHECK_NAMES = ["contrast", "headings", "images", "links", "lists", "tables", "language"]

EXIT_NOT_COMPLIANT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wcag-audit validate", description="Validate HTML against WCAG 2.1 AA.")
    parser.add_argument("file", help="HTML file to validate ('-' for stdin).")
    parser.add_argument("--strict", action="store_const", const=True, default=None,
                        help="Use the strict pass threshold (95).")
    parser.add_argument("--skip", action="append", choices=CHECK_NAMES, default=[],
                        help="Disable a check (repeatable).")
    return parser


def handle_validate(args: List[str]) -> int:
    """
    Handler for 'validate'. Prints the ValidationResult as JSON.

    Returns 0 when the content is valid (or enforcement is disabled),
    2 when it is not compliant under enforcement, 1 on usage or input errors.
    """
    try:
        parsed = build_parser().parse_args(args)
    except SystemExit:
        return 1

    overrides = {f"check_{name}": False for name in parsed.skip}
    overrides["strict_mode"] = parsed.strict

    try:
        html = read_input(parsed.file)
    except WcagShellError as e:
        print(f"❌ {e}")
        return 1

    options = build_validation_options(overrides)
    result = ValidationController().validate(html, options)
    print(to_json(result))

    logger.info("Validated %s: score=%d valid=%s", parsed.file, result.score, result.valid)
    if not result.valid and enforcement_enabled():
        return EXIT_NOT_COMPLIANT
    return 0
