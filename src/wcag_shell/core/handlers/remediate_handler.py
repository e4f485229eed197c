# src/wcag_shell/core/handlers/remediate_handler.py
import argparse
import logging
import sys
from pathlib import Path
from typing import List

from wcag_auditor.controllers.remediation_controller import RemediationController
from wcag_shell.core.exceptions import WcagShellError
from wcag_shell.core.services.options_service import build_remediation_options
from wcag_shell.core.utils.input_reader import read_input

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wcag-audit remediate", description="Apply deterministic WCAG fixes.")
    parser.add_argument("file", help="HTML file to remediate ('-' for stdin).")
    parser.add_argument("-o", "--output", default=None, help="Write the remediated HTML here instead of stdout.")
    for name, dest in (("headings", "fix_headings"), ("tables", "fix_tables"),
                       ("lists", "fix_lists"), ("bold", "fix_bold_paragraphs")):
        parser.add_argument(f"--no-{name}", dest=dest, action="store_const", const=False, default=None,
                            help=f"Skip the {name} fix.")
    return parser


def handle_remediate(args: List[str]) -> int:
    """Handler for 'remediate'. Fix descriptions go to stderr, markup to stdout or --output."""
    try:
        parsed = build_parser().parse_args(args)
    except SystemExit:
        return 1

    try:
        html = read_input(parsed.file)
    except WcagShellError as e:
        print(f"❌ {e}")
        return 1

    options = build_remediation_options({
        "fix_headings": parsed.fix_headings,
        "fix_tables": parsed.fix_tables,
        "fix_lists": parsed.fix_lists,
        "fix_bold_paragraphs": parsed.fix_bold_paragraphs,
    })
    result = RemediationController().remediate(html, options)

    for fix in result.fixes_applied:
        print(f"✅ {fix}", file=sys.stderr)
    if not result.fix_count:
        print("Nothing to fix.", file=sys.stderr)

    if parsed.output:
        try:
            Path(parsed.output).write_text(result.content, encoding="utf-8")
        except OSError as e:
            print(f"❌ Cannot write '{parsed.output}': {e}")
            return 1
        logger.info("Remediated HTML written to %s", parsed.output)
    else:
        print(result.content)
    return 0
