# src/wcag_shell/core/handlers/report_handler.py
import argparse
import logging
from typing import List

from wcag_auditor.controllers.report_controller import REPORT_FORMATS, ReportController
from wcag_shell.core.exceptions import WcagShellError
from wcag_shell.core.managers.config_manager import config_manager
from wcag_shell.core.services.options_service import build_validation_options
from wcag_shell.core.utils.input_reader import read_input, title_for

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wcag-audit report", description="Render an accessibility report.")
    parser.add_argument("files", nargs="+", help="HTML file(s); more than one produces a batch report.")
    parser.add_argument("--format", dest="fmt", choices=REPORT_FORMATS, default=None,
                        help="Output format (default from settings: report.default_format).")
    parser.add_argument("--title", default=None, help="Report title (single file only).")
    return parser


def handle_report(args: List[str]) -> int:
    """Handler for 'report'."""
    try:
        parsed = build_parser().parse_args(args)
    except SystemExit:
        return 1

    fmt = parsed.fmt or config_manager.get_nested("report.default_format", "json")
    options = build_validation_options()
    controller = ReportController()

    try:
        items = [{"title": title_for(path), "html": read_input(path)} for path in parsed.files]
    except WcagShellError as e:
        print(f"❌ {e}")
        return 1

    if len(items) == 1:
        title = parsed.title if parsed.title is not None else items[0]["title"]
        print(controller.generate_report(items[0]["html"], fmt, title, options))
    else:
        print(controller.generate_batch_report(items, fmt, options, progress=True))

    logger.info("Report generated for %d file(s) as %s", len(items), fmt)
    return 0
