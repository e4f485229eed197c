# src/wcag_shell/app.py
import logging
import sys
from typing import List, Optional

from wcag_shell.core.command_registry import COMMAND_HELP_TEXTS, CommandRegistry
from wcag_shell.core.managers.config_manager import config_manager
from wcag_shell.core.utils.configure_logging import configure_logger

logger = logging.getLogger(__name__)


def print_usage() -> None:
    print("Usage: wcag-audit <command> [args]\n")
    print("Commands:")
    for name, text in COMMAND_HELP_TEXTS.items():
        print(f"  {name:<10} {text}")


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the wcag-audit command; returns the handler's exit code."""
    argv = list(sys.argv[1:] if argv is None else argv)

    # Initialize logging based on configuration
    configure_logger(
        config_manager.get_nested("debug.level", "WARNING"),
        module_specific_levels=config_manager.get_nested("debug.modules", {})
    )

    if not argv or argv[0] in ("-h", "--help", "help"):
        print_usage()
        return 0

    command, args = argv[0], argv[1:]
    handler = CommandRegistry.get(command)
    if handler is None:
        print(f"Unknown command: '{command}'.")
        print_usage()
        return 1

    logger.debug("Dispatching '%s' with %s", command, args)
    return handler(args)


if __name__ == "__main__":
    sys.exit(main())
