# src/wcag_shell/core/utils/configure_logging.py
import logging
import sys
from typing import Dict, Optional, Union

from tqdm import tqdm

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s"

# bs4 warns on markup that looks like a filename or URL
DEFAULT_SILENCED_LOGGERS = {"bs4": "ERROR"}

Level = Union[str, int]


class LogWithTqdm(logging.Handler):
    """
    A logging handler that writes through `tqdm.write()`, so log lines do not
    tear the batch report progress bar.
    """
    def emit(self, record):
        try:
            tqdm.write(self.format(record), file=sys.stderr)
            self.flush()
        except Exception:
            self.handleError(record)


def to_level(level: Level, fallback: int) -> int:
    """'debug' / 'WARNING' / 10 -> logging level number; unknown names use `fallback`."""
    if isinstance(level, str):
        return getattr(logging, level.upper(), fallback)
    return level


def configure_logger(
        general_level: Level = 'INFO',
        module_specific_levels: Optional[Dict[str, Level]] = None,
        silenced_loggers: Optional[Dict[str, Level]] = None
) -> None:
    """
    Configures the root logger with the tqdm-aware handler.

    Args:
        general_level: Root level (settings key debug.level).
        module_specific_levels: Per-logger levels, e.g.
            {"wcag_auditor.checks": "DEBUG"} (settings key debug.modules).
        silenced_loggers: Third-party loggers to quiet; defaults to bs4.
    """
    handler = LogWithTqdm()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(to_level(general_level, logging.INFO))
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    for name, level in (module_specific_levels or {}).items():
        logging.getLogger(name).setLevel(to_level(level, logging.INFO))

    silenced = DEFAULT_SILENCED_LOGGERS if silenced_loggers is None else silenced_loggers
    for name, level in silenced.items():
        logging.getLogger(name).setLevel(to_level(level, logging.CRITICAL))
