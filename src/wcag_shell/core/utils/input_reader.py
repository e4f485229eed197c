# src/wcag_shell/core/utils/input_reader.py
import sys
from pathlib import Path

from wcag_shell.core.exceptions import InputFileError


def read_input(path: str) -> str:
    """Reads an HTML document from a file path, or from stdin when path is '-'."""
    if path == "-":
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        raise InputFileError(path, "file not found")
    except UnicodeDecodeError:
        raise InputFileError(path, "not valid UTF-8 text")
    except OSError as e:
        raise InputFileError(path, e.strerror or str(e))


def title_for(path: str) -> str:
    """Default report title for an input: the file name without extension."""
    return "stdin" if path == "-" else Path(path).stem
