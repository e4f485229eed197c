# src/wcag_shell/core/exceptions.py


class WcagShellError(Exception):
    """Base class for errors raised by the command line layer."""


class InputFileError(WcagShellError):
    """An input document could not be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read '{path}': {reason}")


class ConfigError(WcagShellError):
    """A configuration value could not be applied."""
