"""Error types raised across ClipStack."""


class ClipStackError(Exception):
    """Base class for every ClipStack error."""


class InvalidConfiguration(ClipStackError, ValueError):
    """Raised at startup when a configuration value is unusable."""


class ClipboardError(ClipStackError):
    """Base class for platform clipboard failures."""


class ClipboardReadError(ClipboardError):
    """The clipboard could not be read as text."""


class ClipboardWriteError(ClipboardError):
    """Text could not be written to the clipboard."""
