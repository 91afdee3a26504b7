"""ClipStack: a bounded, searchable clipboard history for the desktop."""

from clipstack.errors import (
    ClipStackError,
    ClipboardError,
    ClipboardReadError,
    ClipboardWriteError,
    InvalidConfiguration,
)
from clipstack.models import Entry
from clipstack.services import ClipboardService, HistoryStore

__version__ = "0.1.0"

__all__ = [
    "ClipStackError",
    "ClipboardError",
    "ClipboardReadError",
    "ClipboardWriteError",
    "ClipboardService",
    "Entry",
    "HistoryStore",
    "InvalidConfiguration",
]
