"""Service layer for ClipStack."""

from clipstack.services.history_store import HistoryStore
from clipstack.services.clipboard_service import ClipboardService

__all__ = ["ClipboardService", "HistoryStore"]
