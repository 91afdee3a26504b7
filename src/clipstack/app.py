import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from clipstack.clipboard import ClipboardBackend, get_clipboard
from clipstack.config import Settings
from clipstack.errors import ClipboardWriteError
from clipstack.models import Entry
from clipstack.services import ClipboardService, HistoryStore
from clipstack.services.query import EntryView, build_view

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """Everything the window needs between render passes."""
    auto_monitor: bool = True
    search_term: str = ""
    status: str = ""


class ClipStackApp:
    """
    Wires the history store, the clipboard poller and the window together.

    The window calls the action methods below; none of them raise on a
    clipboard failure; the problem ends up in ``state.status`` instead.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        clipboard: Optional[ClipboardBackend] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.store = HistoryStore(self.settings.max_entries)
        self.clipboard = clipboard or get_clipboard()
        self.state = AppState(auto_monitor=self.settings.start_monitoring)
        self.clipboard_service = ClipboardService(
            self.store,
            clipboard=self.clipboard,
            poll_interval=self.settings.poll_interval,
            enabled=self.state.auto_monitor,
        )

    def start(self) -> None:
        self.clipboard_service.start()
        logger.info(
            f"Monitoring clipboard every {self.settings.poll_interval:g}s, "
            f"keeping {self.settings.max_entries} entries")

    def stop(self) -> None:
        self.clipboard_service.stop()

    def set_auto_monitor(self, enabled: bool) -> None:
        self.state.auto_monitor = enabled
        self.clipboard_service.enabled = enabled
        self.state.status = "Monitoring resumed" if enabled else "Monitoring paused"

    def refresh(self) -> Optional[Entry]:
        result = self.clipboard_service.refresh()
        if result.paused:
            self.state.status = "Monitoring paused"
        elif result.error is not None:
            self.state.status = f"Could not read clipboard: {result.error}"
        elif result.entry is not None:
            self.state.status = "Captured new clipboard text"
        else:
            self.state.status = "Clipboard unchanged"
        return result.entry

    def clear_history(self) -> None:
        self.store.clear()
        self.state.status = "History cleared"

    def copy_entry(self, entry_id: str) -> bool:
        entry = self.store.get(entry_id)
        if entry is None:
            self.state.status = "Entry is no longer in the history"
            return False

        try:
            self.clipboard.write_text(entry.content)
        except ClipboardWriteError as e:
            logger.warning(f"Copy back failed: {e}")
            self.state.status = f"Could not copy: {e}"
            return False

        self.state.status = f"Copied {entry.char_count} chars to clipboard"
        return True

    def set_search(self, term: str) -> None:
        self.state.search_term = term

    def visible_entries(self, now: Optional[datetime] = None) -> List[EntryView]:
        return build_view(self.store, self.state.search_term, now)
