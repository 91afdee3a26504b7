import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional

from clipstack.clipboard import ClipboardBackend, get_clipboard
from clipstack.errors import ClipboardError, ClipboardReadError
from clipstack.models import Entry
from clipstack.services.history_store import HistoryStore

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 0.5


@dataclass(frozen=True)
class CaptureResult:
    """Outcome of one read-and-maybe-insert cycle."""
    entry: Optional[Entry] = None
    error: Optional[ClipboardError] = None
    paused: bool = False


class ClipboardService:
    """
    Polls the clipboard and feeds new text into a HistoryStore.

    Text is inserted when the store is empty or the text differs from the
    newest stored entry. A failed read skips the tick. While ``enabled`` is
    False neither scheduled ticks nor manual refreshes read the clipboard.
    The clipboard read happens outside the lock; only the compare-and-insert
    is serialised.
    """

    def __init__(
        self,
        store: HistoryStore,
        clipboard: Optional[ClipboardBackend] = None,
        on_capture: Optional[Callable[[Entry], None]] = None,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        enabled: bool = True,
    ) -> None:
        self.store = store
        self.clipboard = clipboard or get_clipboard()
        self.poll_interval = poll_interval
        self.enabled = enabled
        self.last_error: Optional[ClipboardError] = None
        self._on_capture = on_capture or self._default_handler
        self._lock = threading.RLock()
        self._capture_lock = threading.Lock()
        self._stop_event = threading.Event()
        self._poll_thread: Optional[threading.Thread] = None
        self._is_running = False

    @property
    def is_running(self) -> bool:
        return self._is_running

    def start(self) -> None:
        with self._lock:
            if self._is_running:
                return

            self._stop_event.clear()
            self._is_running = True
            self._poll_thread = threading.Thread(
                target=self._poll_loop, name="clipstack-poller", daemon=True)
            self._poll_thread.start()

    def stop(self) -> None:
        with self._lock:
            if not self._is_running:
                return

            self._is_running = False
            self._stop_event.set()

        if self._poll_thread is not None:
            self._poll_thread.join(timeout=1.0)
            self._poll_thread = None

    def tick(self) -> Optional[Entry]:
        """One scheduled cycle; does nothing while monitoring is disabled."""
        return self.refresh().entry

    def refresh(self) -> CaptureResult:
        """One immediate cycle with the same rules as a scheduled tick."""
        if not self.enabled:
            return CaptureResult(paused=True)
        return self._capture()

    def _capture(self) -> CaptureResult:
        try:
            text = self.clipboard.read_text()
        except ClipboardError as e:
            return self._skip(e)
        except Exception as e:
            return self._skip(ClipboardReadError(str(e)))

        with self._capture_lock:
            self.last_error = None
            newest = self.store.newest()
            if newest is not None and newest.content == text:
                return CaptureResult()

            entry = self.store.insert(text)
            if entry is None:
                return CaptureResult()

        logger.info(f"Clipboard copied: {entry.char_count} chars")
        try:
            self._on_capture(entry)
        except Exception as e:
            logger.error(f"Error in on_capture: {e}")
        return CaptureResult(entry=entry)

    def _skip(self, error: ClipboardError) -> CaptureResult:
        self.last_error = error
        logger.debug(f"Skipping clipboard tick: {error}")
        return CaptureResult(error=error)

    def _poll_loop(self) -> None:
        while not self._stop_event.is_set():
            self.tick()
            self._stop_event.wait(self.poll_interval)

    @staticmethod
    def _default_handler(entry: Entry) -> None:
        pass

    def __enter__(self) -> "ClipboardService":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
