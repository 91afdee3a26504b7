import time

import win32clipboard as wc
import win32con

from clipstack.clipboard.base import ClipboardBackend
from clipstack.errors import ClipboardReadError, ClipboardWriteError


class WindowsClipboard(ClipboardBackend):
    open_attempts = 3
    open_delay = 0.05

    def _open(self) -> bool:
        # another process may hold the clipboard for a moment
        for _ in range(self.open_attempts):
            try:
                wc.OpenClipboard()
                return True
            except Exception:
                time.sleep(self.open_delay)
        return False

    def _read_text(self) -> str:
        if not self._open():
            raise ClipboardReadError("Clipboard is locked by another application")

        try:
            if not wc.IsClipboardFormatAvailable(win32con.CF_UNICODETEXT):
                raise ClipboardReadError("Clipboard holds no text")
            text = wc.GetClipboardData(win32con.CF_UNICODETEXT)
        finally:
            wc.CloseClipboard()

        if not isinstance(text, str):
            raise ClipboardReadError("Clipboard holds no text")
        return text

    def _write_text(self, text: str) -> None:
        if not self._open():
            raise ClipboardWriteError("Clipboard is locked by another application")

        try:
            wc.EmptyClipboard()
            wc.SetClipboardData(win32con.CF_UNICODETEXT, text)
        finally:
            wc.CloseClipboard()
