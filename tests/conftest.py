from typing import List, Optional

import pytest

from clipstack.clipboard import ClipboardBackend
from clipstack.errors import ClipboardReadError, ClipboardWriteError


class FakeClipboard(ClipboardBackend):
    """In-memory clipboard that can be told to fail."""

    def __init__(self, text: Optional[str] = None) -> None:
        self.text = text
        self.fail_read = False
        self.fail_write = False
        self.reads = 0
        self.writes: List[str] = []

    def _read_text(self) -> str:
        self.reads += 1
        if self.fail_read:
            raise ClipboardReadError("clipboard busy")
        if self.text is None:
            raise ClipboardReadError("Clipboard holds no text")
        return self.text

    def _write_text(self, text: str) -> None:
        if self.fail_write:
            raise ClipboardWriteError("clipboard busy")
        self.writes.append(text)
        self.text = text


@pytest.fixture
def fake_clipboard():
    return FakeClipboard()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ("MAX_ENTRIES", "POLL_INTERVAL", "WINDOW_WIDTH", "WINDOW_HEIGHT",
                 "MIN_WIDTH", "MIN_HEIGHT", "START_MONITORING", "LOG_LEVEL"):
        # setenv first so whatever a .env file adds is removed afterwards
        monkeypatch.setenv(f"CLIPSTACK_{name}", "")
        monkeypatch.delenv(f"CLIPSTACK_{name}")
    monkeypatch.chdir(tmp_path)
