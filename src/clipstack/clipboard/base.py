from abc import ABC, abstractmethod

from clipstack.errors import ClipboardError, ClipboardReadError, ClipboardWriteError


class ClipboardBackend(ABC):
    """Text-only access to the platform clipboard."""

    @abstractmethod
    def _read_text(self) -> str:
        pass

    @abstractmethod
    def _write_text(self, text: str) -> None:
        pass

    def read_text(self) -> str:
        try:
            return self._read_text()
        except ClipboardError:
            raise
        except Exception as exc:
            raise ClipboardReadError(f"Clipboard read failed: {exc}") from exc

    def write_text(self, text: str) -> None:
        try:
            self._write_text(text)
        except ClipboardError:
            raise
        except Exception as exc:
            raise ClipboardWriteError(f"Clipboard write failed: {exc}") from exc

    @staticmethod
    def _decode(payload: bytes) -> str:
        try:
            return payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ClipboardReadError("Clipboard does not hold valid UTF-8 text") from exc
