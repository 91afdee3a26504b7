try:
    from AppKit import NSPasteboard, NSPasteboardTypeString
    HAS_APPKIT = True
except ImportError:
    HAS_APPKIT = False

from clipstack.clipboard.base import ClipboardBackend
from clipstack.errors import ClipboardReadError, ClipboardWriteError


class MacOSClipboard(ClipboardBackend):

    def _read_text(self) -> str:
        if not HAS_APPKIT:
            raise ClipboardReadError("pyobjc-framework-Cocoa is not installed")

        pasteboard = NSPasteboard.generalPasteboard()
        if NSPasteboardTypeString not in (pasteboard.types() or []):
            raise ClipboardReadError("Clipboard holds no text")

        text = pasteboard.stringForType_(NSPasteboardTypeString)
        if text is None:
            raise ClipboardReadError("Clipboard holds no text")
        return str(text)

    def _write_text(self, text: str) -> None:
        if not HAS_APPKIT:
            raise ClipboardWriteError("pyobjc-framework-Cocoa is not installed")

        pasteboard = NSPasteboard.generalPasteboard()
        pasteboard.clearContents()
        if not pasteboard.setString_forType_(text, NSPasteboardTypeString):
            raise ClipboardWriteError("Pasteboard rejected the text")
