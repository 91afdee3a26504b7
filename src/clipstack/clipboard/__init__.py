"""
Cross-platform clipboard access.

Every backend exposes the same text-only ``read_text`` / ``write_text``
interface and reports failures as clipboard errors.
"""

from clipstack.clipboard.base import ClipboardBackend
from clipstack.clipboard.factory import get_clipboard, get_clipboard_class

__all__ = [
    'ClipboardBackend',
    'get_clipboard',
    'get_clipboard_class',
]
