"""
Platform-specific clipboard factory.

Picks the clipboard backend matching the running operating system.
"""

import platform
from typing import Type

from clipstack.clipboard.base import ClipboardBackend


def get_clipboard_class() -> Type[ClipboardBackend]:
    """
    Get the ClipboardBackend implementation for the current platform.

    Returns:
        Type[ClipboardBackend]: The platform-specific backend class

    Raises:
        NotImplementedError: If the current platform is not supported
    """
    system = platform.system()

    if system == "Windows":
        from clipstack.clipboard.windows import WindowsClipboard
        return WindowsClipboard
    elif system == "Linux":
        from clipstack.clipboard.linux import LinuxClipboard
        return LinuxClipboard
    elif system == "Darwin":
        from clipstack.clipboard.macos import MacOSClipboard
        return MacOSClipboard
    else:
        raise NotImplementedError(f"Platform '{system}' is not supported")


def get_clipboard() -> ClipboardBackend:
    clipboard_class = get_clipboard_class()
    return clipboard_class()
