import logging
import os
import shutil
import subprocess
from typing import List, Optional, Tuple

from clipstack.clipboard.base import ClipboardBackend
from clipstack.errors import ClipboardReadError, ClipboardWriteError

logger = logging.getLogger(__name__)

# (tool, read command, write command)
_Strategy = Tuple[str, List[str], List[str]]


class LinuxClipboard(ClipboardBackend):
    _WAYLAND: _Strategy = (
        "wl-paste",
        ["wl-paste", "--no-newline", "--type", "text"],
        ["wl-copy"],
    )
    _XCLIP: _Strategy = (
        "xclip",
        ["xclip", "-selection", "clipboard", "-t", "UTF8_STRING", "-o"],
        ["xclip", "-selection", "clipboard"],
    )
    _XSEL: _Strategy = (
        "xsel",
        ["xsel", "--clipboard", "--output"],
        ["xsel", "--clipboard", "--input"],
    )

    read_timeout = 1.5
    write_timeout = 2.0

    def _strategies(self) -> List[_Strategy]:
        strategies: List[_Strategy] = []
        if os.environ.get("WAYLAND_DISPLAY") and shutil.which("wl-paste") and shutil.which("wl-copy"):
            strategies.append(self._WAYLAND)
        for strategy in (self._XCLIP, self._XSEL):
            if shutil.which(strategy[0]):
                strategies.append(strategy)
        return strategies

    def _read_text(self) -> str:
        strategies = self._strategies()
        if not strategies:
            raise ClipboardReadError(
                "No clipboard tool found; install wl-clipboard, xclip or xsel")

        for tool, command, _ in strategies:
            payload = self._run_command(command, timeout=self.read_timeout)
            if payload is not None:
                return self._decode(payload)
            logger.debug(f"{tool} could not read clipboard text")

        raise ClipboardReadError("Clipboard holds no text")

    def _write_text(self, text: str) -> None:
        strategies = self._strategies()
        if not strategies:
            raise ClipboardWriteError(
                "No clipboard tool found; install wl-clipboard, xclip or xsel")

        data = text.encode("utf-8")
        for tool, _, command in strategies:
            if self._pipe_command(command, data, timeout=self.write_timeout):
                return
            logger.debug(f"{tool} could not write clipboard text")

        raise ClipboardWriteError("Every clipboard tool failed to set the clipboard")

    def _run_command(self, command: List[str], timeout: float) -> Optional[bytes]:
        try:
            result = subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=True,
                timeout=timeout,
            )
            return result.stdout
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired, FileNotFoundError):
            return None

    def _pipe_command(self, command: List[str], data: bytes, timeout: float) -> bool:
        # xclip/xsel fork to keep owning the selection; leave stdout
        # unpiped or run() waits for the forked child.
        try:
            subprocess.run(
                command,
                input=data,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=True,
                timeout=timeout,
            )
            return True
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired, FileNotFoundError):
            return False
