import subprocess

import pytest

from clipstack.clipboard import linux
from clipstack.clipboard.linux import LinuxClipboard
from clipstack.errors import ClipboardReadError, ClipboardWriteError


@pytest.fixture
def tools(monkeypatch):
    """Pretend only the named helper tools are installed."""
    available = set()
    monkeypatch.setattr(linux.shutil, "which",
                        lambda name: f"/usr/bin/{name}" if name in available else None)
    monkeypatch.delenv("WAYLAND_DISPLAY", raising=False)
    return available


@pytest.fixture
def calls(monkeypatch):
    recorded = []
    outputs = {}

    def fake_run(command, **kwargs):
        recorded.append((command, kwargs.get("input")))
        result = outputs.get(command[0])
        if isinstance(result, Exception):
            raise result
        return subprocess.CompletedProcess(command, 0, stdout=result or b"", stderr=b"")

    monkeypatch.setattr(linux.subprocess, "run", fake_run)
    return recorded, outputs


def test_no_tools_is_read_error(tools):
    with pytest.raises(ClipboardReadError):
        LinuxClipboard().read_text()


def test_no_tools_is_write_error(tools):
    with pytest.raises(ClipboardWriteError):
        LinuxClipboard().write_text("hi")


def test_reads_with_xclip(tools, calls):
    recorded, outputs = calls
    tools.add("xclip")
    outputs["xclip"] = "héllo".encode("utf-8")

    assert LinuxClipboard().read_text() == "héllo"
    assert recorded[0][0][:3] == ["xclip", "-selection", "clipboard"]


def test_prefers_wayland(tools, calls, monkeypatch):
    recorded, outputs = calls
    tools.update({"wl-paste", "wl-copy", "xclip"})
    monkeypatch.setenv("WAYLAND_DISPLAY", "wayland-0")
    outputs["wl-paste"] = b"from wayland"

    assert LinuxClipboard().read_text() == "from wayland"
    assert recorded[0][0][0] == "wl-paste"


def test_falls_back_when_a_tool_fails(tools, calls):
    recorded, outputs = calls
    tools.update({"xclip", "xsel"})
    outputs["xclip"] = subprocess.CalledProcessError(1, "xclip")
    outputs["xsel"] = b"from xsel"

    assert LinuxClipboard().read_text() == "from xsel"
    assert [command[0] for command, _ in recorded] == ["xclip", "xsel"]


def test_every_tool_failing_is_read_error(tools, calls):
    _, outputs = calls
    tools.add("xclip")
    outputs["xclip"] = subprocess.TimeoutExpired("xclip", 1.5)

    with pytest.raises(ClipboardReadError):
        LinuxClipboard().read_text()


def test_undecodable_bytes_are_read_error(tools, calls):
    _, outputs = calls
    tools.add("xsel")
    outputs["xsel"] = b"\x89PNG\r\n\x1a\n"

    with pytest.raises(ClipboardReadError):
        LinuxClipboard().read_text()


def test_write_pipes_utf8(tools, calls):
    recorded, _ = calls
    tools.add("xsel")

    LinuxClipboard().write_text("naïve")
    command, data = recorded[0]
    assert command == ["xsel", "--clipboard", "--input"]
    assert data == "naïve".encode("utf-8")


def test_write_failure_is_write_error(tools, calls):
    _, outputs = calls
    tools.add("xclip")
    outputs["xclip"] = subprocess.CalledProcessError(1, "xclip")

    with pytest.raises(ClipboardWriteError):
        LinuxClipboard().write_text("hi")
