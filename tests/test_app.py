from datetime import datetime, timedelta

import pytest

from clipstack.app import ClipStackApp
from clipstack.config import Settings
from clipstack.errors import ClipboardReadError, InvalidConfiguration
from clipstack.services.clipboard_service import CaptureResult


@pytest.fixture
def app(fake_clipboard):
    return ClipStackApp(Settings(max_entries=3), clipboard=fake_clipboard)


def test_store_uses_configured_capacity(app):
    assert app.store.capacity == 3


def test_invalid_capacity_refuses_to_start(fake_clipboard):
    settings = Settings.model_construct(**{**Settings().model_dump(), "max_entries": 0})
    with pytest.raises(InvalidConfiguration):
        ClipStackApp(settings, clipboard=fake_clipboard)


def test_refresh_reports_status(app, fake_clipboard):
    fake_clipboard.text = "hello"
    assert app.refresh() is not None
    assert app.state.status == "Captured new clipboard text"

    app.refresh()
    assert app.state.status == "Clipboard unchanged"

    fake_clipboard.fail_read = True
    assert app.refresh() is None
    assert app.state.status.startswith("Could not read clipboard")
    assert len(app.store) == 1


def test_copy_entry_writes_without_touching_history(app, fake_clipboard):
    first = app.store.insert("first")
    app.store.insert("second")
    revision = app.store.revision

    assert app.copy_entry(first.entry_id) is True
    assert fake_clipboard.writes == ["first"]
    assert app.store.revision == revision
    assert [e.content for e in app.store.all()] == ["second", "first"]


def test_copy_entry_failure_sets_status(app, fake_clipboard):
    entry = app.store.insert("text")
    fake_clipboard.fail_write = True

    assert app.copy_entry(entry.entry_id) is False
    assert app.state.status.startswith("Could not copy")
    assert len(app.store) == 1


def test_copy_missing_entry(app):
    assert app.copy_entry("i_missing") is False


def test_toggle_monitor_reaches_poller(app, fake_clipboard):
    fake_clipboard.text = "hello"
    app.set_auto_monitor(False)
    assert app.clipboard_service.enabled is False
    assert app.clipboard_service.tick() is None
    assert fake_clipboard.reads == 0

    app.set_auto_monitor(True)
    assert app.clipboard_service.tick() is not None


def test_clear_history(app):
    app.store.insert("a")
    app.clear_history()
    assert len(app.store) == 0
    assert app.state.status == "History cleared"


def test_visible_entries_follow_search(app):
    now = datetime(2024, 1, 1, 12, 0, 0)
    app.store.insert("Python rocks", now=now - timedelta(seconds=30))
    app.store.insert("something else", now=now - timedelta(seconds=10))

    app.set_search("PYTHON")
    views = app.visible_entries(now)
    assert [v.entry.content for v in views] == ["Python rocks"]
    assert views[0].position == 2
    assert views[0].age == "30s ago"

    app.set_search("")
    assert len(app.visible_entries(now)) == 2


def test_paused_start(fake_clipboard):
    app = ClipStackApp(Settings(start_monitoring=False), clipboard=fake_clipboard)
    assert app.state.auto_monitor is False
    assert app.clipboard_service.enabled is False


def test_refresh_while_paused_does_not_read(fake_clipboard):
    fake_clipboard.text = "hello"
    app = ClipStackApp(Settings(start_monitoring=False), clipboard=fake_clipboard)

    assert app.refresh() is None
    assert fake_clipboard.reads == 0
    assert len(app.store) == 0
    assert app.state.status == "Monitoring paused"


def test_refresh_status_comes_from_its_own_result(app, monkeypatch):
    monkeypatch.setattr(app.clipboard_service, "refresh",
                        lambda: CaptureResult(error=ClipboardReadError("busy")))
    app.clipboard_service.last_error = None

    assert app.refresh() is None
    assert app.state.status == "Could not read clipboard: busy"
