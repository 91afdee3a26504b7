"""
Read side of the history: search filtering and per-entry display stats.

Nothing here is stored; ages are worked out against the ``now`` passed in
at render time.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional, Union

from clipstack.models import Entry
from clipstack.services.history_store import HistoryStore

PREVIEW_LIMIT = 200


@dataclass(frozen=True)
class EntryView:
    position: int
    entry: Entry
    char_count: int
    line_count: int
    age: str
    preview: str


def matches(entry: Entry, term: Optional[str]) -> bool:
    if not term:
        return True
    return term.casefold() in entry.content.casefold()


def filter_entries(entries: Iterable[Entry], term: Optional[str] = None) -> List[Entry]:
    """Entries containing ``term`` (case-insensitive), order preserved."""
    return [entry for entry in entries if matches(entry, term)]


def elapsed_label(captured_at: datetime, now: Optional[datetime] = None) -> str:
    now = now or datetime.now()
    seconds = max(0, int((now - captured_at).total_seconds()))
    if seconds < 60:
        return f"{seconds}s ago"
    if seconds < 3600:
        return f"{seconds // 60}m ago"
    return f"{seconds // 3600}h ago"


def preview(content: str, limit: int = PREVIEW_LIMIT) -> str:
    if len(content) > limit:
        return f"{content[:limit]}..."
    return content


def build_view(
    source: Union[HistoryStore, Iterable[Entry]],
    term: Optional[str] = None,
    now: Optional[datetime] = None,
) -> List[EntryView]:
    entries = source.all() if isinstance(source, HistoryStore) else tuple(source)
    now = now or datetime.now()

    views: List[EntryView] = []
    for index, entry in enumerate(entries):
        if not matches(entry, term):
            continue
        views.append(EntryView(
            position=index + 1,
            entry=entry,
            char_count=entry.char_count,
            line_count=entry.line_count,
            age=elapsed_label(entry.captured_at, now),
            preview=preview(entry.content),
        ))
    return views
