from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ulid import ULID


def _new_entry_id() -> str:
    return f"i_{ULID.from_datetime(datetime.now())}"


@dataclass(frozen=True)
class Entry:
    """Immutable snapshot of one piece of copied text."""
    content: str
    captured_at: datetime
    entry_id: str = field(default_factory=_new_entry_id)

    def __post_init__(self) -> None:
        if not isinstance(self.content, str) or not self.content.strip():
            raise ValueError("Entry content must be non-empty text")

    @classmethod
    def capture(cls, content: str, now: Optional[datetime] = None) -> "Entry":
        return cls(content=content, captured_at=now or datetime.now())

    @property
    def char_count(self) -> int:
        return len(self.content)

    @property
    def line_count(self) -> int:
        return self.content.count("\n") + 1
