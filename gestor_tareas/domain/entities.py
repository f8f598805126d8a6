from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Optional


@dataclass(frozen=True)
class Task:
    """A single to-do item. ``id`` stays ``None`` until the store assigns one."""

    title: str
    description: str = ""
    done: bool = False
    reminder: Optional[datetime] = None
    id: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "reminder", local_naive(self.reminder))

    def toggled(self) -> Task:
        return replace(self, done=not self.done)

    def with_id(self, task_id: int) -> Task:
        return replace(self, id=task_id)

    def to_row(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "done": 1 if self.done else 0,
            "reminder": self.reminder.isoformat() if self.reminder else None,
        }

    @classmethod
    def from_row(cls, row: Any) -> Task:
        reminder = row.reminder
        return cls(
            id=row.id,
            title=row.title or "",
            description=row.description or "",
            done=row.done == 1,
            reminder=datetime.fromisoformat(reminder) if reminder else None,
        )


def local_naive(value: Optional[datetime]) -> Optional[datetime]:
    """Reminders are kept as naive local time; aware values are converted."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def is_blank(title: str | None) -> bool:
    return not title or not title.strip()
