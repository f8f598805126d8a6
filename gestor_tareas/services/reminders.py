from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Protocol

from gestor_tareas.config import SETTINGS
from gestor_tareas.domain.entities import Task

ALERT_TITLE = "Recordatorio de Tarea"
REMINDER_LEAD = timedelta(minutes=SETTINGS.reminder_lead_min)


class ReminderError(Exception):
    """Raised when an alert cannot be registered."""


@dataclass(frozen=True)
class ReminderAlert:
    id: int
    fire_at: datetime
    title: str
    body: str


def build_alert(task: Task, lead: timedelta = REMINDER_LEAD) -> Optional[ReminderAlert]:
    if task.reminder is None:
        return None
    if task.id is None:
        raise ReminderError("cannot schedule a reminder for an unsaved task")
    return ReminderAlert(
        id=task.id,
        fire_at=task.reminder - lead,
        title=ALERT_TITLE,
        body=f"{task.title}\n{task.description}",
    )


class ReminderScheduler(Protocol):
    def schedule(self, task: Task) -> None: ...

    def cancel(self, task_id: int) -> None: ...


class NullReminderScheduler:
    def schedule(self, task: Task) -> None:
        return None

    def cancel(self, task_id: int) -> None:
        return None
