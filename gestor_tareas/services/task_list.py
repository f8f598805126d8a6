from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional, Protocol

from gestor_tareas.domain.entities import Task, is_blank

from .reminders import NullReminderScheduler, ReminderScheduler, build_alert

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class TaskStoreLike(Protocol):
    def list_tasks(self) -> list[Task]: ...

    def insert_task(self, task: Task) -> int: ...

    def update_task(self, task: Task) -> int: ...

    def delete_task(self, task_id: int) -> int: ...

    def clear_completed(self) -> int: ...


class TaskList:
    """In-memory view of every task, kept in step with the store.

    Each mutating call writes to the store first, then updates the cached
    items, then notifies subscribers once. Subscribers get no payload and are
    expected to re-read ``items`` and the counters.
    """

    def __init__(
        self,
        store: TaskStoreLike,
        scheduler: Optional[ReminderScheduler] = None,
    ) -> None:
        self._store = store
        self._scheduler = scheduler or NullReminderScheduler()
        self._items: list[Task] = []
        self._listeners: list[Listener] = []
        self.load()

    @property
    def items(self) -> tuple[Task, ...]:
        return tuple(self._items)

    @property
    def total(self) -> int:
        return len(self._items)

    @property
    def completed(self) -> int:
        return sum(1 for task in self._items if task.done)

    @property
    def pending(self) -> int:
        return self.total - self.completed

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def load(self) -> None:
        tasks = self._store.list_tasks()
        self._items = list(tasks)
        logger.info("loaded %s tasks", len(self._items))
        self._notify()

    def add(
        self,
        title: str,
        description: str = "",
        reminder: Optional[datetime] = None,
    ) -> Task | None:
        if is_blank(title):
            logger.debug("rejected task with blank title")
            return None

        draft = Task(title=title, description=description, reminder=reminder)
        task = draft.with_id(self._store.insert_task(draft))
        self._items.append(task)
        self._notify()

        try:
            self._scheduler.schedule(task)
        except Exception:  # noqa: BLE001
            logger.exception("could not schedule reminder for task id=%s", task.id)
        return task

    def toggle(self, task: Task) -> Task:
        updated = task.toggled()
        self._store.update_task(updated)
        index = self._index_of(task.id)
        if index is not None:
            self._items[index] = updated
        else:
            logger.warning("toggled task id=%s is not in the list", task.id)
        self._notify()
        return updated

    def remove(self, task: Task) -> None:
        if task.id is None:
            return
        self._store.delete_task(task.id)
        self._items = [item for item in self._items if item.id != task.id]
        self._cancel_reminder(task.id)
        self._notify()

    def clear_completed(self) -> None:
        self._store.clear_completed()
        removed = [task for task in self._items if task.done]
        self._items = [task for task in self._items if not task.done]
        for task in removed:
            if task.id is not None:
                self._cancel_reminder(task.id)
        self._notify()

    def schedule_pending_reminders(self, now: Optional[datetime] = None) -> int:
        now = now or datetime.now()
        scheduled = 0
        for task in self._items:
            if task.done:
                continue
            try:
                alert = build_alert(task)
                if alert is None or alert.fire_at <= now:
                    continue
                self._scheduler.schedule(task)
            except Exception:  # noqa: BLE001
                logger.exception("could not schedule reminder for task id=%s", task.id)
                continue
            scheduled += 1
        return scheduled

    def _cancel_reminder(self, task_id: int) -> None:
        try:
            self._scheduler.cancel(task_id)
        except Exception:  # noqa: BLE001
            logger.exception("could not cancel reminder for task id=%s", task_id)

    def _index_of(self, task_id: int | None) -> int | None:
        for index, item in enumerate(self._items):
            if item.id == task_id:
                return index
        return None

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()
