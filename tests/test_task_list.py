from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone

from gestor_tareas.domain.entities import Task
from gestor_tareas.services.task_list import TaskList


class FakeStore:
    def __init__(self, tasks: list[Task] | None = None) -> None:
        self.rows: dict[int, Task] = {}
        self._id = 1
        for task in tasks or []:
            self.insert_task(task)

    def list_tasks(self) -> list[Task]:
        return list(self.rows.values())

    def insert_task(self, task: Task) -> int:
        task_id = self._id
        self.rows[task_id] = replace(task, id=task_id)
        self._id += 1
        return task_id

    def update_task(self, task: Task) -> int:
        if task.id not in self.rows:
            return 0
        self.rows[task.id] = task
        return 1

    def delete_task(self, task_id: int) -> int:
        return 1 if self.rows.pop(task_id, None) else 0

    def clear_completed(self) -> int:
        done = [task_id for task_id, task in self.rows.items() if task.done]
        for task_id in done:
            del self.rows[task_id]
        return len(done)


class RecordingScheduler:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.scheduled: list[Task] = []
        self.cancelled: list[int] = []

    def schedule(self, task: Task) -> None:
        if self.fail:
            raise RuntimeError("notification service down")
        self.scheduled.append(task)

    def cancel(self, task_id: int) -> None:
        self.cancelled.append(task_id)


def _assert_counts(tasks: TaskList) -> None:
    assert tasks.total == tasks.completed + tasks.pending
    assert tasks.total == len(tasks.items)


def test_load_mirrors_store_contents() -> None:
    store = FakeStore([Task(title="a"), Task(title="b", done=True)])
    tasks = TaskList(store)

    assert [task.title for task in tasks.items] == ["a", "b"]
    assert tasks.completed == 1
    assert tasks.pending == 1


def test_add_assigns_store_id_and_notifies_once() -> None:
    store = FakeStore()
    tasks = TaskList(store)
    calls: list[int] = []
    tasks.subscribe(lambda: calls.append(tasks.total))

    task = tasks.add("Buy milk", "2%")

    assert task is not None
    assert task.id == 1
    assert tasks.items == (task,)
    assert store.rows[1].title == "Buy milk"
    assert calls == [1]


def test_add_rejects_blank_title() -> None:
    store = FakeStore()
    tasks = TaskList(store)
    calls: list[None] = []
    tasks.subscribe(lambda: calls.append(None))

    assert tasks.add("", "x", None) is None
    assert tasks.add("   ", "x", None) is None

    assert tasks.items == ()
    assert store.rows == {}
    assert calls == []


def test_add_keeps_task_when_scheduler_fails() -> None:
    scheduler = RecordingScheduler(fail=True)
    tasks = TaskList(FakeStore(), scheduler)

    task = tasks.add("Call mom", "", datetime(2030, 1, 1, 9, 0))

    assert task is not None
    assert tasks.total == 1


def test_add_schedules_reminder_after_commit() -> None:
    scheduler = RecordingScheduler()
    tasks = TaskList(FakeStore(), scheduler)

    task = tasks.add("Dentist", "", datetime(2030, 5, 1, 10, 0))

    assert scheduler.scheduled == [task]


def test_toggle_twice_restores_task() -> None:
    original = Task(title="Read", description="ch. 3", reminder=datetime(2030, 1, 1, 8, 0))
    tasks = TaskList(FakeStore([original]))
    loaded = tasks.items[0]

    once = tasks.toggle(loaded)
    twice = tasks.toggle(once)

    assert once.done is True
    assert twice == loaded
    assert tasks.items == (loaded,)


def test_toggle_unknown_task_still_writes_store() -> None:
    store = FakeStore()
    tasks = TaskList(store)
    store.insert_task(Task(title="a"))
    stray = store.rows[1]
    calls: list[None] = []
    tasks.subscribe(lambda: calls.append(None))

    tasks.toggle(stray)

    assert store.rows[1].done is True
    assert tasks.items == ()
    assert calls == [None]


def test_remove_deletes_from_store_and_mirror() -> None:
    store = FakeStore([Task(title="a"), Task(title="b")])
    scheduler = RecordingScheduler()
    tasks = TaskList(store, scheduler)

    tasks.remove(tasks.items[0])

    assert [task.title for task in tasks.items] == ["b"]
    assert list(store.rows) == [2]
    assert scheduler.cancelled == [1]


def test_remove_unknown_id_is_noop() -> None:
    store = FakeStore([Task(title="a")])
    tasks = TaskList(store)
    before = tasks.items

    tasks.remove(Task(id=9999, title="ghost"))

    assert tasks.items == before
    assert len(store.rows) == 1


def test_remove_unsaved_task_does_nothing() -> None:
    tasks = TaskList(FakeStore([Task(title="a")]))
    calls: list[None] = []
    tasks.subscribe(lambda: calls.append(None))

    tasks.remove(Task(title="draft"))

    assert tasks.total == 1
    assert calls == []


def test_clear_completed_removes_only_done() -> None:
    store = FakeStore([Task(title="A", done=True), Task(title="B")])
    tasks = TaskList(store)
    keep = tasks.items[1]

    tasks.clear_completed()

    assert tasks.items == (keep,)
    assert list(store.rows.values()) == [keep]


def test_counts_stay_consistent_at_every_notification() -> None:
    tasks = TaskList(FakeStore())
    tasks.subscribe(lambda: _assert_counts(tasks))

    first = tasks.add("one")
    tasks.add("two")
    tasks.toggle(first)
    tasks.add("three")
    tasks.remove(tasks.items[-1])
    tasks.clear_completed()

    assert tasks.total == 1
    assert tasks.pending == 1


def test_multiple_subscribers_and_unsubscribe() -> None:
    tasks = TaskList(FakeStore())
    first: list[None] = []
    second: list[None] = []
    unsubscribe = tasks.subscribe(lambda: first.append(None))
    tasks.subscribe(lambda: second.append(None))

    tasks.add("one")
    unsubscribe()
    tasks.add("two")

    assert len(first) == 1
    assert len(second) == 2


def test_schedule_pending_reminders_skips_done_and_past() -> None:
    now = datetime(2030, 1, 1, 12, 0)
    store = FakeStore(
        [
            Task(title="future", reminder=datetime(2030, 1, 2, 9, 0)),
            Task(title="past", reminder=datetime(2029, 12, 31, 9, 0)),
            Task(title="done", done=True, reminder=datetime(2030, 1, 2, 9, 0)),
            Task(title="none"),
        ]
    )
    scheduler = RecordingScheduler()
    tasks = TaskList(store, scheduler)

    assert tasks.schedule_pending_reminders(now=now) == 1
    assert [task.title for task in scheduler.scheduled] == ["future"]


def test_schedule_pending_reminders_survives_scheduler_failure() -> None:
    store = FakeStore(
        [
            Task(title="first", reminder=datetime(2030, 1, 2, 9, 0)),
            Task(title="second", reminder=datetime(2030, 1, 3, 9, 0)),
        ]
    )
    tasks = TaskList(store, RecordingScheduler(fail=True))

    assert tasks.schedule_pending_reminders(now=datetime(2030, 1, 1, 12, 0)) == 0
    assert tasks.total == 2


def test_aware_reminder_is_stored_as_naive_local_time() -> None:
    store = FakeStore()
    tasks = TaskList(store)
    aware = datetime(2030, 6, 1, 8, 30, tzinfo=timezone(timedelta(hours=2)))

    task = tasks.add("call", "", aware)

    assert task.reminder.tzinfo is None
    assert task.reminder == aware.astimezone().replace(tzinfo=None)
    assert task.to_row()["reminder"] == task.reminder.isoformat()
    assert tasks.schedule_pending_reminders(now=datetime(2000, 1, 1)) == 1
