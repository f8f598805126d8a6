from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.engine import Engine

from gestor_tareas.domain.entities import Task

from .db import make_engine, make_session_factory, upgrade_schema
from .models import TaskModel

logger = logging.getLogger(__name__)


class TaskStore:
    """SQLite-backed persistence for tasks.

    Every method runs in its own session and commits a single statement, so the
    store never holds a transaction open between calls.
    """

    def __init__(self, engine: Engine, schema_version: int) -> None:
        self._engine = engine
        self._session_factory = make_session_factory(engine)
        self._schema_version = schema_version

    @classmethod
    def open(cls, path: Optional[Path] = None) -> TaskStore:
        if path is None:
            from gestor_tareas.config import SETTINGS

            path = SETTINGS.db_path
        engine = make_engine(Path(path))
        version = upgrade_schema(engine)
        store = cls(engine, version)
        logger.info("TaskStore ready db=%s total=%s", path, store.count())
        return store

    @property
    def schema_version(self) -> int:
        return self._schema_version

    def close(self) -> None:
        self._engine.dispose()

    def list_tasks(self) -> list[Task]:
        with self._session_factory() as session:
            return [Task.from_row(row) for row in session.scalars(select(TaskModel))]

    def insert_task(self, task: Task) -> int:
        with self._session_factory() as session:
            model = TaskModel(**task.to_row())
            session.add(model)
            session.commit()
            logger.debug("inserted task id=%s", model.id)
            return model.id

    def update_task(self, task: Task) -> int:
        if task.id is None:
            return 0
        with self._session_factory() as session:
            result = session.execute(
                update(TaskModel).where(TaskModel.id == task.id).values(**task.to_row())
            )
            session.commit()
            return result.rowcount

    def delete_task(self, task_id: int) -> int:
        with self._session_factory() as session:
            result = session.execute(delete(TaskModel).where(TaskModel.id == task_id))
            session.commit()
            return result.rowcount

    def clear_completed(self) -> int:
        with self._session_factory() as session:
            result = session.execute(delete(TaskModel).where(TaskModel.done == 1))
            session.commit()
            logger.debug("cleared %s completed tasks", result.rowcount)
            return result.rowcount

    def count(self) -> int:
        with self._session_factory() as session:
            return session.scalar(select(func.count()).select_from(TaskModel)) or 0
