from __future__ import annotations

import logging
from pathlib import Path

import pytest

from gestor_tareas.infra import logging as app_logging


def test_setup_logging_sets_library_levels(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(app_logging, "PROJECT_ROOT", tmp_path)

    app_logging.setup_logging()

    assert (tmp_path / "logs").is_dir()
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
    assert logging.getLogger("alembic").level == logging.INFO
