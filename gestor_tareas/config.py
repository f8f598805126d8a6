from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from PySide6.QtCore import QStandardPaths

DB_FILENAME = "tasks.db"


def _resolve_project_root() -> Path:
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parents[1]


PROJECT_ROOT = _resolve_project_root()


def load_env() -> None:
    env_name = os.getenv("APP_ENV", "development")
    candidates = [Path.cwd(), PROJECT_ROOT]
    for base in candidates:
        env_path = base / ".env"
        if env_path.exists():
            load_dotenv(env_path)
            break

    for base in candidates:
        env_specific = base / f".env.{env_name}"
        if env_specific.exists():
            load_dotenv(env_specific, override=True)
            break


def documents_dir() -> Path:
    location = QStandardPaths.writableLocation(QStandardPaths.DocumentsLocation)
    return Path(location) if location else Path.home()


@dataclass(frozen=True)
class Settings:
    db_path: Path
    log_level: str = "INFO"
    log_dir: str = "logs"
    reminder_lead_min: int = 10


load_env()

_db_override = os.getenv("TASKS_DB_PATH", "").strip()

SETTINGS = Settings(
    db_path=Path(_db_override) if _db_override else documents_dir() / DB_FILENAME,
    log_level=os.getenv("LOG_LEVEL", "INFO"),
    log_dir=os.getenv("LOG_DIR", "logs"),
    reminder_lead_min=int(os.getenv("REMINDER_LEAD_MIN", "10")),
)
