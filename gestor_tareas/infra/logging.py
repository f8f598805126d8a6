from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from gestor_tareas.config import PROJECT_ROOT, SETTINGS

# Library loggers that are noisy at the application level.
LIBRARY_LEVELS = {
    "sqlalchemy.engine": logging.WARNING,
    "alembic": logging.INFO,
    "alembic.runtime.migration": logging.INFO,
}


def setup_logging() -> None:
    log_dir = PROJECT_ROOT / SETTINGS.log_dir
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "gestor_tareas.log"

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    file_handler = RotatingFileHandler(log_file, maxBytes=2_000_000, backupCount=3)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    logging.basicConfig(
        level=SETTINGS.log_level.upper(),
        handlers=[file_handler, console_handler],
    )
    for name, level in LIBRARY_LEVELS.items():
        logging.getLogger(name).setLevel(level)
    logging.getLogger(__name__).debug("logging configured file=%s", log_file)
