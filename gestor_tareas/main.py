from __future__ import annotations

import logging
import sys

from PySide6.QtGui import QFont
from PySide6.QtWidgets import QApplication, QMessageBox, QStyleFactory

from gestor_tareas.infra.logging import setup_logging
from gestor_tareas.infra.repository import TaskStore
from gestor_tareas.services.task_list import TaskList
from gestor_tareas.ui.main_window import MainWindow
from gestor_tareas.ui.notifications import TrayReminderScheduler
from gestor_tareas.ui.theme import apply_palette, load_styles

logger = logging.getLogger(__name__)


def main() -> None:
    setup_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("TPF_Gestor_Tareas")
    app.setStyle(QStyleFactory.create("Fusion"))
    apply_palette(app, dark=False)
    app.setFont(QFont("Poppins", 10))
    load_styles(app)

    try:
        store = TaskStore.open()
        scheduler = TrayReminderScheduler(app.windowIcon(), app)
        task_list = TaskList(store, scheduler)
    except Exception as exc:  # noqa: BLE001
        logger.exception("could not open task database")
        QMessageBox.critical(None, "Error de base de datos", str(exc))
        sys.exit(1)

    rescheduled = task_list.schedule_pending_reminders()
    logger.info("rescheduled %s reminders", rescheduled)

    window = MainWindow(task_list)
    window.show()
    code = app.exec()
    store.close()
    sys.exit(code)


if __name__ == "__main__":
    main()
