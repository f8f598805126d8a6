from __future__ import annotations

import logging
from datetime import datetime

from PySide6.QtCore import QObject, QTimer
from PySide6.QtGui import QIcon
from PySide6.QtWidgets import QApplication, QMessageBox, QStyle, QSystemTrayIcon

from gestor_tareas.domain.entities import Task
from gestor_tareas.services.reminders import ReminderAlert, ReminderError, build_alert

logger = logging.getLogger(__name__)

# QTimer intervals are signed 32-bit milliseconds.
MAX_INTERVAL_MS = 2**31 - 1


class TrayReminderScheduler(QObject):
    """Fires task reminders as system tray messages while the app is running.

    Without a system tray the alert is shown in a message box instead.
    """

    def __init__(self, icon: QIcon | None = None, parent=None):
        super().__init__(parent)
        self._timers: dict[int, QTimer] = {}
        if icon is None or icon.isNull():
            icon = QApplication.style().standardIcon(QStyle.SP_MessageBoxInformation)
        self.tray = QSystemTrayIcon(icon, self)
        self.tray.setToolTip("TPF_Gestor_Tareas")
        if QSystemTrayIcon.isSystemTrayAvailable():
            self.tray.show()
        else:
            logger.warning("system tray unavailable, reminders use message boxes")

    def schedule(self, task: Task) -> None:
        alert = build_alert(task)
        if alert is None:
            return
        if alert.fire_at <= datetime.now():
            raise ReminderError(f"reminder time for task id={alert.id} has already passed")

        self.cancel(alert.id)
        timer = QTimer(self)
        timer.setSingleShot(True)
        timer.timeout.connect(lambda: self._on_timeout(alert))
        self._timers[alert.id] = timer
        self._arm(timer, alert)
        logger.info("reminder scheduled id=%s at=%s", alert.id, alert.fire_at.isoformat())

    def cancel(self, task_id: int) -> None:
        timer = self._timers.pop(task_id, None)
        if timer is None:
            return
        timer.stop()
        timer.deleteLater()

    def pending_ids(self) -> list[int]:
        return sorted(self._timers)

    @staticmethod
    def _arm(timer: QTimer, alert: ReminderAlert) -> None:
        remaining = int((alert.fire_at - datetime.now()).total_seconds() * 1000)
        timer.start(max(0, min(remaining, MAX_INTERVAL_MS)))

    def _on_timeout(self, alert: ReminderAlert) -> None:
        timer = self._timers.get(alert.id)
        if timer is None:
            return
        if alert.fire_at > datetime.now():
            self._arm(timer, alert)
            return
        self._timers.pop(alert.id, None)
        timer.deleteLater()
        logger.info("reminder fired id=%s", alert.id)
        self._show(alert)

    def _show(self, alert: ReminderAlert) -> None:
        if self.tray.isVisible():
            self.tray.showMessage(alert.title, alert.body, QSystemTrayIcon.Information)
            return
        QMessageBox.information(None, alert.title, alert.body)
