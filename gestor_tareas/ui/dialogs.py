from __future__ import annotations

from datetime import datetime

from PySide6.QtCore import QDate, QDateTime, QTime
from PySide6.QtWidgets import (
    QDateTimeEdit,
    QDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
)


class ReminderDialog(QDialog):
    """Asks for the reminder date and time of a new task."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Recordatorio")
        self.setFixedWidth(320)

        now = QDateTime.currentDateTime()
        self.picker = QDateTimeEdit(now)
        self.picker.setCalendarPopup(True)
        self.picker.setMinimumDateTime(now)
        self.picker.setMaximumDateTime(QDateTime(QDate(2100, 1, 1), QTime(0, 0)))
        self.picker.setDisplayFormat("dd/MM/yyyy HH:mm")

        cancel_button = QPushButton("Cancelar")
        cancel_button.setProperty("variant", "ghost")
        cancel_button.clicked.connect(self.reject)

        ok_button = QPushButton("Aceptar")
        ok_button.clicked.connect(self.accept)

        buttons = QHBoxLayout()
        buttons.addStretch()
        buttons.addWidget(cancel_button)
        buttons.addWidget(ok_button)

        layout = QVBoxLayout(self)
        layout.addWidget(QLabel("Fecha y hora"))
        layout.addWidget(self.picker)
        layout.addLayout(buttons)

    def selected(self) -> datetime:
        return self.picker.dateTime().toPython().replace(second=0, microsecond=0)


class TaskDialog(QDialog):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Nueva tarea")
        self.setFixedWidth(360)

        self.title_input = QLineEdit()
        self.title_input.setPlaceholderText("Título")

        self.description_input = QLineEdit()
        self.description_input.setPlaceholderText("Descripción")

        cancel_button = QPushButton("Cancelar")
        cancel_button.setProperty("variant", "ghost")
        cancel_button.clicked.connect(self.reject)

        save_button = QPushButton("Guardar")
        save_button.clicked.connect(self._save)

        buttons = QHBoxLayout()
        buttons.addStretch()
        buttons.addWidget(cancel_button)
        buttons.addWidget(save_button)

        layout = QVBoxLayout(self)
        layout.addWidget(self.title_input)
        layout.addWidget(self.description_input)
        layout.addLayout(buttons)

    def _save(self) -> None:
        if not self.title_input.text().strip():
            self.title_input.setFocus()
            return
        self.accept()

    def values(self) -> dict[str, str]:
        return {
            "title": self.title_input.text(),
            "description": self.description_input.text(),
        }
