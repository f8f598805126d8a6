from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QCheckBox,
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from gestor_tareas.domain.entities import Task

STAT_COLORS = {
    "pending": "#F59E0B",
    "completed": "#22C55E",
    "total": "#14B8A6",
}


def task_subtitle(task: Task) -> str:
    parts = []
    if task.description:
        parts.append(task.description)
    if task.reminder:
        when = task.reminder
        parts.append(f"📅 {when.day}/{when.month} {when.hour}:{when.minute:02d}")
    return "\n".join(parts)


class StatCard(QFrame):
    def __init__(self, label: str, color_key: str, parent=None):
        super().__init__(parent)
        self.setObjectName("StatCard")
        self.setAttribute(Qt.WA_StyledBackground, True)
        self._color = QColor(STAT_COLORS.get(color_key, "#9CA3AF"))

        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(2)

        self.title = QLabel(label)
        self.title.setStyleSheet("font-weight: 700;")
        self.title.setAlignment(Qt.AlignCenter)

        self.value = QLabel("0")
        self.value.setStyleSheet("font-size: 18px; font-weight: 600;")
        self.value.setAlignment(Qt.AlignCenter)

        layout.addWidget(self.title)
        layout.addWidget(self.value)
        self.set_dark(False)

    def set_value(self, value: int) -> None:
        self.value.setText(str(value))

    def set_dark(self, dark: bool) -> None:
        alpha = 64 if dark else 26
        color = self._color
        self.setStyleSheet(
            f"#StatCard {{ background-color: rgba({color.red()}, {color.green()}, {color.blue()}, {alpha}); "
            "border-radius: 12px; }"
        )


class TaskItemWidget(QWidget):
    def __init__(self, task: Task, on_toggle, on_remove, parent=None):
        super().__init__(parent)
        self.task = task
        self._on_toggle = on_toggle
        self._on_remove = on_remove

        self.setObjectName("TaskCard")
        self.setAttribute(Qt.WA_StyledBackground, True)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 6, 12, 6)
        layout.setSpacing(8)

        self.done_check = QCheckBox()
        self.done_check.setChecked(task.done)
        self.done_check.toggled.connect(self._handle_toggle)

        title = QLabel(task.title)
        title.setProperty("class", "task-title")
        title.setProperty("done", task.done)
        title.setWordWrap(True)
        font = title.font()
        font.setStrikeOut(task.done)
        title.setFont(font)

        text_column = QVBoxLayout()
        text_column.setSpacing(2)
        text_column.addWidget(title)

        subtitle_text = task_subtitle(task)
        if subtitle_text:
            subtitle = QLabel(subtitle_text)
            subtitle.setProperty("class", "task-meta")
            subtitle.setWordWrap(True)
            text_column.addWidget(subtitle)

        self.delete_button = QPushButton("Eliminar")
        self.delete_button.setProperty("variant", "ghost")
        self.delete_button.clicked.connect(self._handle_remove)

        layout.addWidget(self.done_check, 0, Qt.AlignTop)
        layout.addLayout(text_column, 1)
        layout.addWidget(self.delete_button, 0, Qt.AlignTop)

    def _handle_toggle(self, _checked: bool) -> None:
        self._on_toggle(self.task)

    def _handle_remove(self) -> None:
        self._on_remove(self.task)
