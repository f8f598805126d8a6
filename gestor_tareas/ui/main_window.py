from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QApplication,
    QDialog,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from gestor_tareas.domain.entities import Task
from gestor_tareas.services.task_list import TaskList

from .dialogs import ReminderDialog, TaskDialog
from .theme import apply_palette
from .widgets import StatCard, TaskItemWidget

logger = logging.getLogger(__name__)


class MainWindow(QWidget):
    def __init__(self, task_list: TaskList):
        super().__init__()
        self.setWindowTitle("TPF_Gestor_Tareas")
        self.resize(520, 720)

        self.task_list = task_list
        self.dark = False

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        layout.addLayout(self._build_header())
        layout.addLayout(self._build_stats())

        self.list_widget = QListWidget()
        self.list_widget.setObjectName("TaskList")
        self.list_widget.setSpacing(6)
        self.list_widget.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)

        self.empty_label = QLabel("No hay tareas aún")
        self.empty_label.setAlignment(Qt.AlignCenter)

        self.body = QStackedWidget()
        self.body.addWidget(self.empty_label)
        self.body.addWidget(self.list_widget)
        layout.addWidget(self.body, 1)

        add_button = QPushButton("+  Nueva tarea")
        add_button.clicked.connect(self.new_task)
        footer = QHBoxLayout()
        footer.addStretch()
        footer.addWidget(add_button)
        layout.addLayout(footer)

        self._unsubscribe = self.task_list.subscribe(self.refresh)
        self.refresh()

        QShortcut(QKeySequence("Ctrl+N"), self, self.new_task)

    def _build_header(self) -> QHBoxLayout:
        header = QHBoxLayout()
        title = QLabel("Mis Tareas")
        title.setProperty("class", "panel-title")

        self.theme_button = QPushButton("Tema")
        self.theme_button.setProperty("variant", "secondary")
        self.theme_button.clicked.connect(self.toggle_theme)

        self.clear_button = QPushButton("Limpiar completadas")
        self.clear_button.setProperty("variant", "danger")
        self.clear_button.clicked.connect(self.task_list.clear_completed)

        header.addWidget(title)
        header.addStretch()
        header.addWidget(self.theme_button)
        header.addWidget(self.clear_button)
        return header

    def _build_stats(self) -> QHBoxLayout:
        row = QHBoxLayout()
        row.setSpacing(8)
        self.pending_card = StatCard("Pendientes", "pending")
        self.completed_card = StatCard("Completadas", "completed")
        self.total_card = StatCard("Total", "total")
        for card in (self.pending_card, self.completed_card, self.total_card):
            row.addWidget(card, 1)
        return row

    def refresh(self) -> None:
        self.pending_card.set_value(self.task_list.pending)
        self.completed_card.set_value(self.task_list.completed)
        self.total_card.set_value(self.task_list.total)
        self.clear_button.setVisible(self.task_list.completed > 0)

        self.list_widget.clear()
        for task in self.task_list.items:
            item = QListWidgetItem()
            item.setData(Qt.UserRole, task.id)
            widget = TaskItemWidget(task, self.on_toggle, self.on_remove)
            self.list_widget.addItem(item)
            self.list_widget.setItemWidget(item, widget)
            item.setSizeHint(widget.sizeHint())

        self.body.setCurrentWidget(self.list_widget if self.task_list.total else self.empty_label)

    def on_toggle(self, task: Task) -> None:
        self.task_list.toggle(task)

    def on_remove(self, task: Task) -> None:
        self.task_list.remove(task)

    def new_task(self) -> None:
        reminder_dialog = ReminderDialog(self)
        if reminder_dialog.exec() != QDialog.Accepted:
            return
        reminder = reminder_dialog.selected()

        task_dialog = TaskDialog(self)
        if task_dialog.exec() != QDialog.Accepted:
            return
        data = task_dialog.values()
        self.task_list.add(data["title"], data["description"], reminder)

    def toggle_theme(self) -> None:
        self.dark = not self.dark
        apply_palette(QApplication.instance(), self.dark)
        for card in (self.pending_card, self.completed_card, self.total_card):
            card.set_dark(self.dark)
        logger.debug("theme switched dark=%s", self.dark)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._unsubscribe()
        super().closeEvent(event)
