from __future__ import annotations

import sys
from pathlib import Path

from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication

LIGHT = {
    QPalette.Window: "#F8FAFC",
    QPalette.WindowText: "#0F172A",
    QPalette.Base: "#FFFFFF",
    QPalette.AlternateBase: "#EEF2FF",
    QPalette.Text: "#0F172A",
    QPalette.Button: "#E0E7FF",
    QPalette.ButtonText: "#1E1B4B",
    QPalette.ToolTipBase: "#FFFFFF",
    QPalette.ToolTipText: "#0F172A",
    QPalette.Highlight: "#4F46E5",
    QPalette.HighlightedText: "#FFFFFF",
}

DARK = {
    QPalette.Window: "#0F172A",
    QPalette.WindowText: "#E6EDF3",
    QPalette.Base: "#111827",
    QPalette.AlternateBase: "#1B2230",
    QPalette.Text: "#E6EDF3",
    QPalette.Button: "#2E1065",
    QPalette.ButtonText: "#E6EDF3",
    QPalette.ToolTipBase: "#1B2230",
    QPalette.ToolTipText: "#E6EDF3",
    QPalette.Highlight: "#7C3AED",
    QPalette.HighlightedText: "#FFFFFF",
}


def apply_palette(app: QApplication, dark: bool) -> None:
    palette = QPalette()
    for role, color in (DARK if dark else LIGHT).items():
        palette.setColor(role, QColor(color))
    app.setPalette(palette)


def find_qss_path() -> Path | None:
    candidates = [Path(__file__).resolve().parent / "styles.qss"]
    meipass = getattr(sys, "_MEIPASS", None)
    if meipass:
        candidates.append(Path(meipass) / "gestor_tareas" / "ui" / "styles.qss")
    for path in candidates:
        if path.exists():
            return path
    return None


def load_styles(app: QApplication) -> None:
    qss_path = find_qss_path()
    if not qss_path:
        return
    app.setStyleSheet(qss_path.read_text(encoding="utf-8"))
