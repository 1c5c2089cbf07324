from __future__ import annotations

from typing import Callable

from PySide6.QtWidgets import QPushButton, QWidget

from teleopdash.app.state import Store

PANEL_WIDTH = 150
PANEL_STYLE = """
QPushButton { background:#1f2937; color:#e5e7eb; border:1px solid #374151; border-radius:6px; padding:6px; }
QPushButton:checked { background:#F59E0B; color:#111827; border-color:#F59E0B; }
QPushButton:disabled { color:#6b7280; }
QGroupBox, QLabel { color:#e5e7eb; }
"""


class BasePanel(QWidget):
    """
    Base class for the side panels around the scene.

    Holds the store and the shared dark button styling. Panels never keep
    their own copy of dashboard state: buttons call store methods and the
    checked state is set back from store signals.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.setFixedWidth(PANEL_WIDTH)
        self.setStyleSheet(PANEL_STYLE)

    def _checkable_button(self, text: str, on_click: Callable[[], None], parent: QWidget | None = None) -> QPushButton:
        btn = QPushButton(text, parent or self)
        btn.setCheckable(True)
        btn.clicked.connect(lambda _=False: on_click())
        return btn
