from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QGroupBox, QHBoxLayout, QLineEdit, QPushButton, QWidget


class SearchPanel(QGroupBox):
    """Name filter. Enter in the field behaves like the Search button."""
    search_clicked = Signal(str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__("Search", parent)

        layout = QHBoxLayout(self)
        self.edit_search = QLineEdit()
        self.edit_search.setPlaceholderText("Name contains...")
        self.btn_search = QPushButton("Search")

        layout.addWidget(self.edit_search, 1)
        layout.addWidget(self.btn_search)

        self.btn_search.clicked.connect(self._emit_search)
        self.edit_search.returnPressed.connect(self._emit_search)

    def _emit_search(self) -> None:
        self.search_clicked.emit(self.edit_search.text())

    def clear(self) -> None:
        self.edit_search.clear()
