"""
Read-only table of record rows.
"""
from __future__ import annotations

from typing import Sequence

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QAbstractItemView, QHeaderView, QTableWidget, QTableWidgetItem, QWidget

from studentrecords.controller.ports import RecordRow

COLUMNS = ["ID", "Name", "Email", "GPA"]
CENTERED_COLUMNS = (0, 3)


class RecordTable(QTableWidget):
    # Index of the highlighted row, -1 when nothing is selected
    row_selected = Signal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(0, len(COLUMNS), parent)
        self.setHorizontalHeaderLabels(COLUMNS)
        self.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.setSelectionMode(QAbstractItemView.SingleSelection)
        self.verticalHeader().setVisible(False)
        self.setAlternatingRowColors(True)

        header = self.horizontalHeader()
        header.setSectionResizeMode(QHeaderView.Interactive)
        header.setSectionResizeMode(2, QHeaderView.Stretch)
        self.setColumnWidth(0, 50)
        self.setColumnWidth(1, 150)
        self.setColumnWidth(3, 60)

        self.itemSelectionChanged.connect(self._on_selection_changed)

    def set_rows(self, rows: Sequence[RecordRow]) -> None:
        """Replace the table content. Does not emit `row_selected`."""
        self.blockSignals(True)
        try:
            self.clearSelection()
            self.setRowCount(len(rows))
            for i, row in enumerate(rows):
                values = (str(row.id), row.name, row.email, row.gpa_text)
                for col, value in enumerate(values):
                    item = QTableWidgetItem(value)
                    if col in CENTERED_COLUMNS:
                        item.setTextAlignment(Qt.AlignCenter)
                    self.setItem(i, col, item)
        finally:
            self.blockSignals(False)

    def _on_selection_changed(self) -> None:
        selected = self.selectionModel().selectedRows()
        self.row_selected.emit(selected[0].row() if selected else -1)
