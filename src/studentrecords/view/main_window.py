"""
Main Application Window
=======================
The Qt implementation of the RecordView contract.

Why is this file needed?
------------------------
1. Layout: It arranges the details form and search box on the left, and the
   record table on the right.
2. Input port: Button clicks and table selection are re-emitted as intent
   signals. The window does not know who is connected to them.
3. Output port: The controller calls render/set_status/show_error/... and
   the window draws. No business logic lives here.
"""
from __future__ import annotations

from typing import Sequence

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QApplication, QGroupBox, QLabel, QMainWindow, QMessageBox, QSplitter, QVBoxLayout, QWidget
)

from studentrecords.config import VISIBLE_APP_NAME
from studentrecords.controller.ports import RecordRow
from studentrecords.view.panels.form_panel import RecordFormPanel
from studentrecords.view.panels.search_panel import SearchPanel
from studentrecords.view.widgets.record_table import RecordTable


class MainWindow(QMainWindow):
    # --- Intent signals (input port) ---
    add_requested = Signal(str, str, str)
    update_requested = Signal(str, str, str)
    delete_requested = Signal()
    search_requested = Signal(str)
    clear_requested = Signal()
    selection_changed = Signal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(900, 600)
        self.setMinimumSize(750, 500)

        # --- MAIN CONTAINER ---
        splitter = QSplitter(Qt.Horizontal)
        self.setCentralWidget(splitter)

        # --- LEFT SIDE: Form + Search ---
        left = QWidget()
        left_layout = QVBoxLayout(left)
        self.form_panel = RecordFormPanel()
        self.search_panel = SearchPanel()
        left_layout.addWidget(self.form_panel)
        left_layout.addWidget(self.search_panel)
        left_layout.addStretch()
        splitter.addWidget(left)

        # --- RIGHT SIDE: Table ---
        table_group = QGroupBox("Student Records")
        table_layout = QVBoxLayout(table_group)
        self.table = RecordTable()
        self.lbl_total = QLabel("")
        self.lbl_total.setAlignment(Qt.AlignRight)
        self.lbl_total.setStyleSheet("color: gray;")
        table_layout.addWidget(self.table)
        table_layout.addWidget(self.lbl_total)
        splitter.addWidget(table_group)

        splitter.setSizes([360, 540])

        # --- SIGNAL CONNECTIONS ---
        self.form_panel.add_clicked.connect(self.add_requested)
        self.form_panel.update_clicked.connect(self.update_requested)
        self.form_panel.delete_clicked.connect(self.delete_requested)
        self.form_panel.clear_clicked.connect(self.clear_requested)
        self.search_panel.search_clicked.connect(self.search_requested)
        self.table.row_selected.connect(self.selection_changed)

        self._create_actions()
        self._create_menus()

        self.statusBar().showMessage("Ready")

    def _create_actions(self) -> None:
        self.act_exit = QAction("Exit", self)
        self.act_exit.setShortcut("Ctrl+Q")
        self.act_exit.triggered.connect(self.close)

        self.act_about = QAction("About", self)
        self.act_about.triggered.connect(self.on_about)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")
        file_menu.addAction(self.act_exit)

        help_menu = menu_bar.addMenu("&Help")
        help_menu.addAction(self.act_about)

    # --- OUTPUT PORT ---

    def render(self, rows: Sequence[RecordRow], total: int) -> None:
        self.table.set_rows(rows)
        self.lbl_total.setText(f"Total students: {total}")

    def set_status(self, text: str) -> None:
        self.statusBar().showMessage(text)

    def show_error(self, text: str) -> None:
        QMessageBox.critical(self, "Error", text)

    def show_info(self, text: str) -> None:
        QMessageBox.information(self, "Information", text)

    def request_confirmation(self, text: str) -> bool:
        reply = QMessageBox.question(self, "Confirm", text, QMessageBox.Yes | QMessageBox.No, QMessageBox.No)
        return reply == QMessageBox.Yes

    def populate_form(self, name: str, email: str, gpa_text: str) -> None:
        self.form_panel.set_values(name, email, gpa_text)

    def clear_form(self) -> None:
        self.form_panel.clear()
        self.search_panel.clear()

    # --- SLOTS ---

    def on_about(self) -> None:
        self.show_info(
            f"{QApplication.applicationDisplayName() or VISIBLE_APP_NAME}\n"
            f"Manage student records: add, update, delete and search by name."
        )
