"""
Record Details Panel
"""
from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QFormLayout, QGridLayout, QGroupBox, QLineEdit, QPushButton, QVBoxLayout, QWidget


class RecordFormPanel(QWidget):
    """
    Name/email/GPA inputs plus the Add, Update, Delete and Clear buttons.
    The panel only forwards raw text; validation is done by the controller.
    """
    add_clicked = Signal(str, str, str)
    update_clicked = Signal(str, str, str)
    delete_clicked = Signal()
    clear_clicked = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        # 1. Inputs
        grp = QGroupBox("Student Details")
        form = QFormLayout(grp)

        self.edit_name = QLineEdit()
        self.edit_email = QLineEdit()
        self.edit_gpa = QLineEdit()
        self.edit_gpa.setPlaceholderText("0.00 - 4.00")

        form.addRow("Name:", self.edit_name)
        form.addRow("Email:", self.edit_email)
        form.addRow("GPA:", self.edit_gpa)
        layout.addWidget(grp)

        # 2. Actions
        buttons = QGridLayout()
        self.btn_add = QPushButton("Add Student")
        self.btn_update = QPushButton("Update")
        self.btn_delete = QPushButton("Delete")
        self.btn_clear = QPushButton("Clear")

        for i, btn in enumerate((self.btn_add, self.btn_update, self.btn_delete, self.btn_clear)):
            btn.setMinimumHeight(35)
            buttons.addWidget(btn, i // 2, i % 2)
        layout.addLayout(buttons)

        self.btn_add.clicked.connect(lambda: self.add_clicked.emit(*self.values()))
        self.btn_update.clicked.connect(lambda: self.update_clicked.emit(*self.values()))
        self.btn_delete.clicked.connect(lambda: self.delete_clicked.emit())
        self.btn_clear.clicked.connect(lambda: self.clear_clicked.emit())

    def values(self) -> tuple[str, str, str]:
        return self.edit_name.text(), self.edit_email.text(), self.edit_gpa.text()

    def set_values(self, name: str, email: str, gpa_text: str) -> None:
        self.edit_name.setText(name)
        self.edit_email.setText(email)
        self.edit_gpa.setText(gpa_text)

    def clear(self) -> None:
        for edit in (self.edit_name, self.edit_email, self.edit_gpa):
            edit.clear()
