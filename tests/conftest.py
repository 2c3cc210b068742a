from __future__ import annotations

import os
from typing import Any, Callable, Sequence

import pytest

from studentrecords.controller.ports import RecordRow
from studentrecords.controller.record_controller import RecordController
from studentrecords.model.store import RecordStore


class FakeSignal:
    """Minimal stand-in for a Qt signal: connect() and emit()."""

    def __init__(self) -> None:
        self.slots: list[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> None:
        self.slots.append(slot)

    def emit(self, *args: Any) -> None:
        for slot in self.slots:
            slot(*args)


class FakeView:
    """Records every output-port call so tests can assert on what was drawn."""

    def __init__(self, confirm: bool = True) -> None:
        self.add_requested = FakeSignal()
        self.update_requested = FakeSignal()
        self.delete_requested = FakeSignal()
        self.search_requested = FakeSignal()
        self.clear_requested = FakeSignal()
        self.selection_changed = FakeSignal()

        self.confirm = confirm
        self.rows: list[RecordRow] = []
        self.total: int | None = None
        self.statuses: list[str] = []
        self.errors: list[str] = []
        self.infos: list[str] = []
        self.confirmations: list[str] = []
        self.form: tuple[str, str, str] | None = None
        self.form_cleared = 0
        self.render_count = 0

    def render(self, rows: Sequence[RecordRow], total: int) -> None:
        self.rows = list(rows)
        self.total = total
        self.render_count += 1

    def set_status(self, text: str) -> None:
        self.statuses.append(text)

    def show_error(self, text: str) -> None:
        self.errors.append(text)

    def show_info(self, text: str) -> None:
        self.infos.append(text)

    def request_confirmation(self, text: str) -> bool:
        self.confirmations.append(text)
        return self.confirm

    def populate_form(self, name: str, email: str, gpa_text: str) -> None:
        self.form = (name, email, gpa_text)

    def clear_form(self) -> None:
        self.form = None
        self.form_cleared += 1

    @property
    def status(self) -> str:
        return self.statuses[-1] if self.statuses else ""


@pytest.fixture
def empty_store() -> RecordStore:
    return RecordStore()


@pytest.fixture
def seeded_store() -> RecordStore:
    return RecordStore(seed=[
        ("Alice Johnson", "alice@university.com", 3.8),
        ("Bob Smith", "bob@university.com", 3.5),
        ("Carol Williams", "carol@university.com", 3.9),
    ])


@pytest.fixture
def view() -> FakeView:
    return FakeView()


@pytest.fixture
def controller(seeded_store: RecordStore, view: FakeView) -> RecordController:
    return RecordController(seeded_store, view)


@pytest.fixture(scope="session")
def qapp():
    """A QApplication on the offscreen platform, shared by all widget tests."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app
