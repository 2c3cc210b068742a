"""
Presentation Contract
=====================
The boundary between the controller and whatever draws the window.

Why is this file needed?
------------------------
1. Decoupling: The controller only talks to a `RecordView`. The Qt main window
   is one implementation, the fake view used in tests is another.
2. Projection: `RecordRow` is the display form of a record. Selection reads
   its fields back from the rows that were rendered, not from the store.

Input port: the signal attributes (the view emits, the controller connects).
Output port: the methods (the controller calls, the view draws).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol, Sequence, runtime_checkable

from studentrecords.model.record import Record


@dataclass(frozen=True)
class RecordRow:
    """One table row. GPA is pre-formatted with two decimals."""
    id: int
    name: str
    email: str
    gpa_text: str

    @classmethod
    def from_record(cls, record: Record) -> RecordRow:
        return cls(id=record.id, name=record.name, email=record.email, gpa_text=f"{record.gpa:.2f}")


@runtime_checkable
class Connectable(Protocol):
    """Anything a slot can be connected to: a Qt Signal, or a test double."""
    def connect(self, slot: Callable[..., Any]) -> Any: ...


class RecordView(Protocol):
    # --- Input port ---
    add_requested: Connectable        # (name, email, gpa)
    update_requested: Connectable     # (name, email, gpa)
    delete_requested: Connectable     # ()
    search_requested: Connectable     # (text)
    clear_requested: Connectable      # ()
    selection_changed: Connectable    # (row_index)

    # --- Output port ---
    def render(self, rows: Sequence[RecordRow], total: int) -> None: ...
    def set_status(self, text: str) -> None: ...
    def show_error(self, text: str) -> None: ...
    def show_info(self, text: str) -> None: ...
    def request_confirmation(self, text: str) -> bool: ...
    def populate_form(self, name: str, email: str, gpa_text: str) -> None: ...
    def clear_form(self) -> None: ...
