"""
Record Controller (Mediator)
============================
The glue between the RecordStore and the view.

Why is this file needed?
------------------------
1. Routing: It subscribes once to the view's intent signals and runs one
   handler per intent.
2. Validation: Raw form text is validated before the store is touched. A
   rejected intent leaves the store unchanged.
3. Rendering: After every handled intent it re-reads the store and pushes
   rows, status text or prompts back through the view's output methods.

Every handler runs to completion on the GUI thread, so neither the store nor
the session is locked. Calling handlers from several threads would need a lock
around both.

Classes:
    RecordController: One handler per user intent.
"""
from __future__ import annotations

import logging
from typing import Sequence

from studentrecords.controller.errors import EmptySelectionError, RecordError, RecordNotFoundError
from studentrecords.controller.ports import RecordRow, RecordView
from studentrecords.controller.session import Session
from studentrecords.controller.validation import validate_record_input
from studentrecords.model.record import Record
from studentrecords.model.store import RecordStore

logger = logging.getLogger(__name__)


class RecordController:
    def __init__(self, store: RecordStore, view: RecordView, session: Session | None = None) -> None:
        self.store = store
        self.view = view
        self.session = session or Session()

        # --- SIGNAL CONNECTIONS ---
        self.view.add_requested.connect(self.add)
        self.view.update_requested.connect(self.update)
        self.view.delete_requested.connect(self.delete)
        self.view.search_requested.connect(self.search)
        self.view.clear_requested.connect(self.clear)
        self.view.selection_changed.connect(self.select)

        # Initial render
        self.refresh()
        self.view.set_status("Ready")

    # --- INTENT HANDLERS ---

    def add(self, name: str, email: str, gpa_text: str) -> None:
        try:
            data = validate_record_input(name, email, gpa_text)
        except RecordError as e:
            self._report(e)
            return

        added = self.store.create(data.name, data.email, data.gpa)
        logger.info(f"Added record {added.id} ({added.name})")

        self.refresh()
        self._clear_form()
        self.view.set_status(f"Added: {added.name} (ID: {added.id})")

    def update(self, name: str, email: str, gpa_text: str) -> None:
        try:
            record_id = self._require_selection()
            data = validate_record_input(name, email, gpa_text)
            if not self.store.update(record_id, data.name, data.email, data.gpa):
                raise RecordNotFoundError()
        except RecordError as e:
            self._report(e)
            return

        logger.info(f"Updated record {record_id}")
        self.refresh()
        self._clear_form()
        self.view.set_status(f"Updated record ID: {record_id}")

    def delete(self) -> None:
        try:
            record_id = self._require_selection()
            record = self.store.find_by_id(record_id)
            if record is None:
                raise RecordNotFoundError()
        except RecordError as e:
            self._report(e)
            return

        if not self.view.request_confirmation(f"Are you sure you want to delete {record.name}?"):
            logger.debug(f"Deletion of record {record_id} cancelled")
            return

        self.store.delete(record_id)
        logger.info(f"Deleted record {record_id} ({record.name})")

        self.refresh()
        self._clear_form()
        self.view.set_status(f"Deleted: {record.name}")

    def search(self, text: str) -> None:
        term = text.strip()
        if not term:
            self.refresh()
            self.view.set_status("Showing all records")
            return

        results = self.store.search(term)
        self._render(results)
        self.view.set_status(f"Found {len(results)} result(s) for '{term}'")

    def select(self, row_index: int) -> None:
        row = self.session.row_at(row_index)
        if row is None:
            return

        self.session.selected_id = row.id
        self.view.populate_form(row.name, row.email, row.gpa_text)
        self.view.set_status(f"Selected: {row.name} (ID: {row.id})")

    def clear(self) -> None:
        self._clear_form()
        self.refresh()
        self.view.set_status("Ready")

    # --- HELPERS ---

    def refresh(self) -> None:
        """Reload all records from the store into the view."""
        self._render(self.store.list())

    def _render(self, records: Sequence[Record]) -> None:
        self.session.rows = [RecordRow.from_record(r) for r in records]
        self.view.render(list(self.session.rows), self.store.count())

    def _clear_form(self) -> None:
        self.session.clear_selection()
        self.view.clear_form()

    def _require_selection(self) -> int:
        if self.session.selected_id is None:
            raise EmptySelectionError()
        return self.session.selected_id

    def _report(self, error: RecordError) -> None:
        logger.warning(f"{type(error).__name__}: {error}")
        self.view.show_error(str(error))
