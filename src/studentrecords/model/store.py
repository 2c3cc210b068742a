"""
Record Store (Data Model)
=========================
The in-memory owner of every Record and of the id sequence.

Why is this file needed?
------------------------
1. State Management: It holds the record collection in one place for the
   lifetime of the process. Nothing is persisted.
2. Isolation: Every read hands out copies, so a view or controller can never
   mutate stored records through a returned reference.
3. Identity: Ids come from a counter that only grows, so an id is never
   reused, not even after its record was deleted.

Classes:
    RecordStore: The collection with its CRUD and search operations.
"""
from __future__ import annotations

import copy
import logging
from typing import Iterable, Optional

from studentrecords.model.record import Record

logger = logging.getLogger(__name__)


class RecordStore:
    """
    Ordered collection of records (insertion order = display order).
    All operations are synchronous and never raise for well-formed arguments.
    """

    def __init__(self, seed: Iterable[tuple[str, str, float]] = ()) -> None:
        self._records: list[Record] = []
        self._next_id: int = 1

        for name, email, gpa in seed:
            self.create(name, email, gpa)

    @property
    def next_id(self) -> int:
        return self._next_id

    # --- CRUD ---

    def create(self, name: str, email: str, gpa: float) -> Record:
        """Append a new record and return a copy of it. Fields must be validated by the caller."""
        record = Record(id=self._next_id, name=name, email=email, gpa=gpa)
        self._next_id += 1
        self._records.append(record)
        logger.debug(f"Created record {record.id}: {record.name}")
        return copy.copy(record)

    def list(self) -> list[Record]:
        return [copy.copy(r) for r in self._records]

    def find_by_id(self, record_id: int) -> Optional[Record]:
        record = self._find(record_id)
        if record is None:
            return None
        return copy.copy(record)

    def update(self, record_id: int, name: str, email: str, gpa: float) -> bool:
        """Overwrite the mutable fields in place. Returns False (no mutation) if the id is unknown."""
        record = self._find(record_id)
        if record is None:
            logger.debug(f"Update skipped, record {record_id} not found")
            return False

        record.name = name
        record.email = email
        record.gpa = gpa
        logger.debug(f"Updated record {record_id}")
        return True

    def delete(self, record_id: int) -> bool:
        for i, record in enumerate(self._records):
            if record.id == record_id:
                del self._records[i]
                logger.debug(f"Deleted record {record_id}")
                return True
        return False

    # --- QUERIES ---

    def search(self, substring: str) -> list[Record]:
        """Copies of all records whose name contains `substring`, ignoring case."""
        return [copy.copy(r) for r in self._records if r.matches(substring)]

    def count(self) -> int:
        return len(self._records)

    def _find(self, record_id: int) -> Optional[Record]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None
