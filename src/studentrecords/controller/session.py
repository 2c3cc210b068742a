from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from studentrecords.controller.ports import RecordRow


@dataclass
class Session:
    """
    Interaction state owned by the controller.
    `selected_id` is the record loaded into the edit form, `rows` the last rendered table.
    """
    selected_id: Optional[int] = None
    rows: list[RecordRow] = field(default_factory=list)

    def row_at(self, index: int) -> Optional[RecordRow]:
        if 0 <= index < len(self.rows):
            return self.rows[index]
        return None

    def clear_selection(self) -> None:
        self.selected_id = None
