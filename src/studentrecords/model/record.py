from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Record:
    """A single student entry. The id is assigned by the store."""
    id: int
    name: str
    email: str
    gpa: float

    def matches(self, substring: str) -> bool:
        """Case-insensitive substring match on the name."""
        return substring.lower() in self.name.lower()
