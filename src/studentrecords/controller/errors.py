"""
User-facing errors raised while handling an intent.
The message of each error is what the view shows in its error dialog.
"""
from __future__ import annotations

from studentrecords.config import GPA_MAX, GPA_MIN


class RecordError(Exception):
    """Base class for every error reported back to the user."""
    message: str = "Something went wrong."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class ValidationError(RecordError):
    """The form input cannot be turned into a record. The store is left untouched."""


class MissingFieldError(ValidationError):
    message = "Please fill in all fields."


class InvalidGpaError(ValidationError):
    message = "GPA must be a valid number (e.g., 3.75)"


class GpaOutOfRangeError(ValidationError):
    message = f"GPA must be between {GPA_MIN:.1f} and {GPA_MAX:.1f}"


class EmptySelectionError(RecordError):
    message = "Please select a record from the table first."


class RecordNotFoundError(RecordError):
    message = "Record not found."
