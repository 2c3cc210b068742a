from __future__ import annotations

import math
import re
from dataclasses import dataclass

from studentrecords.config import GPA_MAX, GPA_MIN
from studentrecords.controller.errors import GpaOutOfRangeError, InvalidGpaError, MissingFieldError


# Plain ASCII decimal, optional exponent; "nan" and "inf" are let through to the range check
GPA_PATTERN = re.compile(r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|nan|inf|infinity)", re.IGNORECASE)


@dataclass(frozen=True)
class RecordInput:
    """Validated form fields, ready to be handed to the store."""
    name: str
    email: str
    gpa: float


def parse_gpa(text: str) -> float:
    """
    Parse GPA text and check the bounds.

    Raises:
        InvalidGpaError: The text is not a decimal number.
        GpaOutOfRangeError: The number is outside [GPA_MIN, GPA_MAX] (NaN included).
    """
    if GPA_PATTERN.fullmatch(text) is None:
        raise InvalidGpaError()
    gpa = float(text)

    if math.isnan(gpa) or not (GPA_MIN <= gpa <= GPA_MAX):
        raise GpaOutOfRangeError()
    return gpa


def validate_record_input(name: str, email: str, gpa_text: str) -> RecordInput:
    """
    Validates raw form text in a fixed order: required fields, GPA number, GPA range.
    Surrounding whitespace is stripped from every field first.
    """
    name, email, gpa_text = name.strip(), email.strip(), gpa_text.strip()

    if not name or not email or not gpa_text:
        raise MissingFieldError()

    return RecordInput(name=name, email=email, gpa=parse_gpa(gpa_text))
