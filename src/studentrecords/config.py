"""
Configuration & Constants
=========================
This module serves as the central registry for application constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (GPA bounds) and identity strings
   from being scattered throughout the code.
2. Startup Data: It holds the fixed seed set loaded into the store when the
   application starts, so the table is not empty on first launch.

Exports:
    VISIBLE_APP_NAME (str): Window title and display name.
    GPA_MIN, GPA_MAX (float): Inclusive GPA bounds.
    SEED_RECORDS (tuple): (name, email, gpa) rows loaded at startup.
"""
import logging
from typing import Optional

ORG_ID = "studentrecords"
APP_ID = "student-records"
VISIBLE_APP_NAME = "Student Management System"

GPA_MIN: float = 0.0
GPA_MAX: float = 4.0

SEED_RECORDS: tuple[tuple[str, str, float], ...] = (
    ("Alice Johnson", "alice@university.com", 3.8),
    ("Bob Smith", "bob@university.com", 3.5),
    ("Carol Williams", "carol@university.com", 3.9),
)

LOG_LEVEL: int = logging.INFO
LOG_FILE: Optional[str] = None
