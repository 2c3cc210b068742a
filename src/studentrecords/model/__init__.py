"""
The MODEL layer contains pure data structures and the record store.
It has NO knowledge of the GUI (Qt) or of the controller.
"""
from studentrecords.model.record import Record
from studentrecords.model.store import RecordStore

__all__ = ["Record", "RecordStore"]
