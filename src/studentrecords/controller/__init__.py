"""
The CONTROLLER layer turns user intents into validated store operations.
It knows the model and the view contract, but never a concrete widget.
"""
from studentrecords.controller.record_controller import RecordController
from studentrecords.controller.session import Session

__all__ = ["RecordController", "Session"]
