"""Single-user student record manager (PySide6)."""
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("studentrecords")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
