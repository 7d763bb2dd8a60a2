"""JSON file persistence for todo."""

from .errors import FormatError, NotFoundError, StorageError, StorageIOError
from .json_file import JsonFileStore

__all__ = [
    "JsonFileStore",
    "StorageError",
    "StorageIOError",
    "FormatError",
    "NotFoundError",
]
