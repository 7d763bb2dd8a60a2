"""Error taxonomy for the JSON file store.

All errors carry a plain, human-readable message; there are no error codes.
"""


class StorageError(Exception):
    """Base class for every failure raised by the store."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class StorageIOError(StorageError):
    """The backing file could not be opened, read or written."""


class FormatError(StorageError):
    """File content does not deserialize into the expected mapping, or a value fails to serialize."""


class NotFoundError(StorageError):
    """The requested identifier is not in the collection."""

    def __init__(self, item_id: str):
        super().__init__(f"Task with id {item_id} not found")
        self.item_id = item_id
