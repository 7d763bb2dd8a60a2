"""Key-value storage backed by a single JSON file.

The whole collection lives in one file as ``{identifier: item}``. Every
operation loads the complete mapping and every mutation rewrites the complete
file; there is no cache, no index and no locking.
"""

import logging
import math
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Generic, Iterator, Optional, TextIO, TypeVar, Union

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from todo.config import get_settings
from .errors import FormatError, NotFoundError, StorageError, StorageIOError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _reject_non_finite(value: Any, where: str = "") -> None:
    """Raise ValueError for nan/inf, which JSON cannot represent."""
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"Out of range float value {value!r} at '{where or '/'}'")
    if isinstance(value, dict):
        for key, child in value.items():
            _reject_non_finite(child, f"{where}/{key}")
    elif isinstance(value, (list, tuple, set, frozenset)):
        for index, child in enumerate(value):
            _reject_non_finite(child, f"{where}/{index}")


class JsonFileStore(Generic[T]):
    """Generic JSON file store keyed by string identifiers.

    Items are validated and serialized through pydantic, so ``item_type`` can
    be anything pydantic understands: a ``BaseModel`` subclass, ``dict``,
    ``str`` and so on. Each load builds fresh instances, so values handed out
    by the store are copies.
    """

    def __init__(self, item_type: Any, path: Optional[Union[str, Path]] = None):
        """Initialize the store.

        Args:
            item_type: Type of the stored items
            path: Backing file. When omitted it is read from JSON_STORE_PATH
                on every operation, falling back to ``tasks.json``
        """
        self.item_type = item_type
        self._path = Path(path) if path is not None else None
        self._adapter: TypeAdapter[Dict[str, T]] = TypeAdapter(Dict[str, item_type])

    @property
    def path(self) -> Path:
        if self._path is not None:
            return self._path
        return get_settings().store_path

    @contextmanager
    def _open_handle(self) -> Iterator[TextIO]:
        """Open the backing file read-write, creating it when missing."""
        path = self.path
        try:
            fd = os.open(path, os.O_RDWR | os.O_CREAT, 0o644)
        except OSError as e:
            raise StorageIOError(f"Error opening file: {e}") from e
        try:
            handle = os.fdopen(fd, "r+", encoding="utf-8")
        except OSError as e:
            os.close(fd)
            raise StorageIOError(f"Error opening file: {e}") from e

        logger.debug(f"Opened store file {path}")
        with handle:
            yield handle

    def load_all(self) -> Dict[str, T]:
        """Load the complete collection.

        Returns:
            Mapping of identifier to item

        Raises:
            StorageIOError: The file cannot be opened or read
            FormatError: The content is not a JSON object of items. An empty
                file is not an empty collection and fails here too.
        """
        with self._open_handle() as f:
            try:
                contents = f.read()
            except UnicodeDecodeError as e:
                raise FormatError(f"Error parsing JSON: {e}") from e
            except OSError as e:
                raise StorageIOError(f"Error reading file: {e}") from e

        try:
            items = self._adapter.validate_json(contents)
        except ValidationError as e:
            raise FormatError(f"Error parsing JSON: {e}") from e

        logger.debug(f"Loaded {len(items)} items from {self.path}")
        return items

    def save_all(self, items: Dict[str, T]) -> None:
        """Overwrite the file with the pretty-printed collection.

        Not atomic: a crash mid-write can leave a truncated file.

        Raises:
            FormatError: The collection cannot be serialized
            StorageIOError: The file cannot be opened or written
        """
        try:
            _reject_non_finite(self._adapter.dump_python(items))
            payload = self._adapter.dump_json(items, indent=2).decode("utf-8")
        except (PydanticSerializationError, ValueError) as e:
            raise FormatError(f"Error serializing JSON: {e}") from e

        with self._open_handle() as f:
            try:
                f.seek(0)
                f.write(payload)
                f.truncate()
            except OSError as e:
                raise StorageIOError(f"Error writing to file: {e}") from e

        logger.debug(f"Saved {len(items)} items to {self.path}")

    def get_one(self, item_id: str) -> T:
        """Return the item stored under ``item_id``.

        Raises:
            NotFoundError: No item has that identifier
        """
        items = self.load_all()
        if item_id not in items:
            raise NotFoundError(item_id)
        return items[item_id]

    def _load_or_empty(self) -> Dict[str, T]:
        try:
            return self.load_all()
        except StorageError as e:
            logger.debug(f"Starting from an empty collection: {e}")
            return {}

    def save_one(self, item_id: str, item: T) -> None:
        """Insert or overwrite ``item_id`` and persist the collection.

        A file that is missing, empty or unreadable is treated as an empty
        collection. Only the final write can fail.
        """
        items = self._load_or_empty()
        items[item_id] = item
        self.save_all(items)

    def delete_one(self, item_id: str) -> None:
        """Remove ``item_id`` if present and persist the collection.

        Deleting an unknown identifier is a no-op rewrite.
        """
        items = self._load_or_empty()
        items.pop(item_id, None)
        self.save_all(items)
