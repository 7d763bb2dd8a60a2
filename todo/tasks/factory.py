"""Task creation: build a task for a status and persist it."""

import logging
from typing import Optional

from todo.persistence import JsonFileStore
from .models import VARIANTS, ItemType, TaskItem, TaskStatus

logger = logging.getLogger(__name__)


def create(title: str, status: TaskStatus,
           store: Optional[JsonFileStore[TaskItem]] = None) -> ItemType:
    """Create a task, save it under its title and return the matching variant.

    Args:
        title: Task title, used as the storage identifier
        status: Status selecting the Pending or Done variant
        store: Store to save into; defaults to the configured JSON file

    Returns:
        The variant built in memory. It is not re-read from disk.

    Raises:
        StorageError: Whatever ``save_one`` raises, unchanged
    """
    if store is None:
        store = JsonFileStore(TaskItem)

    item = TaskItem(title=title, status=status)
    store.save_one(title, item)
    logger.info(f"Created task '{title}' ({status})")
    return VARIANTS[status](item=item)
