"""Task models and creation."""

from .factory import create
from .models import Done, ItemType, Pending, TaskItem, TaskStatus, display_item

__all__ = [
    "create",
    "display_item",
    "TaskStatus",
    "TaskItem",
    "Pending",
    "Done",
    "ItemType",
]
