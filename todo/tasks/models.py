"""Task data models."""

from enum import Enum
from typing import Union

from pydantic import BaseModel, Field


class TaskStatus(str, Enum):
    """Completion state of a task."""

    PENDING = "PENDING"
    DONE = "DONE"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, text: str) -> "TaskStatus":
        """Parse a status name, ignoring case and surrounding whitespace."""
        try:
            return cls(text.strip().upper())
        except ValueError:
            raise ValueError(f"Unknown task status: {text!r}") from None


class TaskItem(BaseModel):
    """Payload shared by every task variant; this is what gets persisted."""
    title: str = Field(..., description="Task title, also used as its identifier")
    status: TaskStatus = Field(..., description="Completion state")


class Pending(BaseModel):
    """A task that still has to be done."""
    item: TaskItem

    def __str__(self) -> str:
        return display_item(self)


class Done(BaseModel):
    """A finished task."""
    item: TaskItem

    def __str__(self) -> str:
        return display_item(self)


ItemType = Union[Pending, Done]

VARIANTS = {
    TaskStatus.PENDING: Pending,
    TaskStatus.DONE: Done,
}


def display_item(variant: ItemType) -> str:
    """Render a task variant as its title text."""
    if isinstance(variant, Pending):
        return variant.item.title
    if isinstance(variant, Done):
        return variant.item.title
    raise TypeError(f"Not a task variant: {type(variant).__name__}")
