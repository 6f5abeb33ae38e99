"""
Client-side data models.

Defines the task value type mirrored from the remote task API, the per-row
view/edit state machine used by the task list page, the tagged result
returned by every synchronizer operation, and the two routes that control
can be handed to.

The server is authoritative for every ``Task`` field: instances are only
ever built from a server payload, never derived on the client.

Key Concepts Demonstrated:
- Frozen dataclasses as immutable value objects
- ``str``/``Enum`` dual inheritance for ergonomic comparisons
- Tagged result objects instead of pre-confirmation mutation
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from .errors import ClientError

T = TypeVar("T")


class Route(str, Enum):
    """
    Entry points the client can transfer control to.

    Attributes:
        LOGIN: The login form.
        TASKS: The protected task list view.
    """

    LOGIN = "login"
    TASKS = "tasks"


@dataclass(frozen=True)
class Task:
    """
    A unit of to-do work as returned by the task API.

    Attributes:
        id: Server-assigned, immutable identifier.
        title: Short title.
        description: Free-form description (``""`` when the server sends null).
        completed: Completion flag, owned by the server.
    """

    id: int
    title: str
    description: str
    completed: bool

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> Task:
        """
        Build a task from a JSON object returned by the task API.

        Args:
            data: Decoded JSON object for a single task.

        Returns:
            The corresponding :class:`Task`.

        Raises:
            ValueError: If the payload is not an object or has no integer ``id``.
        """
        if not isinstance(data, dict):
            raise ValueError("Task payload must be a JSON object")
        task_id = data.get("id")
        # bool is an int subclass; reject it explicitly.
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            raise ValueError("Task payload is missing an integer 'id'")
        return cls(
            id=task_id,
            title=str(data.get("title") or ""),
            description=str(data.get("description") or ""),
            completed=bool(data.get("completed", False)),
        )

    def to_payload(self) -> dict[str, Any]:
        """Return the task in its JSON wire shape."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "completed": self.completed,
        }


class RowMode(str, Enum):
    """Display mode of a single task row."""

    VIEWING = "viewing"
    EDITING = "editing"


@dataclass(frozen=True)
class RowState:
    """
    State of one row in the task list.

    A row starts and ends in ``VIEWING``. Entering ``EDITING`` snapshots the
    task's title and description into the edit buffers; the buffers are
    discarded when the row returns to ``VIEWING``.
    """

    mode: RowMode = RowMode.VIEWING
    title: str = ""
    description: str = ""

    @classmethod
    def viewing(cls) -> RowState:
        return cls()

    @classmethod
    def editing(cls, title: str, description: str) -> RowState:
        return cls(mode=RowMode.EDITING, title=title, description=description)

    @property
    def is_editing(self) -> bool:
        return self.mode is RowMode.EDITING


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a client operation.

    Exactly one of ``value`` or ``error`` is meaningful: check ``ok`` first.
    Only the ``value`` of an ok result may be applied to local state.
    """

    value: T | None = None
    error: ClientError | None = None

    @classmethod
    def success(cls, value: T | None = None) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: ClientError) -> Result[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None
