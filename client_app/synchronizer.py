"""
Task list synchronizer.

Keeps the client's ordered task collection consistent with the task API.
The collection is loaded once on page entry; after that every mutation
waits for the server and applies exactly the object the server returned,
matched by id. Nothing is changed locally before the server confirms it.

Each row has its own ``RowState`` (viewing or editing). Entering editing
copies the row's title and description into edit buffers; saving only
returns to viewing when the server accepts the update, and cancelling
discards the buffers without touching the network.

Failures never raise out of this module. They are caught where the
request is made, their message is written into the single ``error`` slot
(overwriting any previous one) and a failed :class:`Result` is returned.
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from .api import TaskApiClient
from .errors import ClientError
from .models import Result, RowState, Task
from .session import SessionContext

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TaskListSynchronizer:
    """
    Local, ordered cache of the user's tasks plus the list page's UI state.

    Attributes:
        tasks: Tasks in arrival order.
        error: Last failure message, or ``""``.
        title: Add-form title input.
        description: Add-form description input.
    """

    def __init__(self, context: SessionContext, api: TaskApiClient):
        self.context = context
        self.api = api
        self.tasks: list[Task] = []
        self.error = ""
        self.title = ""
        self.description = ""
        self._rows: dict[int, RowState] = {}

    # -----------------------------------------------------------------
    # Internals
    # -----------------------------------------------------------------

    def _request(self, call: Callable[[str], T]) -> Result[T]:
        """Run ``call`` with the stored token, converting failures to a Result."""
        try:
            token = self.context.require()
            return Result.success(call(token))
        except ClientError as exc:
            self.error = exc.message
            return Result.failure(exc)

    def _set_tasks(self, tasks: list[Task]) -> None:
        self.tasks = tasks
        known = {task.id for task in tasks}
        self._rows = {task_id: row for task_id, row in self._rows.items() if task_id in known}
        logger.debug("Current tasks: %s", [task.to_payload() for task in tasks])

    def _replace(self, updated: Task) -> None:
        self._set_tasks([updated if task.id == updated.id else task for task in self.tasks])

    # -----------------------------------------------------------------
    # Queries
    # -----------------------------------------------------------------

    def get(self, task_id: int) -> Task | None:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def row_state(self, task_id: int) -> RowState:
        return self._rows.get(task_id, RowState.viewing())

    def is_editing(self, task_id: int) -> bool:
        return self.row_state(task_id).is_editing

    # -----------------------------------------------------------------
    # Server operations
    # -----------------------------------------------------------------

    def load(self) -> Result[list[Task]]:
        """
        Replace the collection with the server's list.

        On failure the last-known-good collection is kept as it was.
        """
        result = self._request(self.api.list_tasks)
        if result.ok:
            self._set_tasks(list(result.value))
        return result

    def add(self, title: str | None = None, description: str | None = None) -> Result[Task]:
        """
        Create a task and append the server's copy to the end of the list.

        ``title`` and ``description`` default to the add-form inputs, which
        are reset to ``""`` on success and left as typed on failure.
        """
        title = self.title if title is None else title
        description = self.description if description is None else description

        result = self._request(lambda token: self.api.create_task(token, title, description))
        if result.ok:
            self._set_tasks([*self.tasks, result.value])
            self.title = ""
            self.description = ""
        return result

    def remove(self, task_id: int, confirm: Callable[[int], bool]) -> Result[bool]:
        """
        Delete a task after the caller confirms it.

        Returns:
            ``Result.success(True)`` once the server deleted the task,
            ``Result.success(False)`` if confirmation was declined (no
            request is sent), or a failed result.
        """
        if not confirm(task_id):
            return Result.success(False)

        result = self._request(lambda token: self.api.delete_task(token, task_id))
        if not result.ok:
            return result
        self._set_tasks([task for task in self.tasks if task.id != task_id])
        return Result.success(True)

    def update(self, task_id: int, title: str, description: str) -> Result[Task]:
        """
        Send new title/description and apply the server's copy.

        On success the row returns to viewing. On failure the row stays in
        (or enters) editing with the submitted values in its buffers.
        """
        result = self._request(
            lambda token: self.api.update_task(token, task_id, title, description)
        )
        if result.ok:
            self._replace(result.value)
            self._rows.pop(task_id, None)
        else:
            self._rows[task_id] = RowState.editing(title, description)
        return result

    def toggle_completion(self, task_id: int) -> Result[Task]:
        """Ask the server to flip completion and apply whatever it returns."""
        result = self._request(lambda token: self.api.toggle_task(token, task_id))
        if result.ok:
            self._replace(result.value)
        return result

    # -----------------------------------------------------------------
    # Row editing
    # -----------------------------------------------------------------

    def begin_edit(self, task_id: int) -> RowState:
        """
        Put a row into editing, snapshotting its title and description.

        Raises:
            KeyError: If the task is not in the local collection.
        """
        task = self.get(task_id)
        if task is None:
            raise KeyError(task_id)
        row = RowState.editing(task.title, task.description)
        self._rows[task_id] = row
        return row

    def set_edit_buffer(
        self, task_id: int, *, title: str | None = None, description: str | None = None
    ) -> RowState:
        """
        Change a row's edit buffers.

        Raises:
            ValueError: If the row is not being edited.
        """
        row = self.row_state(task_id)
        if not row.is_editing:
            raise ValueError(f"Task {task_id} is not being edited")
        row = RowState.editing(
            row.title if title is None else title,
            row.description if description is None else description,
        )
        self._rows[task_id] = row
        return row

    def save(self, task_id: int) -> Result[Task]:
        """Submit a row's edit buffers as an update."""
        row = self.row_state(task_id)
        if not row.is_editing:
            raise ValueError(f"Task {task_id} is not being edited")
        return self.update(task_id, row.title, row.description)

    def cancel_edit(self, task_id: int) -> None:
        """Discard a row's edit buffers without contacting the server."""
        self._rows.pop(task_id, None)
