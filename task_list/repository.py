"""In-memory repository for tasks."""

from __future__ import annotations

import logging

from task_list.models import Task

logger = logging.getLogger(__name__)


class TaskRepository:
    """Owns the task collection for one session.

    This class follows the Repository pattern: it is the only place that
    allocates ids and the only writer of the collection. Tasks are kept in
    insertion order; ids start at 1 and are never reused, even after a delete.
    """

    def __init__(self) -> None:
        """Initialize an empty repository."""
        self._tasks: list[Task] = []
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._tasks)

    def _allocate_id(self) -> int:
        task_id = self._next_id
        self._next_id += 1
        return task_id

    def _index_of(self, task_id: int) -> int | None:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return None

    def create(self, title: str, description: str = "") -> Task:
        """Append a new task and return it with its assigned ID."""
        task = Task(id=self._allocate_id(), title=title, description=description)
        self._tasks.append(task)
        logger.debug("Created task #%d", task.id)
        return task

    def list(self) -> list[Task]:
        """Retrieve all tasks in insertion order."""
        return list(self._tasks)

    def find_by_id(self, task_id: int) -> Task | None:
        """Retrieve a task by ID, or None if not found."""
        index = self._index_of(task_id)
        return self._tasks[index] if index is not None else None

    def update(self, task: Task) -> bool:
        """Replace an existing task. Returns True if task was found and updated."""
        index = self._index_of(task.id)
        if index is None:
            return False

        self._tasks[index] = task
        logger.debug("Updated task #%d", task.id)
        return True

    def delete(self, task_id: int) -> bool:
        """Delete a task by ID. Returns True if task was found and deleted."""
        index = self._index_of(task_id)
        if index is None:
            return False

        del self._tasks[index]
        logger.debug("Deleted task #%d", task_id)
        return True
