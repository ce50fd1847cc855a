"""Orchestration layer between the menu loop and the repository."""

from __future__ import annotations

import logging

from task_list.display import TaskView
from task_list.repository import TaskRepository

logger = logging.getLogger(__name__)

MSG_ADDED = "Task '{title}' added."
MSG_UPDATED = "Task updated."
MSG_DELETED = "Task deleted."
MSG_COMPLETED = "Task marked as completed."
MSG_NOT_FOUND = "Task not found."


class TaskController:
    """Runs task operations and reports each outcome through a view.

    Every operation writes exactly one thing to the view. A missing task id
    is the only failure; it is reported as a message and the operation
    returns False instead of raising.
    """

    def __init__(self, repository: TaskRepository, view: TaskView) -> None:
        """Initialize controller with a repository and a view."""
        self._repo = repository
        self._view = view

    def add_task(self, title: str, description: str) -> bool:
        """Create a new task."""
        task = self._repo.create(title, description)
        logger.info("Added task #%d", task.id)
        self._view.display_message(MSG_ADDED.format(title=task.title))
        return True

    def list_tasks(self) -> bool:
        """Hand every task to the view for rendering."""
        self._view.display_tasks(self._repo.list())
        return True

    def edit_task(self, task_id: int, new_title: str, new_description: str) -> bool:
        """Replace title and description of an existing task."""
        task = self._repo.find_by_id(task_id)
        if task is None:
            return self._not_found(task_id)

        self._repo.update(task.with_updates(title=new_title, description=new_description))
        logger.info("Edited task #%d", task_id)
        self._view.display_message(MSG_UPDATED)
        return True

    def delete_task(self, task_id: int) -> bool:
        """Delete a task by ID."""
        if not self._repo.delete(task_id):
            return self._not_found(task_id)

        logger.info("Deleted task #%d", task_id)
        self._view.display_message(MSG_DELETED)
        return True

    def mark_completed(self, task_id: int) -> bool:
        """Flag a task as completed. Marking it again changes nothing."""
        task = self._repo.find_by_id(task_id)
        if task is None:
            return self._not_found(task_id)

        if not task.completed:
            self._repo.update(task.mark_completed())
        logger.info("Completed task #%d", task_id)
        self._view.display_message(MSG_COMPLETED)
        return True

    def _not_found(self, task_id: int) -> bool:
        logger.info("Task #%d not found", task_id)
        self._view.display_message(MSG_NOT_FOUND)
        return False
