"""Task List - an in-memory task manager with a text menu."""

from task_list.controller import TaskController
from task_list.display import ConsoleTaskView, TaskView
from task_list.models import Task
from task_list.repository import TaskRepository

__all__ = ["ConsoleTaskView", "Task", "TaskController", "TaskRepository", "TaskView"]
