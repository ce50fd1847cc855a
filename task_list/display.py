"""Display formatting and console view for task output."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Protocol, TextIO

from tabulate import tabulate

from task_list.models import Task

EMPTY_LIST_MESSAGE = "Task list is empty."


class TaskView(Protocol):
    """Rendering capability used by the controller."""

    def display_tasks(self, tasks: Sequence[Task]) -> None: ...

    def display_message(self, message: str) -> None: ...


def format_tasks_table(tasks: Sequence[Task], table_format: str = "simple") -> str:
    """Format tasks as a table string, one row per task."""
    if not tasks:
        return EMPTY_LIST_MESSAGE

    headers = ["ID", "Title", "Description", "Done"]
    rows = [
        [
            task.id,
            task.title,
            task.description,
            "✓" if task.completed else "",
        ]
        for task in tasks
    ]
    return tabulate(rows, headers=headers, tablefmt=table_format, disable_numparse=True)


class ConsoleTaskView:
    """Writes tables and messages to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None, table_format: str = "simple") -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._table_format = table_format

    @property
    def stream(self) -> TextIO:
        return self._stream

    def display_tasks(self, tasks: Sequence[Task]) -> None:
        print(format_tasks_table(tasks, self._table_format), file=self._stream)

    def display_message(self, message: str) -> None:
        print(message, file=self._stream)
