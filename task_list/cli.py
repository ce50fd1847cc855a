"""Interactive menu interface for the task list."""

from __future__ import annotations

import argparse
import logging
import re
import sys
from collections.abc import Callable, Sequence
from typing import Optional, TextIO

from task_list.config import load_settings
from task_list.controller import TaskController
from task_list.display import ConsoleTaskView, TaskView
from task_list.exceptions import ConfigError
from task_list.repository import TaskRepository
from task_list.utils.logger import setup_logger

logger = logging.getLogger(__name__)

MENU = """
Task manager:
1. Add task
2. List tasks
3. Edit task
4. Delete task
5. Mark task as completed
6. Exit"""

PROMPT = "Choose an action: "

COMMANDS = {
    1: "add",
    2: "list",
    3: "edit",
    4: "delete",
    5: "complete",
    6: "exit",
}

MSG_INVALID_NUMBER = "Please enter a valid number."
MSG_INVALID_CHOICE = "Invalid choice. Try again."
MSG_INVALID_ID = "Invalid ID."

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
_INT_RE = re.compile(r"\s*[+-]?\d+\s*", re.ASCII)


def parse_int(value: str) -> Optional[int]:
    """Parse a menu choice or task ID, or None if it is not a 32-bit integer.

    Only ASCII digits with an optional sign are accepted; underscores and
    other Unicode digits are rejected.
    """
    if not _INT_RE.fullmatch(value):
        return None
    number = int(value)
    if not INT32_MIN <= number <= INT32_MAX:
        return None
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="task_list",
        description="In-memory task list with an interactive menu.",
    )
    parser.add_argument("--config", "-c", help="YAML config path")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    return parser


class CLI:
    """Numbered menu loop handler."""

    def __init__(
        self,
        controller: TaskController,
        view: TaskView,
        input_func: Callable[[str], str] = input,
        stream: TextIO | None = None,
    ) -> None:
        """Initialize CLI with a controller and the view it reports through."""
        self._controller = controller
        self._view = view
        self._input = input_func
        self._stream = stream if stream is not None else sys.stdout

    def run(self) -> int:
        """Serve menu choices until exit or end of input. Returns exit code."""
        while True:
            print(MENU, file=self._stream)
            try:
                if not self._dispatch(self._input(PROMPT)):
                    return 0
            except EOFError:
                logger.debug("End of input, leaving menu loop")
                return 0

    def _dispatch(self, raw_choice: str) -> bool:
        """Run one menu choice. Returns False when the loop should stop."""
        choice = parse_int(raw_choice)
        if choice is None:
            self._view.display_message(MSG_INVALID_NUMBER)
            return True

        command = COMMANDS.get(choice)
        if command is None:
            self._view.display_message(MSG_INVALID_CHOICE)
            return True

        logger.debug("Menu choice: %s", command)
        if command == "exit":
            return False

        handler = getattr(self, f"_handle_{command}")
        handler()
        return True

    def _read_task_id(self, prompt: str) -> Optional[int]:
        task_id = parse_int(self._input(prompt))
        if task_id is None:
            self._view.display_message(MSG_INVALID_ID)
        return task_id

    def _handle_add(self) -> None:
        """Handle add choice."""
        title = self._input("Task title: ")
        description = self._input("Task description: ")
        self._controller.add_task(title, description)

    def _handle_list(self) -> None:
        """Handle list choice."""
        self._controller.list_tasks()

    def _handle_edit(self) -> None:
        """Handle edit choice."""
        task_id = self._read_task_id("Task ID to edit: ")
        if task_id is None:
            return
        new_title = self._input("New title: ")
        new_description = self._input("New description: ")
        self._controller.edit_task(task_id, new_title, new_description)

    def _handle_delete(self) -> None:
        """Handle delete choice."""
        task_id = self._read_task_id("Task ID to delete: ")
        if task_id is not None:
            self._controller.delete_task(task_id)

    def _handle_complete(self) -> None:
        """Handle complete choice."""
        task_id = self._read_task_id("Task ID to complete: ")
        if task_id is not None:
            self._controller.mark_completed(task_id)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
    except ConfigError as e:
        setup_logger(level=logging.ERROR)
        logger.error(f"Configuration error: {e}")
        return 1

    log_level = logging.DEBUG if args.verbose else settings.log_level_value
    try:
        setup_logger(log_dir=settings.log_dir, level=log_level)
    except OSError as e:
        setup_logger(level=logging.ERROR)
        logger.error(f"Configuration error: cannot open log file in {settings.log_dir}: {e}")
        return 1

    # Initialize components
    repository = TaskRepository()
    view = ConsoleTaskView(table_format=settings.table_format)
    controller = TaskController(repository, view)
    cli = CLI(controller, view, stream=view.stream)

    try:
        return cli.run()
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130
