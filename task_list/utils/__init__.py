"""Utility modules for the task list application."""

from task_list.utils.logger import setup_logger

__all__ = ["setup_logger"]
