"""Shared fixtures."""

from __future__ import annotations

import pytest

from task_list.controller import TaskController
from task_list.repository import TaskRepository

from .fakes import RecordingView


@pytest.fixture
def repository() -> TaskRepository:
    """A fresh, empty repository."""
    return TaskRepository()


@pytest.fixture
def view() -> RecordingView:
    return RecordingView()


@pytest.fixture
def controller(repository: TaskRepository, view: RecordingView) -> TaskController:
    """A controller wired to the repository fixture and a recording view."""
    return TaskController(repository, view)
