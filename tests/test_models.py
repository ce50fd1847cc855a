"""Tests for Task model."""

import dataclasses

import pytest
from task_list.models import Task


class TestTask:
    """Tests for Task dataclass."""

    def test_create_minimal(self):
        task = Task(id=1, title="Test task")
        assert task.title == "Test task"
        assert task.description == ""
        assert task.completed is False

    def test_is_immutable(self):
        task = Task(id=1, title="Frozen")

        with pytest.raises(dataclasses.FrozenInstanceError):
            task.title = "Changed"

    def test_with_updates_replaces_given_fields(self):
        task = Task(id=3, title="Old", description="old desc")
        updated = task.with_updates(title="New")

        assert updated.id == 3
        assert updated.title == "New"
        assert updated.description == "old desc"
        assert updated.completed is False

    def test_with_updates_returns_new_instance(self):
        task = Task(id=1, title="Original")
        updated = task.with_updates(title="Updated")

        assert task.title == "Original"
        assert updated is not task

    def test_with_updates_accepts_empty_strings(self):
        task = Task(id=1, title="Title", description="Text")
        updated = task.with_updates(title="", description="")

        assert updated.title == ""
        assert updated.description == ""

    def test_mark_completed(self):
        task = Task(id=1, title="Finish me")
        done = task.mark_completed()

        assert done.completed is True
        assert done.mark_completed().completed is True
        assert task.completed is False
