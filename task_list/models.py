"""Task model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Task:
    """Immutable task representation.

    The repository hands out these values; changing a task means building
    a new one with ``with_updates`` and passing it to ``TaskRepository.update``.

    Attributes:
        id: Unique task identifier, assigned by the repository.
        title: Task title.
        description: Task description.
        completed: Completion status.
    """

    id: int
    title: str
    description: str = ""
    completed: bool = False

    def with_updates(
        self,
        title: Optional[str] = None,
        description: Optional[str] = None,
        completed: Optional[bool] = None,
    ) -> Task:
        """Create a new Task with updated fields. The id never changes."""
        return Task(
            id=self.id,
            title=title if title is not None else self.title,
            description=description if description is not None else self.description,
            completed=completed if completed is not None else self.completed,
        )

    def mark_completed(self) -> Task:
        """Return a new Task flagged as completed."""
        return self.with_updates(completed=True)
