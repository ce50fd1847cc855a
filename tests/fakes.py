"""Test doubles shared by the test modules."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from task_list.models import Task


@dataclass
class RecordingView:
    """
    TaskView that records what the controller asked it to show.

    - messages: every display_message text, in order
    - rendered: every task sequence passed to display_tasks
    """

    messages: list[str] = field(default_factory=list)
    rendered: list[list[Task]] = field(default_factory=list)

    def display_tasks(self, tasks: Sequence[Task]) -> None:
        self.rendered.append(list(tasks))

    def display_message(self, message: str) -> None:
        self.messages.append(message)

    @property
    def last_message(self) -> str | None:
        return self.messages[-1] if self.messages else None


class ScriptedInput:
    """Replays answers for ``input()`` and records the prompts it was given.

    Raises EOFError once the script runs out, like ``input`` at end of stdin.
    """

    def __init__(self, answers: Sequence[str]) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)
