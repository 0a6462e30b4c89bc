# tests/fakes.py

from __future__ import annotations

from collections.abc import Sequence

from todo_manager.errors import TaskStorageError
from todo_manager.tasks.task_models import Task


class FakePersistence:
    """
    In-memory TaskPersistence for store/console unit tests.

    - `saved` holds the last saved snapshot
    - `save_calls` counts saves
    - set `fail_next_save` to simulate a write error
    """

    def __init__(self, tasks: Sequence[Task] = ()) -> None:
        self.saved: list[Task] = list(tasks)
        self.save_calls = 0
        self.fail_next_save = False

    def load(self) -> list[Task]:
        return list(self.saved)

    def save(self, tasks: Sequence[Task]) -> None:
        self.save_calls += 1
        if self.fail_next_save:
            self.fail_next_save = False
            raise TaskStorageError("disk full")
        self.saved = list(tasks)


class ScriptedInput:
    """Feeds prepared answers to input() prompts; EOF when the script runs out."""

    def __init__(self, answers: Sequence[str]) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)
