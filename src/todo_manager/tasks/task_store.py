# src/todo_manager/tasks/task_store.py

from __future__ import annotations

import logging
from datetime import date

from ..core.ports import TaskPersistence
from ..errors import InvalidIndexError
from .task_models import Task, mark_completed, new_task, render_task

logger = logging.getLogger(__name__)

NO_TASKS_MESSAGE = "No tasks available."


class TaskStore:
    """
    Ordered in-memory task list backed by a TaskPersistence.

    - tasks are loaded once, at construction
    - insertion order is display order
    - every mutation rewrites the whole collection through persistence

    Indexes passed to remove()/complete() are 0-based; list_tasks() returns
    1-based positions for display.

    If persistence fails, the in-memory change is kept and the
    TaskStorageError propagates; the next successful save writes everything.
    """

    def __init__(self, persistence: TaskPersistence) -> None:
        self._persistence = persistence
        self._tasks: list[Task] = list(persistence.load())
        logger.info("TaskStore ready total=%s", len(self._tasks))

    # ---- low-level helpers ----

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._tasks):
            logger.debug("Rejected task index %s (size=%s)", index, len(self._tasks))
            raise InvalidIndexError(index, len(self._tasks))

    def _persist(self) -> None:
        self._persistence.save(self._tasks)

    # ---- public API ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def count_tasks(self) -> int:
        return len(self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    def add(self, description: str, due_date: date | None = None) -> Task:
        task = new_task(description, due_date)
        self._tasks.append(task)
        logger.debug("Task added pos=%s due=%s", len(self._tasks), due_date)
        self._persist()
        return task

    def remove(self, index: int) -> Task:
        self._check_index(index)
        task = self._tasks.pop(index)
        logger.debug("Task removed index=%s", index)
        self._persist()
        return task

    def complete(self, index: int) -> Task:
        """Mark the task at `index` completed. Completing twice is a no-op change."""
        self._check_index(index)
        task = mark_completed(self._tasks[index])
        self._tasks[index] = task
        logger.debug("Task completed index=%s", index)
        self._persist()
        return task

    def list_tasks(self) -> list[tuple[int, Task]]:
        return list(enumerate(self._tasks, start=1))

    def render_listing(self) -> str:
        if not self._tasks:
            return NO_TASKS_MESSAGE
        return "\n".join(f"{pos}. {render_task(task)}" for pos, task in self.list_tasks())
