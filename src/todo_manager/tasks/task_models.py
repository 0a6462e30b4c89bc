# src/todo_manager/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import TypeAlias

CHECK_DONE = "[X]"
CHECK_OPEN = "[ ]"


@dataclass(frozen=True, slots=True)
class BasicTask:
    description: str
    is_completed: bool = False


@dataclass(frozen=True, slots=True)
class ImportantTask:
    """
    A task with a due date.

    Behaves exactly like BasicTask; only the rendered line differs.
    """

    description: str
    due_date: date
    is_completed: bool = False


Task: TypeAlias = BasicTask | ImportantTask


def new_task(description: str, due_date: date | None = None) -> Task:
    if due_date is None:
        return BasicTask(description=description)
    return ImportantTask(description=description, due_date=due_date)


def mark_completed(task: Task) -> Task:
    if task.is_completed:
        return task
    return replace(task, is_completed=True)


def _box(is_completed: bool) -> str:
    return CHECK_DONE if is_completed else CHECK_OPEN


def render_task(task: Task) -> str:
    match task:
        case ImportantTask(description=description, due_date=due_date, is_completed=done):
            return f"{_box(done)} {description} (Due: {due_date.isoformat()})"
        case BasicTask(description=description, is_completed=done):
            return f"{_box(done)} {description}"
        case _:
            raise TypeError(f"not a task: {task!r}")
