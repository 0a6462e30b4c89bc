# src/todo_manager/core/ports.py

"""
Ports (interfaces) used by the task store.

The store depends on a Protocol instead of the concrete file codec, so tests
can swap in an in-memory fake.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from ..tasks.task_models import Task


class TaskPersistence(Protocol):
    """Whole-collection load/save. Every save replaces what was stored before."""

    def load(self) -> list[Task]: ...

    def save(self, tasks: Sequence[Task]) -> None: ...
