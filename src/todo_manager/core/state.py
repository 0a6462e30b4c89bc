# src/todo_manager/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings (or a test stand-in) kept on the state for easy access elsewhere.
    settings: object

    task_store: TaskStore
