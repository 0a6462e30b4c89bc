# src/todo_manager/errors.py

"""
Exception types shared by the store, the codec and the console.

Each error also derives from the closest builtin so callers that only know
about IndexError / ValueError / OSError keep working.
"""

from __future__ import annotations

from pathlib import Path


class TodoError(Exception):
    """Base class for all todo-manager errors."""


class InvalidIndexError(TodoError, IndexError):
    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"task index {index} out of range (have {size} tasks)")
        self.index = index
        self.size = size


class InvalidInputError(TodoError, ValueError):
    """User input could not be interpreted (e.g. a number was expected)."""


class MalformedRecordError(TodoError, ValueError):
    def __init__(self, reason: str, *, line_no: int, line: str, path: Path | None = None) -> None:
        where = f"{path}:{line_no}" if path is not None else f"line {line_no}"
        super().__init__(f"{where}: {reason}")
        self.reason = reason
        self.line_no = line_no
        self.line = line
        self.path = path


class TaskStorageError(TodoError, OSError):
    """Reading or writing the task file failed."""
