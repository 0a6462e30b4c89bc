# src/todo_manager/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the flat-file codec into a TaskStore and wraps it in AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..errors import TaskStorageError
from ..tasks.task_codec import FlatFileTaskCodec
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    for d in (settings.data_dir, settings.tasks_path.parent):
        try:
            d.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise TaskStorageError(f"cannot create directory {d}: {e}") from e


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Loads the task file immediately; MalformedRecordError (strict mode) and
    TaskStorageError propagate to the caller.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    codec = FlatFileTaskCodec(settings.tasks_path, strict=bool(getattr(settings, "strict_load", False)))
    state = AppState(
        settings=settings,
        task_store=TaskStore(codec),
    )
    logger.debug("State created tasks_path=%s", codec.path)
    return state
