# src/todo_manager/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading the task file), then runs the
console menu in the main thread.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..errors import MalformedRecordError, TaskStorageError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _console_level(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.WARNING


def main() -> int:
    settings = get_settings()

    try:
        setup_logging(
            log_dir=settings.data_dir,
            console_level=_console_level(settings.log_level),
            file_enabled=settings.log_file_enabled,
        )
    except OSError as e:
        print(f"Could not set up logging: {e}")
        return 1

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
    except (MalformedRecordError, TaskStorageError) as e:
        logger.debug("Startup load failed.", exc_info=True)
        print(f"Could not load tasks: {e}")
        return 1

    run_console_loop(state)
    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
