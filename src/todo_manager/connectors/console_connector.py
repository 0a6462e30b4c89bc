# src/todo_manager/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import Ask, Emit, MenuRegistry
from ..cli.commands import menu as default_menu
from ..core.state import AppState
from ..errors import InvalidIndexError, InvalidInputError, TaskStorageError

logger = logging.getLogger(__name__)

INVALID_INDEX_MESSAGE = "Invalid task number."


def run_console_loop(
    state: AppState,
    *,
    menu: MenuRegistry | None = None,
    ask: Ask = input,
    emit: Emit = print,
) -> None:
    """
    Show the menu, read one choice, run it; repeat until Exit, EOF or Ctrl+C.

    Recoverable errors are printed and the loop continues.
    """
    menu = menu or default_menu
    logger.info("Console loop started (tasks=%s).", state.task_store.count_tasks())

    while True:
        emit("\n" + menu.render())
        try:
            choice = ask("Choose an option: ")
            keep_going = menu.handle(state, choice, ask, emit)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            emit("")
            break
        except InvalidIndexError as e:
            logger.debug("Invalid index: %s", e)
            emit(INVALID_INDEX_MESSAGE)
            continue
        except InvalidInputError as e:
            emit(str(e))
            continue
        except TaskStorageError as e:
            logger.debug("Save failed.", exc_info=True)
            emit(f"Could not save tasks: {e}")
            continue

        if not keep_going:
            logger.info("Console exit command received.")
            break

    logger.info("Console loop finished.")
