# src/todo_manager/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from ..core.state import AppState
from ..errors import InvalidInputError

Ask = Callable[[str], str]
Emit = Callable[[str], None]
MenuHandler = Callable[[AppState, Ask, Emit], None]

MENU_TITLE = "To-Do List Manager"
INVALID_NUMBER_MESSAGE = "Invalid input. Please enter a number."
INVALID_DATE_MESSAGE = "Invalid date. Please use YYYY-MM-DD."
INVALID_OPTION_MESSAGE = "Invalid option. Please try again."

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MenuEntry:
    key: str
    label: str
    handler: MenuHandler | None  # None -> leave the menu loop


class MenuRegistry:
    """Numbered menu used by the console loop (1. Add Task, ...)."""

    def __init__(self, title: str = MENU_TITLE) -> None:
        self.title = title
        self._entries: dict[str, MenuEntry] = {}

    def register(self, key: str, label: str, handler: MenuHandler | None) -> None:
        self._entries[key.strip()] = MenuEntry(key=key.strip(), label=label, handler=handler)

    def render(self) -> str:
        lines = [self.title]
        for entry in self._entries.values():
            lines.append(f"{entry.key}. {entry.label}")
        return "\n".join(lines)

    def handle(self, state: AppState, choice: str, ask: Ask, emit: Emit) -> bool:
        """
        Run the entry selected by `choice`.
        Returns False when the loop should stop (exit entry), True otherwise.

        InvalidInputError / InvalidIndexError / TaskStorageError raised by
        handlers propagate; the console loop turns them into messages.
        """
        entry = self._entries.get(choice.strip())
        if entry is None:
            emit(INVALID_OPTION_MESSAGE)
            return True

        if entry.handler is None:
            logger.debug("Menu exit selected (%s).", entry.key)
            return False

        logger.debug("Menu entry %s (%s)", entry.key, entry.label)
        entry.handler(state, ask, emit)
        return True


def parse_task_number(raw: str) -> int:
    """Parse a 1-based task number typed by the user (plain ASCII decimal, optional sign)."""
    text = raw.strip()
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not (digits.isascii() and digits.isdigit()):
        raise InvalidInputError(INVALID_NUMBER_MESSAGE)
    return int(text)


def parse_due_date(raw: str) -> date | None:
    """Blank -> None; otherwise an ISO date (YYYY-MM-DD)."""
    text = raw.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise InvalidInputError(INVALID_DATE_MESSAGE) from None


def cmd_add(state: AppState, ask: Ask, emit: Emit) -> None:
    description = ask("Enter task description: ")
    due_date = parse_due_date(ask("Enter due date (YYYY-MM-DD, blank for none): "))
    state.task_store.add(description, due_date)
    emit("Task added.")


def cmd_remove(state: AppState, ask: Ask, emit: Emit) -> None:
    emit(state.task_store.render_listing())
    number = parse_task_number(ask("Enter task number to remove: "))
    state.task_store.remove(number - 1)
    emit("Task removed.")


def cmd_complete(state: AppState, ask: Ask, emit: Emit) -> None:
    emit(state.task_store.render_listing())
    number = parse_task_number(ask("Enter task number to mark as complete: "))
    state.task_store.complete(number - 1)
    emit("Task marked as completed.")


def cmd_view(state: AppState, ask: Ask, emit: Emit) -> None:
    emit(state.task_store.render_listing())


def build_menu() -> MenuRegistry:
    menu = MenuRegistry()
    menu.register("1", "Add Task", cmd_add)
    menu.register("2", "Remove Task", cmd_remove)
    menu.register("3", "Complete Task", cmd_complete)
    menu.register("4", "View Tasks", cmd_view)
    menu.register("5", "Exit", None)
    return menu


menu = build_menu()
