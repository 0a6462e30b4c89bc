# tests/test_commands.py

from __future__ import annotations

from datetime import date

import pytest

from todo_manager.cli.commands import (
    INVALID_OPTION_MESSAGE,
    MenuRegistry,
    build_menu,
    parse_due_date,
    parse_task_number,
)
from todo_manager.errors import InvalidInputError


def test_menu_registry_routes_and_exits(state) -> None:
    reg = MenuRegistry(title="Menu")
    called: list[str] = []

    def h(state, ask, emit):
        called.append(ask("name? "))
        emit("done")

    reg.register("1", "Do it", h)
    reg.register("2", "Quit", None)
    emitted: list[str] = []

    assert reg.render() == "Menu\n1. Do it\n2. Quit"
    assert reg.handle(state, " 1 ", lambda _prompt: "x", emitted.append) is True
    assert called == ["x"]
    assert emitted == ["done"]
    assert reg.handle(state, "2", lambda _prompt: "", emitted.append) is False


def test_menu_registry_unknown_choice(state) -> None:
    emitted: list[str] = []
    assert build_menu().handle(state, "42", lambda _p: "", emitted.append) is True
    assert emitted == [INVALID_OPTION_MESSAGE]


@pytest.mark.parametrize("raw, expected", [("1", 1), (" 12 ", 12), ("-3", -3)])
def test_parse_task_number(raw: str, expected: int) -> None:
    assert parse_task_number(raw) == expected


@pytest.mark.parametrize("raw", ["", "one", "1.5", "1_0", "\u0661", "+", "- 1"])
def test_parse_task_number_rejects_non_numbers(raw: str) -> None:
    with pytest.raises(InvalidInputError):
        parse_task_number(raw)


def test_parse_due_date() -> None:
    assert parse_due_date("") is None
    assert parse_due_date("   ") is None
    assert parse_due_date("2026-11-01") == date(2026, 11, 1)
    with pytest.raises(InvalidInputError):
        parse_due_date("11/01/2026")
