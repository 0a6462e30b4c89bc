# src/todo_manager/tasks/task_codec.py

"""
Flat text persistence for the task list.

One task per line:

    <description>|<True|False>
    <description>|<True|False>|<YYYY-MM-DD>

The third field is present only for important tasks. Inside the description,
"\\", "|", newline and carriage return are backslash-escaped, so any user text
survives a round-trip. Unknown escape sequences are kept literally, so older
unescaped files load unchanged unless a description contains "\\" or "|".
"""

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Sequence
from datetime import date
from pathlib import Path

from ..errors import MalformedRecordError, TaskStorageError
from .task_models import BasicTask, ImportantTask, Task

logger = logging.getLogger(__name__)

DELIMITER = "|"
ESCAPE = "\\"

_ESCAPES = {
    ESCAPE: ESCAPE + ESCAPE,
    DELIMITER: ESCAPE + DELIMITER,
    "\n": ESCAPE + "n",
    "\r": ESCAPE + "r",
}
_UNESCAPES = {
    ESCAPE: ESCAPE,
    DELIMITER: DELIMITER,
    "n": "\n",
    "r": "\r",
}


def escape_field(text: str) -> str:
    return "".join(_ESCAPES.get(ch, ch) for ch in text)


def split_record(line: str) -> list[str]:
    """Split on unescaped delimiters, unescaping each field."""
    fields: list[str] = []
    buf: list[str] = []
    chars = iter(line)
    for ch in chars:
        if ch == ESCAPE:
            nxt = next(chars, None)
            if nxt is None:
                buf.append(ESCAPE)
            elif nxt in _UNESCAPES:
                buf.append(_UNESCAPES[nxt])
            else:
                buf.append(ESCAPE + nxt)
        elif ch == DELIMITER:
            fields.append("".join(buf))
            buf = []
        else:
            buf.append(ch)
    fields.append("".join(buf))
    return fields


def format_bool(value: bool) -> str:
    return "True" if value else "False"


def parse_bool(raw: str) -> bool:
    s = raw.strip().lower()
    if s == "true":
        return True
    if s == "false":
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def _encode_base(description: str, is_completed: bool) -> str:
    return f"{escape_field(description)}{DELIMITER}{format_bool(is_completed)}"


def encode_task(task: Task) -> str:
    match task:
        case ImportantTask(description=description, is_completed=done, due_date=due_date):
            return f"{_encode_base(description, done)}{DELIMITER}{due_date.isoformat()}"
        case BasicTask(description=description, is_completed=done):
            return _encode_base(description, done)
        case _:
            raise TypeError(f"not a task: {task!r}")


def decode_task(line: str, line_no: int = 1, path: Path | None = None) -> Task:
    fields = split_record(line)
    if len(fields) not in (2, 3):
        raise MalformedRecordError(
            f"expected 2 or 3 fields, got {len(fields)}", line_no=line_no, line=line, path=path
        )

    description = fields[0]
    try:
        is_completed = parse_bool(fields[1])
    except ValueError as e:
        raise MalformedRecordError(str(e), line_no=line_no, line=line, path=path) from e

    if len(fields) == 2:
        return BasicTask(description=description, is_completed=is_completed)

    try:
        due_date = date.fromisoformat(fields[2].strip())
    except ValueError as e:
        raise MalformedRecordError(
            f"bad due date {fields[2]!r}", line_no=line_no, line=line, path=path
        ) from e
    return ImportantTask(description=description, due_date=due_date, is_completed=is_completed)


class FlatFileTaskCodec:
    """
    Loads and saves the whole task list as a UTF-8 text file.

    Malformed lines:
    - strict=False (default): skipped, with a warning in the log
    - strict=True: MalformedRecordError propagates

    Saves go through a temp file + os.replace, so a crash mid-write leaves the
    previous file intact.
    """

    def __init__(self, path: str | Path, *, strict: bool = False, encoding: str = "utf-8") -> None:
        self._path = Path(path)
        self._strict = strict
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        if not self._path.exists():
            logger.info("No task file at %s; starting empty.", self._path)
            return []

        tasks: list[Task] = []
        skipped = 0
        try:
            with self._path.open("r", encoding=self._encoding) as fh:
                for line_no, raw in enumerate(fh, start=1):
                    line = raw.rstrip("\n")
                    if not line.strip():
                        continue
                    try:
                        tasks.append(decode_task(line, line_no, self._path))
                    except MalformedRecordError as e:
                        if self._strict:
                            raise
                        skipped += 1
                        logger.warning("Skipping malformed task record: %s", e)
        except (OSError, UnicodeDecodeError) as e:
            raise TaskStorageError(f"cannot read {self._path}: {e}") from e

        logger.info("Loaded %d tasks from %s (skipped=%d)", len(tasks), self._path, skipped)
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        payload = "".join(encode_task(t) + "\n" for t in tasks)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, encoding=self._encoding)
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise TaskStorageError(f"cannot write {self._path}: {e}") from e
        logger.debug("Saved %d tasks to %s", len(tasks), self._path)
