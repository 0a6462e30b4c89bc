# src/todo_manager/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required: every value has a local default.
- Real environment variables always win over .env entries.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TODO"

DEFAULT_DATA_DIR = Path(".local/todo")
DEFAULT_TASKS_FILENAME = "tasks.txt"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_file_enabled: bool

    # ---- Local data paths ----
    data_dir: Path
    tasks_path: Path

    # ---- Loading policy ----
    strict_load: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo-manager").strip() or "todo-manager"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_file_enabled = _env_bool(_k("LOG_FILE_ENABLED"), True)

        data_dir = _env_path(_k("DATA_DIR"), DEFAULT_DATA_DIR)
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / DEFAULT_TASKS_FILENAME)

        strict_load = _env_bool(_k("STRICT_LOAD"), False)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_file_enabled=log_file_enabled,
            data_dir=data_dir,
            tasks_path=tasks_path,
            strict_load=strict_load,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Load .env from the working directory (once) and build Settings on first use."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(find_dotenv(usecwd=True), override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS


def reset_settings() -> None:
    """Forget cached settings (tests change the environment between cases)."""
    global _SETTINGS
    _SETTINGS = None
