# src/taskz/config.py

"""Settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object per process, built in main() and passed down explicitly.
- Platform defaults for the data directory, overridable with TASKZ_* variables.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKZ"
APP_DIR_NAME = "taskz"

TASKS_FILE_NAME = "tasks.json"
UNDO_FILE_NAME = "undo.json"
LOG_FILE_NAME = "taskz.log"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _is_windows() -> bool:
    return sys.platform.startswith("win")


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def default_data_dir(*, windows: bool | None = None) -> Path:
    """
    Platform local-data directory for taskz.

    Windows: %LOCALAPPDATA%\\taskz (C:\\temp when unset).
    Others:  $HOME/.local/share/taskz (current directory when HOME is unset).
    """
    if windows is None:
        windows = _is_windows()
    if windows:
        base = Path(_env("LOCALAPPDATA", "C:\\temp"))
    else:
        base = Path(_env("HOME", ".")) / ".local" / "share"
    return base / APP_DIR_NAME


def default_install_path(*, windows: bool | None = None) -> Path:
    if windows is None:
        windows = _is_windows()
    if windows:
        return Path("C:\\Windows\\System32\\taskz.exe")
    return Path("/usr/local/bin/taskz")


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Local data paths ----
    data_dir: Path
    tasks_path: Path
    undo_path: Path
    log_path: Path

    # ---- Self-install ----
    install_path: Path

    @staticmethod
    def from_env(*, load_env_file: bool = True) -> "Settings":
        if load_env_file:
            load_dotenv(override=False)

        app_name = _env(_k("APP_NAME"), "taskz") or "taskz"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        data_dir = _env_path(_k("DATA_DIR"), default_data_dir())
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / TASKS_FILE_NAME)
        undo_path = _env_path(_k("UNDO_PATH"), data_dir / UNDO_FILE_NAME)
        log_path = _env_path(_k("LOG_PATH"), data_dir / LOG_FILE_NAME)

        install_path = _env_path(_k("INSTALL_PATH"), default_install_path())

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            data_dir=data_dir,
            tasks_path=tasks_path,
            undo_path=undo_path,
            log_path=log_path,
            install_path=install_path,
        )
