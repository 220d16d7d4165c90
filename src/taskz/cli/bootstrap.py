# src/taskz/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- ensures the local data directory exists,
- wires the JSON task store and the undo buffer into AppState.
"""

from __future__ import annotations

import logging

from ..core.state import AppState
from ..tasks.task_store import TaskStore
from ..tasks.undo_buffer import UndoBuffer

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)
    settings.undo_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(settings) -> AppState:
    """
    Create AppState from already-resolved settings.

    Settings are passed in rather than looked up so tests can point every
    path at a temporary directory.
    """
    _ensure_local_dirs(settings)

    state = AppState(
        settings=settings,
        task_store=TaskStore(settings.tasks_path),
        undo_buffer=UndoBuffer(settings.undo_path),
    )
    logger.debug("State ready tasks=%s undo=%s", settings.tasks_path, settings.undo_path)
    return state
