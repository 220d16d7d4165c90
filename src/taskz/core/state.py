# src/taskz/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore
from ..tasks.undo_buffer import UndoBuffer


@dataclass
class AppState:
    # Any object with the Settings attributes works (tests use SimpleNamespace).
    settings: object

    task_store: TaskStore
    undo_buffer: UndoBuffer
