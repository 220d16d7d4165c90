# src/taskz/tasks/undo_buffer.py

from __future__ import annotations

import contextlib
import json
import logging
from pathlib import Path

from .task_models import Task
from .task_store import write_json

logger = logging.getLogger(__name__)


class UndoDataError(ValueError):
    """The undo buffer file exists but does not hold a task."""


class UndoBuffer:
    """
    Single-slot holder for the last task removed by `done`.

    Unlike the task store, a corrupt buffer is an error: recall() raises
    UndoDataError instead of pretending nothing is there.
    """

    def __init__(self, path: str | Path = "undo.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def remember(self, task: Task) -> None:
        write_json(self._path, task.to_dict())
        logger.debug("Undo buffer now holds %r", task.description)

    def recall(self) -> Task | None:
        if not self._path.exists():
            return None
        try:
            return Task.from_dict(json.loads(self._path.read_text("utf-8")))
        except ValueError as e:
            logger.debug("Undo buffer %s is corrupt.", self._path, exc_info=True)
            raise UndoDataError(f"failed to parse undo data in {self._path}: {e}") from e

    def clear(self) -> None:
        with contextlib.suppress(FileNotFoundError):
            self._path.unlink()
