# src/taskz/tasks/task_api.py

"""
Operations that span the task store and the undo buffer.

    active (store) --done--> pending undo (buffer) --undo--> active (store)

The buffer holds one task: a second `done` overwrites it and the earlier
task is gone for good. `clear` only touches the store.
"""

from __future__ import annotations

import logging

from ..core.state import AppState
from .task_models import Task

logger = logging.getLogger(__name__)


def mark_done(state: AppState, query: str) -> Task | None:
    """Remove the closest task and park it in the undo buffer."""
    removed = state.task_store.remove_closest(query)
    if removed is None:
        return None
    state.undo_buffer.remember(removed)
    return removed


def undo_last(state: AppState) -> Task | None:
    """
    Put the buffered task back into the store.

    Returns None when there is nothing to undo. Raises UndoDataError for a
    corrupt buffer before the store is touched.
    """
    task = state.undo_buffer.recall()
    if task is None:
        return None
    state.task_store.restore(task)
    state.undo_buffer.clear()
    logger.info("Undo restored %r", task.description)
    return task
