# src/taskz/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .matching import closest_match
from .task_models import ListOrder, Task

logger = logging.getLogger(__name__)


def write_json(path: Path, payload: object) -> None:
    """Full-file overwrite via a sibling temp file + os.replace."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        tmp.write_text(json.dumps(payload, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, path)
    except OSError:
        with contextlib.suppress(OSError):
            tmp.unlink()
        raise


class TaskStore:
    """
    JSON task store: one file holding an array of tasks.

    Every operation is a full read followed (for mutations) by a full
    overwrite. There is no locking; concurrent invocations race and the
    last writer wins.

    Load policy: a missing, unreadable-as-JSON or malformed file is an
    empty store. This is never reported to the user.
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- persistence ----

    def load(self) -> list[Task]:
        if not self._path.exists():
            return []
        try:
            # UnicodeDecodeError and json.JSONDecodeError are both ValueErrors.
            data = json.loads(self._path.read_text("utf-8"))
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON array, got {type(data).__name__}")
            return [Task.from_dict(item) for item in data]
        except ValueError:
            logger.debug("Task store %s is corrupt; treating as empty.", self._path, exc_info=True)
            return []

    def save(self, tasks: Iterable[Task]) -> None:
        payload = [t.to_dict() for t in tasks]
        write_json(self._path, payload)
        logger.debug("Saved %d tasks to %s", len(payload), self._path)

    # ---- public API ----

    def add(self, description: str) -> Task:
        tasks = self.load()
        task = Task.new(description)
        tasks.append(task)
        self.save(tasks)
        logger.info("Task added: %r", description)
        return task

    def list_tasks(self, order: ListOrder = ListOrder.CREATED) -> list[Task]:
        tasks = self.load()
        if order == ListOrder.ALPHABETICAL:
            tasks.sort(key=lambda t: t.description.lower())
        else:
            tasks.sort(key=lambda t: t.created_at)
        return tasks

    def search(self, query: str) -> list[Task]:
        q = query.lower()
        return [t for t in self.load() if q in t.description.lower()]

    def edit(self, query: str, new_description: str) -> Task | None:
        tasks = self.load()
        idx = closest_match(tasks, query)
        if idx is None:
            return None
        task = tasks[idx]
        old = task.description
        task.description = new_description
        self.save(tasks)
        logger.info("Task edited: %r -> %r", old, new_description)
        return task

    def remove_closest(self, query: str) -> Task | None:
        tasks = self.load()
        idx = closest_match(tasks, query)
        if idx is None:
            return None
        removed = tasks.pop(idx)
        self.save(tasks)
        logger.info("Task removed: %r (query=%r)", removed.description, query)
        return removed

    def restore(self, task: Task) -> None:
        tasks = self.load()
        tasks.append(task)
        self.save(tasks)
        logger.info("Task restored: %r", task.description)

    def clear(self) -> None:
        self.save([])
        logger.info("Task store cleared: %s", self._path)
