# src/taskz/tasks/task_models.py

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class ListOrder(StrEnum):
    """Sort order used by `taskz list`."""

    CREATED = "created"
    ALPHABETICAL = "alphabetical"


@dataclass(slots=True)
class Task:
    """
    A single to-do entry.

    There is no id: the description is the only key used to find a task,
    so two tasks with the same description are indistinguishable.
    """

    description: str
    created_at: int

    @classmethod
    def new(cls, description: str, *, now_ts: float | None = None) -> Task:
        ts = time.time() if now_ts is None else now_ts
        return cls(description=description, created_at=int(ts))

    def to_dict(self) -> dict[str, Any]:
        return {"description": self.description, "created_at": self.created_at}

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """Strict decoding: raises ValueError on anything that is not a task object."""
        if not isinstance(raw, dict):
            raise ValueError(f"task must be an object, got {type(raw).__name__}")
        description = raw.get("description")
        created_at = raw.get("created_at")
        if not isinstance(description, str):
            raise ValueError("task.description must be a string")
        # bool is an int subclass; reject it explicitly.
        if not isinstance(created_at, int) or isinstance(created_at, bool):
            raise ValueError("task.created_at must be an integer")
        return cls(description=description, created_at=created_at)
