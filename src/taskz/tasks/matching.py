# src/taskz/tasks/matching.py

"""
Fuzzy lookup of a task by approximate description.

`done` and `edit` both resolve their query here: the task whose lowercased
description has the smallest Levenshtein distance to the lowercased query wins,
and ties go to the task that comes first in store order.
"""

from __future__ import annotations

from collections.abc import Sequence

from .task_models import Task


def levenshtein(a: str, b: str) -> int:
    """Edit distance with unit cost insert/delete/substitute."""
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    # Keep the shorter string in the inner loop (row length).
    if len(a) < len(b):
        a, b = b, a

    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        cur = [i]
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            cur.append(
                min(
                    prev[j] + 1,  # deletion
                    cur[j - 1] + 1,  # insertion
                    prev[j - 1] + cost,  # substitution
                )
            )
        prev = cur
    return prev[-1]


def closest_match(tasks: Sequence[Task], query: str) -> int | None:
    """Index of the closest task, or None for an empty store."""
    if not tasks:
        return None
    q = query.lower()
    # min() keeps the first of equal keys.
    best_index, _ = min(
        enumerate(tasks),
        key=lambda item: levenshtein(item[1].description.lower(), q),
    )
    return best_index
