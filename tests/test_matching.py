# tests/test_matching.py

from __future__ import annotations

import pytest

from taskz.tasks.matching import closest_match, levenshtein
from taskz.tasks.task_models import Task


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        ("", "", 0),
        ("abc", "", 3),
        ("", "abc", 3),
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("buy milk", "buy milk", 0),
        ("buy milk", "by milk", 1),
    ],
)
def test_levenshtein(a: str, b: str, expected: int) -> None:
    assert levenshtein(a, b) == expected
    assert levenshtein(b, a) == expected


def test_closest_match_empty_store() -> None:
    assert closest_match([], "anything") is None


def test_closest_match_exact_description_wins() -> None:
    tasks = [Task("buy milk!", 1), Task("buy milk", 2), Task("buy silk", 3)]
    assert closest_match(tasks, "buy milk") == 1


def test_closest_match_is_case_insensitive() -> None:
    tasks = [Task("walk dog", 1), Task("Buy Milk", 2)]
    assert closest_match(tasks, "BUY MILK") == 1


def test_closest_match_tolerates_typos() -> None:
    tasks = [Task("buy milk", 1), Task("walk dog", 2)]
    assert closest_match(tasks, "wlak dgo") == 1


def test_closest_match_tie_goes_to_first_in_store_order() -> None:
    tasks = [Task("cat", 2), Task("bat", 1), Task("cat", 3)]
    assert closest_match(tasks, "hat") == 0
    assert closest_match(tasks, "cat") == 0


def test_closest_match_is_deterministic() -> None:
    tasks = [Task("alpha", 1), Task("alpine", 2), Task("alps", 3)]
    results = {closest_match(tasks, "alp") for _ in range(5)}
    assert len(results) == 1
