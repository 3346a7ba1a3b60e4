# tests/test_core.py

from __future__ import annotations

import pytest

from tasklist.core import clean_description, completed_tasks, find_index, next_id
from tasklist.errors import InvalidInput
from tasklist.models import Task


def test_next_id_empty_and_after_gaps() -> None:
    assert next_id([]) == 1
    tasks = [Task(1, "a"), Task(4, "b"), Task(2, "c")]
    assert next_id(tasks) == 5


def test_find_index() -> None:
    tasks = [Task(3, "a"), Task(7, "b")]
    assert find_index(tasks, 7) == 1
    assert find_index(tasks, 3) == 0
    assert find_index(tasks, 5) is None


def test_completed_tasks_keeps_order() -> None:
    tasks = [Task(1, "a", True), Task(2, "b"), Task(3, "c", True)]
    assert [t.id for t in completed_tasks(tasks)] == [1, 3]


def test_clean_description_strips() -> None:
    assert clean_description("  Buy milk \n") == "Buy milk"


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_clean_description_rejects_blank(text: str) -> None:
    with pytest.raises(InvalidInput):
        clean_description(text)
