"""Task list helpers (pure functions, no I/O)."""

from typing import List, Optional

from .errors import InvalidInput
from .models import Task


def next_id(tasks: List[Task]) -> int:
    """Return one past the highest id in use, or 1 for an empty list."""
    return max((t.id for t in tasks), default=0) + 1


def find_index(tasks: List[Task], task_id: int) -> Optional[int]:
    """Return the 0-based position of the task with task_id, or None."""
    for i, t in enumerate(tasks):
        if t.id == task_id:
            return i
    return None


def completed_tasks(tasks: List[Task]) -> List[Task]:
    return [t for t in tasks if t.completed]


def clean_description(text: str) -> str:
    """Strip surrounding whitespace; reject descriptions that end up empty."""
    cleaned = text.strip()
    if not cleaned:
        raise InvalidInput("task description cannot be empty")
    return cleaned
