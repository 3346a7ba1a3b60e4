"""Data models and constants for tasklist."""

from dataclasses import asdict, dataclass
from typing import Any, Dict

DEFAULT_FILE = "tasks.json"


@dataclass
class Task:
    """A single to-do item."""

    id: int
    description: str
    completed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
