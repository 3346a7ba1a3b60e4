"""tasklist - a small JSON-backed task list."""

__version__ = "1.0.0"

from .models import Task, DEFAULT_FILE
from .errors import TaskError, NotFound, CorruptStore, InvalidInput, IoFailure
from .storage import read_file, write_file
from .store import TaskStore

__all__ = [
    "Task",
    "DEFAULT_FILE",
    "TaskError",
    "NotFound",
    "CorruptStore",
    "InvalidInput",
    "IoFailure",
    "read_file",
    "write_file",
    "TaskStore",
]
