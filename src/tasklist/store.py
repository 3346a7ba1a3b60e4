"""TaskStore: load, apply one operation, save."""

import logging
import os
from typing import List, Union

from .core import clean_description, completed_tasks, find_index, next_id
from .errors import NotFound
from .models import DEFAULT_FILE, Task
from .storage import read_file, write_file

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Task list backed by a single JSON file.

    Nothing is cached between calls: each operation reads the whole file,
    and each mutating operation writes the whole file back before returning.
    """

    def __init__(self, path: Union[str, os.PathLike] = DEFAULT_FILE) -> None:
        self._path = os.fspath(path)

    @property
    def path(self) -> str:
        return self._path

    def add(self, description: str) -> Task:
        text = clean_description(description)
        tasks = read_file(self._path)
        task = Task(id=next_id(tasks), description=text)
        tasks.append(task)
        write_file(self._path, tasks)
        logger.info("Added task id=%s", task.id)
        return task

    def list(self) -> List[Task]:
        return read_file(self._path)

    def list_completed(self) -> List[Task]:
        return completed_tasks(read_file(self._path))

    def complete(self, task_id: int) -> Task:
        """Mark a task completed. Completing a finished task is a no-op."""
        tasks = read_file(self._path)
        idx = find_index(tasks, task_id)
        if idx is None:
            raise NotFound(task_id)
        task = tasks[idx]
        task.completed = True
        write_file(self._path, tasks)
        logger.info("Completed task id=%s", task_id)
        return task

    def remove(self, task_id: int) -> Task:
        tasks = read_file(self._path)
        idx = find_index(tasks, task_id)
        if idx is None:
            raise NotFound(task_id)
        task = tasks.pop(idx)
        write_file(self._path, tasks)
        logger.info("Removed task id=%s", task_id)
        return task
