"""Errors raised by the task store."""

import os
from typing import Union


class TaskError(Exception):
    """Base class for every failure the CLI reports to the user."""


class NotFound(TaskError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"no such task: {task_id}")
        self.task_id = task_id


class CorruptStore(TaskError):
    """The task file exists but does not hold a valid task list."""

    def __init__(self, path: Union[str, os.PathLike], reason: str) -> None:
        super().__init__(f"task file {path} is corrupt: {reason}")
        self.path = path
        self.reason = reason


class InvalidInput(TaskError):
    pass


class IoFailure(TaskError):
    """Reading or writing the task file failed at the OS level."""

    def __init__(self, path: Union[str, os.PathLike], cause: OSError) -> None:
        detail = cause.strerror or str(cause)
        super().__init__(f"cannot access task file {path}: {detail}")
        self.path = path
        self.cause = cause
