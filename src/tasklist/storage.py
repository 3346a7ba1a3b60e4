"""File I/O for task lists."""

import json
import logging
import os
import stat
import tempfile
from typing import Any, List

from .errors import CorruptStore, IoFailure
from .models import Task

logger = logging.getLogger(__name__)


def read_file(path: str) -> List[Task]:
    """Load the task list stored at path.

    A missing file is an empty list. Anything that is not a JSON array of
    well-formed, uniquely numbered tasks raises CorruptStore.
    """
    if not os.path.exists(path):
        logger.debug("No task file at %s; starting empty", path)
        return []

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = f.read()
    except UnicodeDecodeError as e:
        raise CorruptStore(path, "not UTF-8 text") from e
    except OSError as e:
        raise IoFailure(path, e) from e

    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as e:
        # deeply nested arrays exhaust the decoder's recursion limit
        raise CorruptStore(path, f"invalid JSON ({e})") from e

    if not isinstance(data, list):
        raise CorruptStore(path, "expected a JSON array of tasks")

    tasks: List[Task] = []
    seen = set()
    for pos, item in enumerate(data, start=1):
        task = _task_from_json(path, pos, item)
        if task.id in seen:
            raise CorruptStore(path, f"duplicate task id {task.id}")
        seen.add(task.id)
        tasks.append(task)

    logger.debug("Loaded %d task(s) from %s", len(tasks), path)
    return tasks


def _task_from_json(path: str, pos: int, item: Any) -> Task:
    if not isinstance(item, dict):
        raise CorruptStore(path, f"entry {pos} is not an object")
    tid = item.get("id")
    # bool is an int subclass; reject true/false as ids
    if isinstance(tid, bool) or not isinstance(tid, int) or tid < 1:
        raise CorruptStore(path, f"entry {pos} has an invalid id")
    description = item.get("description")
    if not isinstance(description, str) or not description.strip():
        raise CorruptStore(path, f"entry {pos} has no description")
    completed = item.get("completed")
    if not isinstance(completed, bool):
        raise CorruptStore(path, f"entry {pos} has no completed flag")
    return Task(id=tid, description=description, completed=completed)


def write_file(path: str, tasks: List[Task]) -> None:
    """Rewrite the file from in-memory state.

    The JSON goes to a temporary file next to path, then replaces it in one
    rename, so readers see either the old list or the new one.
    """
    directory = os.path.dirname(os.path.abspath(path))
    payload = json.dumps([t.to_dict() for t in tasks], indent=2, ensure_ascii=False)

    tmp_path = None
    try:
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            prefix=".tasks-", suffix=".tmp", dir=directory
        )
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload + "\n")
        os.chmod(tmp_path, _file_mode(path))
        os.replace(tmp_path, path)
    except OSError as e:
        if tmp_path and os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise IoFailure(path, e) from e

    logger.debug("Saved %d task(s) to %s", len(tasks), path)


def _file_mode(path: str) -> int:
    """Permission bits for the rewritten file.

    mkstemp creates 0600 files; keep the mode of the file being replaced,
    or apply the umask to 0666 for a new file.
    """
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
