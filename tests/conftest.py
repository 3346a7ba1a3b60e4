# tests/conftest.py

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from tasklist.store import TaskStore


@pytest.fixture()
def tasks_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


@pytest.fixture()
def store(tasks_path: Path) -> TaskStore:
    return TaskStore(tasks_path)


@pytest.fixture()
def write_json(tasks_path: Path):
    """Write raw JSON (or raw text) to the tasks file."""

    def _write(data) -> Path:
        text = data if isinstance(data, str) else json.dumps(data)
        tasks_path.write_text(text, encoding="utf-8")
        return tasks_path

    return _write


@pytest.fixture()
def restore_root_logger():
    """Drop the handlers setup_logging() installs on the root logger."""
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield root
    for h in list(root.handlers):
        if h not in before:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
