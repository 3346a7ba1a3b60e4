"""tasklist command-line interface."""

import argparse
import logging
import sys
from typing import Dict, List, Optional

from . import __version__
from .config import get_settings
from .errors import TaskError
from .logging_setup import setup_logging
from .models import Task
from .store import TaskStore

logger = logging.getLogger(__name__)


def format_task(task: Task) -> str:
    marker = "x" if task.completed else " "
    return f"{task.id}. [{marker}] - {task.description}"


def print_tasks(tasks: List[Task], empty_message: str) -> None:
    if not tasks:
        print(empty_message)
        return
    for t in tasks:
        print(format_task(t))


def task_id(value: str) -> int:
    """argparse type for task ids: positive integers only."""
    try:
        tid = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid task id: {value!r}") from None
    if tid < 1:
        raise argparse.ArgumentTypeError(f"task id must be positive: {value}")
    return tid


def cmd_add(store: TaskStore, args: argparse.Namespace) -> None:
    task = store.add(" ".join(args.description))
    print(f"Added task {task.id}: {task.description}")


def cmd_list(store: TaskStore, args: argparse.Namespace) -> None:
    print_tasks(store.list(), "(no tasks yet)")


def cmd_list_completed(store: TaskStore, args: argparse.Namespace) -> None:
    print_tasks(store.list_completed(), "(no completed tasks)")


def cmd_complete(store: TaskStore, args: argparse.Namespace) -> None:
    task = store.complete(args.id)
    print(f"Completed task {task.id}: {task.description}")


def cmd_remove(store: TaskStore, args: argparse.Namespace) -> None:
    task = store.remove(args.id)
    print(f"Removed task {task.id}: {task.description}")


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    p = argparse.ArgumentParser(
        prog="tasklist", description="A simple task list / todo CLI."
    )
    p.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    sub = p.add_subparsers(dest="cmd", metavar="COMMAND")
    commands: Dict[str, argparse.ArgumentParser] = {}

    s_add = sub.add_parser("add", help="Add a new task")
    s_add.add_argument(
        "description", nargs="+", help="Task description (words are joined)"
    )
    s_add.set_defaults(func=cmd_add)
    commands["add"] = s_add

    s_list = sub.add_parser("list", help="List all tasks")
    s_list.set_defaults(func=cmd_list)
    commands["list"] = s_list

    s_done = sub.add_parser("list-completed", help="List only completed tasks")
    s_done.set_defaults(func=cmd_list_completed)
    commands["list-completed"] = s_done

    s_complete = sub.add_parser("complete", help="Mark a task as completed, by its ID")
    s_complete.add_argument("id", type=task_id, help="Task ID from `list`")
    s_complete.set_defaults(func=cmd_complete)
    commands["complete"] = s_complete

    s_remove = sub.add_parser("remove", help="Remove a task, by its ID")
    s_remove.add_argument("id", type=task_id, help="Task ID from `list`")
    s_remove.set_defaults(func=cmd_remove)
    commands["remove"] = s_remove

    s_help = sub.add_parser("help", help="Show help for a command")
    s_help.add_argument("command", nargs="?", choices=sorted(commands))
    s_help.set_defaults(func=None)

    p.set_defaults(commands=commands)
    return p


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.cmd is None:
        parser.print_help(sys.stderr)
        return 2
    if args.cmd == "help":
        target = args.commands.get(args.command, parser)
        target.print_help()
        return 0

    settings = get_settings()
    try:
        setup_logging(
            console_level=settings.log_level_value, log_file=settings.log_file
        )
    except OSError as e:
        print(f"Error: cannot open log file {settings.log_file}: {e}", file=sys.stderr)
        return 1

    store = TaskStore(settings.tasks_file)
    try:
        args.func(store, args)
    except TaskError as e:
        logger.debug("Command %s failed", args.cmd, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
