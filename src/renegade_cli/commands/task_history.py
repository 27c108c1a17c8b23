"""Display the wallet's task history."""

from __future__ import annotations

import argparse

from ..formatters.task import format_task_history
from ..utils.constants import TASK_HISTORY_COMMAND
from .runtime import CommandRuntime


def register(subparsers: argparse._SubParsersAction, parents: list[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser(TASK_HISTORY_COMMAND, parents=parents, help="Display task history")
    parser.add_argument(
        "--limit",
        type=int,
        default=10,
        help="Maximum number of tasks to display (default: 10)",
    )
    parser.set_defaults(handler=handler)


def handler(args: argparse.Namespace, runtime: CommandRuntime) -> int:
    ctx = runtime.context(runtime.resolve_args(args))
    with runtime.console.status("Fetching task history from relayer"):
        tasks = runtime.relayer(ctx).get_task_history(limit=args.limit)
    runtime.console.print("[green]✓[/green] Fetched task history from relayer\n")
    runtime.console.print(format_task_history(tasks))
    return 0


__all__ = ["handler", "register"]
