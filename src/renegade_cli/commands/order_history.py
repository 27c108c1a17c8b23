"""Display the wallet's order history."""

from __future__ import annotations

import argparse

from ..formatters.wallet import format_order_history
from ..utils.constants import ORDER_HISTORY_COMMAND
from .runtime import CommandRuntime


def register(subparsers: argparse._SubParsersAction, parents: list[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser(ORDER_HISTORY_COMMAND, parents=parents, help="Display order history")
    parser.add_argument(
        "--limit",
        type=int,
        default=10,
        help="Maximum number of orders to display (default: 10)",
    )
    parser.set_defaults(handler=handler)


def handler(args: argparse.Namespace, runtime: CommandRuntime) -> int:
    ctx = runtime.context(runtime.resolve_args(args))
    with runtime.console.status("Fetching order history from relayer"):
        orders = runtime.relayer(ctx).get_order_history(limit=args.limit)
    runtime.console.print("[green]✓[/green] Fetched order history from relayer\n")
    runtime.console.print(format_order_history(orders, ctx.token_mapping))
    return 0


__all__ = ["handler", "register"]
