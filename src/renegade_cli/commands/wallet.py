"""Display the back-of-queue wallet held by the relayer."""

from __future__ import annotations

import argparse
from typing import Optional

from ..formatters.wallet import WALLET_FIELDS, format_wallet
from ..utils.constants import BINARY_NAME, ORDER_HISTORY_COMMAND, WALLET_COMMAND
from .runtime import CommandRuntime


def register(subparsers: argparse._SubParsersAction, parents: list[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser(WALLET_COMMAND, parents=parents, help="Display wallet state information")
    parser.add_argument(
        "--field",
        choices=WALLET_FIELDS,
        default=None,
        help="Specific field to display (orders, balances, or fees)",
    )
    parser.add_argument(
        "--no-filter",
        dest="filter",
        action="store_false",
        help="Show default (zero-valued) orders and balances",
    )
    parser.set_defaults(handler=handler, filter=True)


def success_hints(field: Optional[str]) -> str:
    lines = ["Try these related commands:"]
    if field == "orders":
        lines += [f"[cyan]  $ {BINARY_NAME} {ORDER_HISTORY_COMMAND}[/cyan]", "    View detailed order history with fill percentages"]
    elif field == "balances":
        lines += [f"[cyan]  $ {BINARY_NAME} {WALLET_COMMAND} --field=fees[/cyan]", "    View your fee balances"]
    else:
        suggestions = {
            "orders": "View your open orders",
            "balances": "View your token balances",
            "fees": "View your fee balances",
        }
        for name, description in suggestions.items():
            if name == field:
                continue
            lines += [f"[cyan]  $ {BINARY_NAME} {WALLET_COMMAND} --field={name}[/cyan]", f"    {description}"]
    return "\n".join(lines)


def handler(args: argparse.Namespace, runtime: CommandRuntime) -> int:
    ctx = runtime.context(runtime.resolve_args(args))
    # Fee balances live on otherwise-empty balances, so never filter them.
    filter_defaults = False if args.field == "fees" else args.filter
    with runtime.console.status("Fetching wallet from relayer"):
        wallet = runtime.relayer(ctx).get_back_of_queue_wallet(filter_defaults=filter_defaults)
    runtime.console.print("[green]✓[/green] Fetched wallet from relayer\n")
    runtime.console.print(format_wallet(wallet, ctx.token_mapping, field=args.field))
    runtime.console.print("")
    runtime.console.print(success_hints(args.field))
    return 0


__all__ = ["handler", "register"]
