"""View or reset the persisted configuration."""

from __future__ import annotations

import argparse

from ..config.chains import chain_name
from ..utils.constants import BINARY_NAME, CONFIG_COMMAND, SETUP_COMMAND
from .runtime import CommandRuntime


def register(subparsers: argparse._SubParsersAction, parents: list[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser(CONFIG_COMMAND, parents=parents, help="Manage CLI configuration")
    parser.add_argument(
        "subcommand",
        nargs="?",
        choices=("view", "reset"),
        default="view",
        help="Config action to perform (default: view)",
    )
    parser.set_defaults(handler=handler)


def handler(args: argparse.Namespace, runtime: CommandRuntime) -> int:
    console = runtime.console
    if args.subcommand == "reset":
        runtime.store.delete()
        console.print("[green]✓[/green] Configuration reset successfully")
        console.print("\nRun setup to configure the CLI:")
        console.print(f"[cyan]  $ {BINARY_NAME} {SETUP_COMMAND}[/cyan]")
        return 0

    config = runtime.store.read()
    if config is None:
        console.print("[yellow]No configuration found[/yellow]")
        console.print(f"Run [cyan]{BINARY_NAME} {SETUP_COMMAND}[/cyan] to configure the CLI")
        return 0
    console.print("\nCurrent configuration:")
    console.print(f"[cyan]Chain:[/cyan] {chain_name(config.chain_id)} ({config.chain_id})")
    console.print(f"[cyan]Path to wallet secrets:[/cyan] {config.wallet_path}")
    console.print(f"[cyan]Config file:[/cyan] {runtime.store.path}")
    console.print("\nTo modify configuration:")
    console.print(f"[cyan]  $ {BINARY_NAME} {SETUP_COMMAND}[/cyan]")
    return 0


__all__ = ["handler", "register"]
