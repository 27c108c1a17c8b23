"""Interactive setup of the persisted wallet configuration."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.prompt import Confirm, IntPrompt, Prompt

from ..config.chains import CHAIN_PROFILES, SUPPORTED_CHAIN_IDS, chain_name
from ..store.config_store import PersistedConfig
from ..utils.constants import (
    BINARY_NAME,
    CONFIG_COMMAND,
    DEFAULT_WALLET_FILE,
    ORDER_HISTORY_COMMAND,
    SETUP_COMMAND,
    SETUP_DOCS_URL,
    TASK_HISTORY_COMMAND,
    WALLET_COMMAND,
)
from ..wallet.secrets import validate_wallet_path
from .cli import CliArgs, resolve_cli_args
from .runtime import CommandRuntime


def register(subparsers: argparse._SubParsersAction, parents: list[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser(SETUP_COMMAND, parents=parents, help="Interactive setup for wallet configuration")
    parser.add_argument(
        "--yes",
        "-y",
        action="store_true",
        help="Accept the resolved defaults and overwrite any existing configuration without prompting",
    )
    parser.set_defaults(handler=handler)


def print_welcome(runtime: CommandRuntime) -> None:
    console = runtime.console
    console.print("\n[cyan]Welcome to the Renegade CLI Setup![/cyan]\n")
    console.print("Your wallet secrets file should have been generated according to these instructions:")
    console.print(f"[blue]{SETUP_DOCS_URL}[/blue]")
    console.print("\nThis file only enables read operations, it does not enable write operations.\n")


def confirm_overwrite(runtime: CommandRuntime, assume_yes: bool) -> bool:
    if not runtime.store.would_overwrite() or assume_yes:
        return True
    overwrite = Confirm.ask(
        "Existing configuration found. Would you like to overwrite it?",
        default=False,
        console=runtime.console,
    )
    if not overwrite:
        runtime.console.print("\n[yellow]Setup cancelled. Current configuration remains unchanged.[/yellow]")
        runtime.console.print(f"Use [cyan]{BINARY_NAME} {CONFIG_COMMAND} view[/cyan] to see current settings")
        runtime.console.print(f"Use [cyan]{BINARY_NAME} {CONFIG_COMMAND} reset[/cyan] to reset configuration\n")
    return overwrite


def prompt_for_config(runtime: CommandRuntime, defaults: CliArgs) -> CliArgs:
    wallet_path = Prompt.ask(
        "Enter the path to your wallet secrets file",
        default=defaults.wallet_path,
        console=runtime.console,
    )
    for chain_id, profile in CHAIN_PROFILES.items():
        runtime.console.print(f"  {chain_id}: {profile.name}")
    chain_id = IntPrompt.ask(
        "Select the chain to use",
        choices=[str(chain_id) for chain_id in SUPPORTED_CHAIN_IDS],
        default=defaults.chain_id,
        console=runtime.console,
    )
    return CliArgs(chain_id=int(chain_id), wallet_path=wallet_path)


def success_hints(chain_id: int, wallet_path: str) -> str:
    return "\n".join(
        [
            "",
            f"[green]✓[/green] Chain ID set to {chain_id} ({chain_name(chain_id)})",
            f"[green]✓[/green] Using wallet at {wallet_path}",
            "",
            "Try these commands:",
            f"[cyan]  $ {BINARY_NAME} {WALLET_COMMAND}[/cyan]",
            f"[cyan]  $ {BINARY_NAME} {ORDER_HISTORY_COMMAND}[/cyan]",
            f"[cyan]  $ {BINARY_NAME} {TASK_HISTORY_COMMAND}[/cyan]",
        ]
    )


def handler(args: argparse.Namespace, runtime: CommandRuntime) -> int:
    print_welcome(runtime)
    existing = runtime.store.read()
    if not confirm_overwrite(runtime, args.yes):
        return 0

    defaults = resolve_cli_args(
        args.chain_id,
        args.wallet_path,
        existing,
        default_path=str(Path.home() / DEFAULT_WALLET_FILE),
    )
    chosen = defaults if args.yes else prompt_for_config(runtime, defaults)
    wallet_path = str(Path(chosen.wallet_path).expanduser().resolve())

    with runtime.console.status("Validating wallet..."):
        validate_wallet_path(wallet_path)
    runtime.console.print("[green]✓[/green] Wallet secrets file is valid")

    runtime.store.write(PersistedConfig(wallet_path=wallet_path, chain_id=chosen.chain_id))
    runtime.console.print("[green]✓[/green] Configuration saved")

    ctx = runtime.context(CliArgs(chain_id=chosen.chain_id, wallet_path=wallet_path))
    runtime.console.print(success_hints(ctx.chain_id, wallet_path))
    return 0


__all__ = ["handler", "register"]
