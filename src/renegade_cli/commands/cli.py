"""Global options shared by every command and their precedence rules."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from ..config.chains import SUPPORTED_CHAIN_IDS
from ..store.config_store import PersistedConfig
from ..utils.constants import DEFAULT_CHAIN_ID, DEFAULT_WALLET_FILE


@dataclass(frozen=True, slots=True)
class CliArgs:
    """Chain id and wallet path after precedence has been applied."""

    chain_id: int
    wallet_path: str


def first_configured(*candidates: Any, default: Any = None) -> Any:
    """Return the first candidate that is neither ``None`` nor an empty string."""

    for candidate in candidates:
        if candidate is None or candidate == "":
            continue
        return candidate
    return default


def default_wallet_path(base: Optional[Path] = None) -> str:
    return str((base or Path.cwd()) / DEFAULT_WALLET_FILE)


def resolve_cli_args(
    chain_id: Optional[int],
    wallet_path: Optional[str],
    persisted: Optional[PersistedConfig],
    *,
    default_chain_id: int = DEFAULT_CHAIN_ID,
    default_path: Optional[str] = None,
) -> CliArgs:
    """Explicit argument, then persisted config, then the hard default."""

    return CliArgs(
        chain_id=first_configured(
            chain_id,
            persisted.chain_id if persisted else None,
            default=default_chain_id,
        ),
        wallet_path=first_configured(
            wallet_path,
            persisted.wallet_path if persisted else None,
            default=default_path or default_wallet_path(),
        ),
    )


def add_global_options(parser: argparse.ArgumentParser, *, default: Any = None) -> None:
    parser.add_argument(
        "--chain-id",
        type=int,
        choices=SUPPORTED_CHAIN_IDS,
        default=default,
        help="Chain ID to use (42161 for Arbitrum One, 421614 for Arbitrum Sepolia)",
    )
    parser.add_argument(
        "--wallet-path",
        default=default,
        help="Path to wallet JSON file",
    )


def shared_options_parser() -> argparse.ArgumentParser:
    """Parent parser so global options are also accepted after the command name."""

    parser = argparse.ArgumentParser(add_help=False)
    add_global_options(parser, default=argparse.SUPPRESS)
    return parser


__all__ = [
    "CliArgs",
    "add_global_options",
    "default_wallet_path",
    "first_configured",
    "resolve_cli_args",
    "shared_options_parser",
]
