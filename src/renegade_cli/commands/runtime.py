"""Shared collaborators for command handlers."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import Callable, Optional

import requests
from rich.console import Console

from ..errors import CLIError
from ..formatters.error import format_error
from ..monitoring.logger import current_correlation_id, get_logger
from ..sdk.relayer import RelayerClient
from ..sdk.token_mapping import load_token_mapping
from ..store.config_store import ConfigStore
from .cli import CliArgs, resolve_cli_args
from .context import ExecutionContext, TokenLoader, run_context

logger = get_logger(__name__)

Handler = Callable[[argparse.Namespace, "CommandRuntime"], int]


@dataclass(slots=True)
class CommandRuntime:
    """Console, config store and network hooks used by every command."""

    console: Console = field(default_factory=Console)
    err_console: Console = field(default_factory=lambda: Console(stderr=True))
    store: ConfigStore = field(default_factory=ConfigStore)
    token_loader: TokenLoader = load_token_mapping
    session: Optional[requests.Session] = None

    def resolve_args(self, namespace: argparse.Namespace) -> CliArgs:
        return resolve_cli_args(
            getattr(namespace, "chain_id", None),
            getattr(namespace, "wallet_path", None),
            self.store.read(),
        )

    def context(self, args: CliArgs) -> ExecutionContext:
        return run_context(args, token_loader=self.token_loader, session=self.session)

    def relayer(self, ctx: ExecutionContext) -> RelayerClient:
        return RelayerClient(ctx.sdk_config, session=self.session)


def run_guarded(handler: Handler, namespace: argparse.Namespace, runtime: CommandRuntime) -> int:
    """Run ``handler`` and turn failures into a printed error and exit code 1."""

    try:
        return handler(namespace, runtime)
    except CLIError as exc:
        logger.info("Command failed", extra={"code": exc.code.value})
        runtime.err_console.print(format_error(exc))
        return 1
    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected failure: %s", exc)
        runtime.err_console.print(format_error(exc))
        runtime.err_console.print(f"Include invocation id {current_correlation_id()} when reporting this problem")
        return 1


__all__ = ["CommandRuntime", "Handler", "run_guarded"]
