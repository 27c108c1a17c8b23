"""Entrypoint for the Renegade wallet inspection CLI."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .commands import COMMAND_MODULES
from .commands.cli import add_global_options, shared_options_parser
from .commands.runtime import CommandRuntime, run_guarded
from .monitoring import bootstrap_observability, correlation_scope
from .monitoring.logger import get_logger
from .utils.constants import BINARY_NAME

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=BINARY_NAME,
        description="Inspect a Renegade wallet (read-only)",
    )
    add_global_options(parser)
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    subparsers.required = True
    parents = [shared_options_parser()]
    for module in COMMAND_MODULES:
        module.register(subparsers, parents)
    return parser


def run(argv: Optional[Sequence[str]] = None, runtime: Optional[CommandRuntime] = None) -> int:
    args = build_parser().parse_args(argv)
    invocation_id = bootstrap_observability()
    runtime = runtime or CommandRuntime()
    with correlation_scope(invocation_id):
        logger.debug("Running command", extra={"command": args.command})
        try:
            return run_guarded(args.handler, args, runtime)
        except KeyboardInterrupt:
            runtime.console.print("\nOperation cancelled")
            return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
