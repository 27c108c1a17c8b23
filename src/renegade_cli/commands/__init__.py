"""Command registry for the ``renegade`` CLI."""

from . import config, order_history, setup, task_history, wallet

COMMAND_MODULES = (setup, config, wallet, order_history, task_history)

__all__ = ["COMMAND_MODULES"]
