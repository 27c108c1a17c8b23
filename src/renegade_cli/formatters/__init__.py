"""Terminal renderers for command output."""

from .error import format_error
from .task import format_task_history
from .wallet import format_order_history, format_wallet

__all__ = ["format_error", "format_order_history", "format_task_history", "format_wallet"]
