"""Table for the wallet's task history."""

from __future__ import annotations

from typing import Sequence

from rich import box
from rich.console import RenderableType
from rich.table import Table
from rich.text import Text

from ..sdk.schemas import Task, TaskInfo
from .wallet import format_time

_PENDING_STATES = {
    "queued",
    "running",
    "proving",
    "proving payment",
    "submitting tx",
    "submitting payment",
    "finding opening",
    "updating validity proofs",
}


def format_task_status(state: str) -> Text:
    normalized = state.lower()
    if normalized == "completed":
        return Text("✓", style="green")
    if normalized == "failed":
        return Text("✗", style="red")
    if normalized in _PENDING_STATES:
        return Text("⋯", style="yellow")
    return Text("?", style="bright_black")


def format_task_info(info: TaskInfo) -> Text:
    if info.update_type:
        text = Text(f"{info.update_type} ")
        text.append(f"({info.task_type})", style="dim")
        return text
    return Text(info.task_type, style="dim")


def format_task_history(tasks: Sequence[Task]) -> RenderableType:
    if not tasks:
        return Text("No tasks found in history")
    table = Table(title="Task History", box=box.SIMPLE, title_justify="left", show_header=False)
    table.add_column("Time")
    table.add_column("ID", no_wrap=True)
    table.add_column("Status")
    table.add_column("Info")
    for task in tasks:
        table.add_row(
            format_time(task.created_at),
            Text(task.id, style="dim"),
            format_task_status(task.state),
            format_task_info(task.task_info),
        )
    table.caption = f"Showing {len(tasks)} tasks"
    return table


__all__ = ["format_task_history", "format_task_info", "format_task_status"]
