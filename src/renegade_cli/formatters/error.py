"""Rendering of CLI errors for the terminal."""

from __future__ import annotations

from rich.text import Text

from ..errors import CLIError
from ..utils.constants import BINARY_NAME, SETUP_COMMAND


def format_error(error: BaseException) -> Text:
    text = Text()
    text.append("Error: ", style="bold red")
    text.append(getattr(error, "message", None) or str(error) or error.__class__.__name__)
    text.append("\n")
    if isinstance(error, CLIError):
        if error.suggestions:
            text.append("\nTo fix this:\n")
            for index, suggestion in enumerate(error.suggestions, start=1):
                text.append(f"{index}. {suggestion}\n")
        text.append("\nFor more help:\n")
        text.append(f"$ {BINARY_NAME} {SETUP_COMMAND} --help", style="cyan")
    return text


__all__ = ["format_error"]
