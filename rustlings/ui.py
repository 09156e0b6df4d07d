"""Coloured status lines for the terminal."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _emit(symbol: str, fallback: str, message: str, colour: str) -> str:
    marker = fallback if no_emoji() else symbol
    line = f"{marker} {message}"
    console = Console(highlight=False, soft_wrap=True, emoji=False, markup=False)
    console.print(Text(line, style=colour))
    return line


def warn(message: str) -> str:
    """Print a warning line in red and return its plain text."""
    return _emit("⚠️ ", "!", message, "red")


def success(message: str) -> str:
    """Print a success line in green and return its plain text."""
    return _emit("✅", "✓", message, "green")