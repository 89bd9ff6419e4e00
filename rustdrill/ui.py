"""Coloured status lines for the terminal."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text

SEPARATOR = "=" * 20


def _no_emoji() -> bool:
    return "NO_EMOJI" in os.environ


def _print(text: Text) -> None:
    Console(highlight=False, markup=False, emoji=False, soft_wrap=True).print(text)


def warn(message: str) -> None:
    """Print a warning line in red."""
    marker = "!" if _no_emoji() else "⚠️ "
    _print(Text(f"{marker} {message}", style="red"))


def success(message: str) -> None:
    """Print a success line in green."""
    marker = "✓" if _no_emoji() else "✅"
    _print(Text(f"{marker} {message}", style="green"))


def separator() -> Text:
    """Return the bold rule used around blocks of output."""
    return Text(SEPARATOR, style="bold")