"""String lessons: colour words, trimming, composing and replacing."""

from __future__ import annotations


def is_a_color_word(attempt: str) -> bool:
    return attempt in ("green", "blue", "red")


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    return text + " world!"


def replace_me(text: str) -> str:
    return text.replace("cars", "balloons")