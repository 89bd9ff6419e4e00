"""Conversion lesson: building an RGB colour from three integers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

_CHANNEL_RANGE = range(0, 256)


class IntoColorErrorKind(Enum):
    BAD_LEN = "incorrect number of values"
    INT_CONVERSION = "value out of the 0..=255 range"


class IntoColorError(ValueError):
    """Why a sequence of integers could not become a Color."""

    def __init__(self, kind: IntoColorErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int

    @classmethod
    def try_from(cls, values: Iterable[int]) -> Color:
        """Build a colour from exactly three integers in 0..=255."""
        channels = tuple(values)
        if len(channels) != 3:
            raise IntoColorError(IntoColorErrorKind.BAD_LEN)
        for channel in channels:
            if not isinstance(channel, int):
                raise TypeError(f"colour channel must be an integer, not {channel!r}")
            if channel not in _CHANNEL_RANGE:
                raise IntoColorError(IntoColorErrorKind.INT_CONVERSION)
        red, green, blue = channels
        return cls(red=red, green=green, blue=blue)