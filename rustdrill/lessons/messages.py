"""Enum lesson: a state machine driven by messages."""

from __future__ import annotations

from dataclasses import dataclass, field


def _check_u8(*values: int) -> None:
    for value in values:
        if not 0 <= value <= 255:
            raise ValueError(f"{value} does not fit in an unsigned 8-bit integer")


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __post_init__(self) -> None:
        _check_u8(self.x, self.y)


@dataclass(frozen=True)
class ChangeColor:
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_u8(self.red, self.green, self.blue)


@dataclass(frozen=True)
class Echo:
    text: str


@dataclass(frozen=True)
class Move:
    point: Point


@dataclass(frozen=True)
class Quit:
    pass


Message = ChangeColor | Echo | Move | Quit


@dataclass
class State:
    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False
    message: str = ""

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case Quit():
                self.quit = True
            case ChangeColor(red, green, blue):
                self.color = (red, green, blue)
            case Echo(text):
                self.message = text
            case Move(point):
                self.position = point
            case _:
                raise TypeError(f"unknown message {message!r}")