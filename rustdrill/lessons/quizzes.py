"""Quiz solutions: apple pricing, a string transformer and report cards."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Generic, TypeVar

T = TypeVar("T")


def calculate_price_of_apples(number_of_apples: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    apple_cost = 1 if number_of_apples > 40 else 2
    return apple_cost * number_of_apples


class CommandKind(Enum):
    UPPERCASE = auto()
    TRIM = auto()
    APPEND = auto()


@dataclass(frozen=True)
class Command:
    """An operation applied to a string by the transformer."""

    kind: CommandKind
    count: int = 0

    @classmethod
    def uppercase(cls) -> Command:
        return cls(CommandKind.UPPERCASE)

    @classmethod
    def trim(cls) -> Command:
        return cls(CommandKind.TRIM)

    @classmethod
    def append(cls, count: int) -> Command:
        if count < 0:
            raise ValueError("append count must not be negative")
        return cls(CommandKind.APPEND, count)


def _apply(text: str, command: Command) -> str:
    match command.kind:
        case CommandKind.UPPERCASE:
            return text.upper()
        case CommandKind.TRIM:
            return text.strip()
        case CommandKind.APPEND:
            return text + "bar" * command.count
    raise ValueError(f"unknown command {command.kind}")


def transformer(inputs) -> list[str]:
    """Apply each (string, command) pair and collect the results."""
    return [_apply(text, command) for text, command in inputs]


def _display(value) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass
class ReportCard(Generic[T]):
    """A report card holding a numeric or alphabetic grade."""

    grade: T
    student_name: str
    student_age: int

    def print(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {_display(self.grade)}"
        )