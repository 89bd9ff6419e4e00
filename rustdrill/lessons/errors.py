"""Error handling lessons: name tags, token costs and positive integers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_SIGNED = re.compile(r"[+-]?[0-9]+")

_I32 = (-(2**31), 2**31 - 1)
_I64 = (-(2**63), 2**63 - 1)


def _parse_int(text: str, bounds: tuple[int, int]) -> int:
    """Parse a signed integer within bounds, with the compiler's error wording."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _SIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    low, high = bounds
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the name tag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Five tokens per item plus a one token fee; ValueError for bad input."""
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_int(item_quantity, _I32)
    cost = qty * cost_per_item + processing_fee
    if not _I32[0] <= cost <= _I32[1]:
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


class CreationErrorKind(Enum):
    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """The value cannot become a positive non-zero integer."""

    def __init__(self, kind: CreationErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationErrorKind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Parsing failed, either as an integer or as a positive non-zero value."""

    def __init__(
        self,
        creation: CreationError | None = None,
        parse_int: ValueError | None = None,
    ) -> None:
        cause = creation if creation is not None else parse_int
        super().__init__(str(cause))
        self.creation = creation
        self.parse_int = parse_int


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger or raise ParsePosNonzeroError."""
    try:
        value = _parse_int(text, _I64)
    except ValueError as err:
        raise ParsePosNonzeroError(parse_int=err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(creation=err) from err