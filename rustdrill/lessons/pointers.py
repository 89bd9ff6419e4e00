"""Smart pointer lessons: a cons list and clone-on-write data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import MutableSequence, Sequence


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    value: int
    next: Cons | Nil


def create_empty_list() -> Nil:
    return Nil()


def create_non_empty_list() -> Cons:
    return Cons(1, Nil())


class Cow:
    """Borrowed or owned data, copied on the first write to borrowed data."""

    def __init__(self, data: Sequence[int], owned: bool) -> None:
        self._data = data
        self._owned = owned

    @classmethod
    def borrowed(cls, values: Sequence[int]) -> Cow:
        return cls(values, owned=False)

    @classmethod
    def owned(cls, values: MutableSequence[int]) -> Cow:
        return cls(values, owned=True)

    @property
    def is_owned(self) -> bool:
        return self._owned

    @property
    def values(self) -> Sequence[int]:
        return self._data

    def to_mut(self) -> MutableSequence[int]:
        """Return writable data, copying borrowed data first."""
        if not self._owned:
            self._data = list(self._data)
            self._owned = True
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        kind = "Owned" if self._owned else "Borrowed"
        return f"Cow.{kind}({list(self._data)!r})"


def abs_all(cow: Cow) -> Cow:
    """Make every value non-negative, copying only if something changes."""
    for i, value in enumerate(list(cow.values)):
        if value < 0:
            cow.to_mut()[i] = -value
    return cow