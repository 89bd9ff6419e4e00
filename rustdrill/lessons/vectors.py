"""Vector lessons: arrays versus lists, and doubling every element."""

from __future__ import annotations

from typing import Iterable


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed array and a growable list holding the same elements."""
    array = (10, 20, 30, 40)
    return array, list(array)


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of the list in place and return it."""
    values[:] = [element * 2 for element in values]
    return values


def vec_map(values: Iterable[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [element * 2 for element in values]