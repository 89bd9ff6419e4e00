"""Hash map lessons: fruit baskets and a football scores table."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import MutableMapping

_U8_MAX = 255
_UNSIGNED = re.compile(r"\+?[0-9]+")


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds of fruit and five pieces in total."""
    basket = {"banana": 2}
    for fruit in ("apple", "mango", "banana"):
        basket[fruit] = basket.get(fruit, 0) + 5
    return basket


class Fruit(Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add two of every kind of fruit not yet in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 2)


@dataclass
class Team:
    goals_scored: int = 0
    goals_conceded: int = 0

    def record(self, scored: int, conceded: int) -> None:
        self.goals_scored = _add_u8(self.goals_scored, scored)
        self.goals_conceded = _add_u8(self.goals_conceded, conceded)


def _add_u8(a: int, b: int) -> int:
    total = a + b
    if total > _U8_MAX:
        raise OverflowError("goal count does not fit in an unsigned 8-bit integer")
    return total


def _parse_goals(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError(f"goal count too large: {text!r}")
    return value


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals scored and conceded from "t1,t2,g1,g2" lines."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2, goals_1, goals_2 = fields[:4]
        score_1 = _parse_goals(goals_1)
        score_2 = _parse_goals(goals_2)
        scores.setdefault(team_1, Team()).record(score_1, score_2)
        scores.setdefault(team_2, Team()).record(score_2, score_1)
    return scores