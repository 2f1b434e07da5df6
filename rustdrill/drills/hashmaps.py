"""Hash-map drills: fruit baskets and a football scores table."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import MutableMapping

_U8_MAX = 255
_DIGITS = frozenset("0123456789")


def default_fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds and at least five fruits."""
    return {
        "banana": 2,
        "orange": 3,
        "apple": 1,
        "plum": 22,
        "blueberry": 500,
    }


class Fruit(enum.Enum):
    """Kinds of fruit a basket may hold."""

    APPLE = enum.auto()
    BANANA = enum.auto()
    MANGO = enum.auto()
    LYCHEE = enum.auto()
    PINEAPPLE = enum.auto()


def fill_fruit_basket(
    basket: MutableMapping[Fruit, int],
) -> MutableMapping[Fruit, int]:
    """Add one of every missing fruit kind, leaving existing counts alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)
    return basket


@dataclass
class Team:
    """A team's goal tally."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0

    def record(self, scored: int, conceded: int) -> None:
        """Add one match's goals, keeping each tally within a byte."""
        new_scored = self.goals_scored + scored
        new_conceded = self.goals_conceded + conceded
        if new_scored > _U8_MAX or new_conceded > _U8_MAX:
            raise OverflowError(f"goal tally for {self.name} exceeds {_U8_MAX}")
        self.goals_scored = new_scored
        self.goals_conceded = new_conceded


def _parse_goals(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] == "+" else text
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError(f"invalid digit found in string: {text!r}")
    value = int(digits)
    if value > _U8_MAX:
        raise ValueError(f"number too large to fit in target type: {text!r}")
    return value


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def build_scores_table(results: str) -> dict[str, Team]:
    """Build goal tallies from lines of ``team1,team2,goals1,goals2``."""
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_goals(fields[2])
        team_2_score = _parse_goals(fields[3])
        scores.setdefault(team_1_name, Team(team_1_name)).record(
            team_1_score, team_2_score
        )
        scores.setdefault(team_2_name, Team(team_2_name)).record(
            team_2_score, team_1_score
        )
    return scores