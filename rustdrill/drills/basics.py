"""Basic drills: functions, conditionals, options, strings and vectors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def is_even(num: int) -> bool:
    """True when ``num`` is divisible by two."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Ten off an even price, three off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """The square of ``num``."""
    return num * num


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T


def bigger(a: int, b: int) -> int:
    """The larger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """``foo`` for fizz, ``bar`` for fuzz, ``baz`` for anything else."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def maybe_icecream(time_of_day: int) -> int | None:
    """Ice creams left at an hour of the day; None for an hour past 23."""
    if time_of_day < 0:
        raise ValueError("time_of_day must not be negative")
    if time_of_day < 22:
        return 5
    if time_of_day < 24:
        return 0
    return None


def is_a_color_word(attempt: str) -> bool:
    """True for the colour words green, blue and red."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Strip surrounding whitespace."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append `` world!``."""
    return text + " world!"


def replace_me(text: str) -> str:
    """Replace every ``cars`` with ``balloons``."""
    return text.replace("cars", "balloons")


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed array and a list holding the same elements."""
    array = (10, 20, 30, 40)
    return array, list(array)


def vec_loop(values: Iterable[int]) -> list[int]:
    """Double every number, building the result step by step."""
    doubled: list[int] = []
    for value in values:
        doubled.append(value * 2)
    return doubled


def vec_map(values: Iterable[int]) -> list[int]:
    """Double every number with a mapping."""
    return [value * 2 for value in values]