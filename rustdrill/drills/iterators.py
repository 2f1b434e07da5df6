"""Iterator drills: capitalisation, checked division, factorials and progress counts."""

from __future__ import annotations

import enum
import math
from typing import Iterable, Mapping, Sequence

_I32_MIN = -(1 << 31)
_U64_MAX = (1 << 64) - 1


def capitalize_first(text: str) -> str:
    """Upper-case the first character of ``text``."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise every word."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise every word and join them without a separator."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """A division did not give a whole result."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int):
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other):
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self):
        return hash((self.dividend, self.divisor))


class DivideByZero(DivisionError):
    """The divisor is zero."""

    def __init__(self):
        super().__init__("division by zero")

    def __eq__(self, other):
        if not isinstance(other, DivideByZero):
            return NotImplemented
        return True

    def __hash__(self):
        return hash(DivideByZero)


def divide(a: int, b: int) -> int:
    """Divide ``a`` by ``b`` when it divides evenly; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZero()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    if a == _I32_MIN and b == -1:
        raise OverflowError("attempt to divide with overflow")
    return a // b


_NUMBERS = (27, 297, 38502, 81)


def result_with_list() -> list[int]:
    """Divide each number by 27; the first failure is raised."""
    return [divide(n, 27) for n in _NUMBERS]


def list_of_results() -> list[int | DivisionError]:
    """Divide each number by 27, keeping each failure in place of its result."""

    def attempt(n: int) -> int | DivisionError:
        try:
            return divide(n, 27)
        except DivisionError as err:
            return err

    return [attempt(n) for n in _NUMBERS]


def factorial(num: int) -> int:
    """Factorial of a non-negative integer that fits in 64 unsigned bits."""
    if num < 0:
        raise ValueError("factorial is defined for non-negative integers only")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError("factorial does not fit in 64 bits")
    return result


class Progress(enum.Enum):
    """How far an exercise has got."""

    NONE = enum.auto()
    SOME = enum.auto()
    COMPLETE = enum.auto()


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries equal to ``value`` with an explicit loop."""
    count = 0
    for progress in progress_map.values():
        if progress == value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries equal to ``value`` with a generator."""
    return sum(1 for progress in progress_map.values() if progress == value)


def count_collection_for(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Count matching entries across maps with explicit loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count matching entries across maps with a generator."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)