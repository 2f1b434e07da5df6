"""Error-handling drills: name tags, token costs and positive integers."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_DIGITS = frozenset("0123456789")


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer strictly, with the messages of a native integer parser."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError("invalid digit found in string")
    value = int(text)
    limit = 1 << (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return name-tag text; an empty name is refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens for the typed quantity: five per item plus a fee of one."""
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_int(item_quantity, 32)
    cost = qty * cost_per_item + processing_fee
    if not -(1 << 31) <= cost < (1 << 31):
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


def purchase(tokens: int, item_quantity: str) -> int:
    """Spend tokens on the typed quantity and return what is left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        raise ValueError("You can't afford that many!")
    return tokens - cost


class CreationErrorKind(enum.Enum):
    """Why a value is not a positive non-zero integer."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """A positive non-zero integer could not be created."""

    def __init__(self, kind: CreationErrorKind):
        super().__init__(kind.value)
        self.kind = kind

    def __eq__(self, other):
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self):
        return hash(self.kind)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationErrorKind.ZERO)


def parse_positive(text: str) -> PositiveNonzeroInteger:
    """Parse text into a positive integer; either parsing or creation may fail."""
    return PositiveNonzeroInteger(_parse_int(text, 64))


class ParsePosNonzeroError(ValueError):
    """Parsing a positive integer failed, with exactly one of two causes."""

    def __init__(
        self,
        *,
        creation: CreationError | None = None,
        parse_int: ValueError | None = None,
    ):
        if (creation is None) == (parse_int is None):
            raise TypeError("exactly one of creation or parse_int must be given")
        cause = creation if creation is not None else parse_int
        super().__init__(str(cause))
        self.creation = creation
        self.parse_int = parse_int


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse a positive integer, reporting failures as ParsePosNonzeroError."""
    try:
        value = _parse_int(s, 64)
    except ValueError as err:
        raise ParsePosNonzeroError(parse_int=err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(creation=err) from err