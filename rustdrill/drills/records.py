"""Struct and trait drills: colours, orders, packages and shared behaviour."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch
from typing import NamedTuple


@dataclass(frozen=True)
class ColorClassicStruct:
    """A colour with named components."""

    red: int
    green: int
    blue: int


class ColorTupleStruct(NamedTuple):
    """A colour whose components are reached by position."""

    red: int
    green: int
    blue: int


class UnitLikeStruct:
    """A type with no fields."""

    def __repr__(self) -> str:
        return "UnitLikeStruct"

    def __eq__(self, other):
        return isinstance(other, UnitLikeStruct)

    def __hash__(self):
        return hash(UnitLikeStruct)


@dataclass(frozen=True)
class Order:
    """A customer order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """The template order that new orders are derived from."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass(frozen=True)
class Package:
    """A parcel sent between two countries."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("Can not ship a weightless package.")

    def is_international(self) -> bool:
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        return self.weight_in_grams * cents_per_gram


@singledispatch
def append_bar(value):
    """Append "Bar": to a string as text, to a list as a new element."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _append_bar_str(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _append_bar_list(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Software that reports its licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass(frozen=True)
class SomeSoftware(Licensed):
    """Software with a numeric version."""

    version_number: int


@dataclass(frozen=True)
class OtherSoftware(Licensed):
    """Software with a textual version."""

    version_number: str


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """True when both carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


class SomeStruct:
    """A type that has both drill behaviours."""

    def some_function(self) -> bool:
        return True

    def other_function(self) -> bool:
        return True


class OtherStruct:
    """Another type that has both drill behaviours."""

    def some_function(self) -> bool:
        return True

    def other_function(self) -> bool:
        return True


def some_func(item) -> bool:
    """True when both behaviours of ``item`` report success."""
    return item.some_function() and item.other_function()