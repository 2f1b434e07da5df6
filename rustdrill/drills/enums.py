"""Enum drills: messages that drive a small state machine."""

from __future__ import annotations

from dataclasses import dataclass, field


def _check_byte(value: int, what: str) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{what} must be between 0 and 255, got {value}")


@dataclass(frozen=True)
class Point:
    """A position with byte-sized coordinates."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_byte(self.x, "x")
        _check_byte(self.y, "y")


@dataclass(frozen=True)
class Echo:
    """Print some text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    point: Point


@dataclass(frozen=True)
class ChangeColor:
    """Change to a new colour."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            _check_byte(getattr(self, name), name)


@dataclass(frozen=True)
class Quit:
    """Stop."""


@dataclass
class State:
    """Colour, position and quit flag updated by messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message) -> None:
        """Apply one message to the state."""
        match message:
            case Echo(text=text):
                print(text)
            case Move(point=point):
                self.position = point
            case ChangeColor(red=red, green=green, blue=blue):
                self.color = (red, green, blue)
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")