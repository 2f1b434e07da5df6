"""Coloured status lines for the terminal."""

from __future__ import annotations

import os
import sys

_COLORS = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
}


def _colors_enabled() -> bool:
    force = os.environ.get("CLICOLOR_FORCE")
    if force is not None and force != "0":
        return True
    if "NO_COLOR" in os.environ or os.environ.get("CLICOLOR") == "0":
        return False
    return sys.stdout.isatty()


def _no_emoji() -> bool:
    return "NO_EMOJI" in os.environ


def style(text, color=None, bold=False) -> str:
    """Wrap ``text`` in ANSI codes for ``color`` and ``bold`` when colours are on."""
    codes = []
    if bold:
        codes.append("1")
    if color is not None:
        try:
            codes.append(str(_COLORS[color]))
        except KeyError:
            raise ValueError(f"unknown colour: {color!r}") from None
    text = str(text)
    if not codes or not _colors_enabled():
        return text
    return f"\x1b[{';'.join(codes)}m{text}\x1b[0m"


def warn(message) -> None:
    """Print a red warning line."""
    marker = "!" if _no_emoji() else "⚠️ "
    print(f"{style(marker, 'red')} {style(message, 'red')}")


def success(message) -> None:
    """Print a green success line."""
    marker = "✓" if _no_emoji() else "✅"
    print(f"{style(marker, 'green')} {style(message, 'green')}")