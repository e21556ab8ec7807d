"""Named colour palette and colour parsing."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from chainkit.core.errors import InvalidOptionalValue
from chainkit.core.types import Color


# UIKit-style system colours, straight alpha.
NAMED_COLORS: dict[str, Color] = {
    "clear": Color(0.0, 0.0, 0.0, 0.0),
    "black": Color(0.0, 0.0, 0.0),
    "white": Color(1.0, 1.0, 1.0),
    "gray": Color(0.5, 0.5, 0.5),
    "light_gray": Color(2.0 / 3.0, 2.0 / 3.0, 2.0 / 3.0),
    "dark_gray": Color(1.0 / 3.0, 1.0 / 3.0, 1.0 / 3.0),
    "red": Color(1.0, 0.0, 0.0),
    "green": Color(0.0, 1.0, 0.0),
    "blue": Color(0.0, 0.0, 1.0),
    "cyan": Color(0.0, 1.0, 1.0),
    "yellow": Color(1.0, 1.0, 0.0),
    "magenta": Color(1.0, 0.0, 1.0),
    "orange": Color(1.0, 0.5, 0.0),
    "purple": Color(0.5, 0.0, 0.5),
    "brown": Color(0.6, 0.4, 0.2),
}


def _normalize_name(name: str) -> str:
    return name.strip().lower().replace(" ", "_").replace("-", "_")


def named_color(name: str) -> Color:
    key = _normalize_name(name)
    try:
        return NAMED_COLORS[key]
    except KeyError as exc:
        available = ", ".join(sorted(NAMED_COLORS))
        raise KeyError(f"Unknown colour name '{name}'. Available colours: {available}") from exc


def parse_color(value: Any, field: str = "color") -> Color:
    """Interpret ``value`` as a colour.

    Accepts a ``Color``, a palette name, a hex string, or a 3/4-sequence of
    float channels in [0, 1].
    """

    if isinstance(value, Color):
        return value
    try:
        if isinstance(value, str):
            text = value.strip()
            if text.startswith("#"):
                return Color.from_hex(text)
            if _normalize_name(text) in NAMED_COLORS:
                return NAMED_COLORS[_normalize_name(text)]
            return Color.from_hex(text)
        if isinstance(value, Sequence) and len(value) in {3, 4}:
            return Color(*(float(v) for v in value))
    except (TypeError, ValueError) as exc:
        raise InvalidOptionalValue(field, value, str(exc)) from exc
    raise InvalidOptionalValue(field, value, "expected a Color, colour name, hex string or RGB(A) sequence")
