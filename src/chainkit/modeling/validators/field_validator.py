"""Per-field domain checks for optional image settings."""

from __future__ import annotations

import math
from collections.abc import Callable
from numbers import Integral, Real
from typing import Any

from chainkit.core.errors import InvalidOptionalValue
from chainkit.core.types import Color
from chainkit.modeling.colors import parse_color


MAX_ANTIALIAS = 16


def _real(field: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidOptionalValue(field, value, "expected a real number")
    out = float(value)
    if not math.isfinite(out):
        raise InvalidOptionalValue(field, value, "must be finite")
    return out


def validate_corner_radius(value: Any) -> float:
    radius = _real("corner_radius", value)
    if radius < 0.0:
        raise InvalidOptionalValue("corner_radius", value, "must be non-negative")
    return radius


def validate_border_width(value: Any) -> float:
    width = _real("border_width", value)
    if width < 0.0:
        raise InvalidOptionalValue("border_width", value, "must be non-negative")
    return width


def validate_opacity(value: Any) -> float:
    opacity = _real("opacity", value)
    if opacity < 0.0 or opacity > 1.0:
        raise InvalidOptionalValue("opacity", value, "must be in [0, 1]")
    return opacity


def validate_scale(value: Any) -> float:
    scale = _real("scale", value)
    if scale <= 0.0:
        raise InvalidOptionalValue("scale", value, "must be positive")
    return scale


def validate_antialias(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidOptionalValue("antialias", value, "expected an integer")
    samples = int(value)
    if samples < 1 or samples > MAX_ANTIALIAS:
        raise InvalidOptionalValue("antialias", value, f"must be in [1, {MAX_ANTIALIAS}]")
    return samples


def validate_fill_color(value: Any) -> Color:
    return parse_color(value, field="fill_color")


def validate_border_color(value: Any) -> Color:
    return parse_color(value, field="border_color")


FIELD_VALIDATORS: dict[str, Callable[[Any], Any]] = {
    "fill_color": validate_fill_color,
    "corner_radius": validate_corner_radius,
    "border_width": validate_border_width,
    "border_color": validate_border_color,
    "opacity": validate_opacity,
    "scale": validate_scale,
    "antialias": validate_antialias,
}


def validate_field(name: str, value: Any) -> Any:
    """Check ``value`` against the domain of optional field ``name`` and return it normalized."""

    try:
        validator = FIELD_VALIDATORS[name]
    except KeyError as exc:
        raise InvalidOptionalValue(name, value, "unknown optional field") from exc
    return validator(value)
