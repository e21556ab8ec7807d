"""Built-in transformers for loosely typed JSON values.

JSON producers are rarely strict about scalar types: numbers arrive as strings,
booleans as ``0``/``1`` or ``"yes"``, dates as ISO strings or UNIX timestamps.
Each transformer accepts the common spellings and rejects everything else with
``ValueError`` or ``TypeError``.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from numbers import Real
from typing import Any
from urllib.parse import urlparse

from chainkit.core.types import Color, Size
from chainkit.modeling.colors import parse_color


_TRUE_STRINGS = {"true", "yes", "y", "1", "on"}
_FALSE_STRINGS = {"false", "no", "n", "0", "off"}
_URL_SCHEMES = {"http", "https", "file"}


def to_any(value: Any) -> Any:
    return value


def to_int(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError("Booleans are not accepted as integers.")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"Expected an integral number, got {value!r}.")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            return to_int(float(text))
    raise TypeError(f"Cannot convert {type(value).__name__} to int.")


def to_float(value: Any) -> float:
    if isinstance(value, bool):
        raise TypeError("Booleans are not accepted as floats.")
    if isinstance(value, Real):
        out = float(value)
    elif isinstance(value, str):
        out = float(value.strip())
    else:
        raise TypeError(f"Cannot convert {type(value).__name__} to float.")
    if not math.isfinite(out):
        raise ValueError(f"Expected a finite number, got {value!r}.")
    return out


def to_str(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        raise TypeError("Booleans are not accepted as strings.")
    if isinstance(value, Real):
        return str(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to str.")


def to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in {0, 1}:
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    raise ValueError(f"Cannot interpret {value!r} as a boolean.")


def to_datetime(value: Any) -> datetime:
    """ISO-8601 string or UNIX timestamp to an aware UTC datetime."""

    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, bool):
        raise TypeError("Booleans are not accepted as timestamps.")
    elif isinstance(value, Real):
        try:
            return datetime.fromtimestamp(float(value), tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as exc:
            raise ValueError(f"Timestamp {value!r} is out of range.") from exc
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        dt = datetime.fromisoformat(text)
    else:
        raise TypeError(f"Cannot convert {type(value).__name__} to datetime.")
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_url(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"Cannot convert {type(value).__name__} to URL.")
    text = value.strip()
    parsed = urlparse(text)
    if parsed.scheme.lower() not in _URL_SCHEMES:
        raise ValueError(f"Unsupported URL scheme in '{value}'.")
    if parsed.scheme.lower() != "file" and not parsed.netloc:
        raise ValueError(f"URL '{value}' has no host.")
    return text


def to_color(value: Any) -> Color:
    return parse_color(value)


def to_size(value: Any) -> Size:
    return Size.coerce(value)


BUILTIN_TRANSFORMERS = {
    "any": to_any,
    "int": to_int,
    "float": to_float,
    "str": to_str,
    "bool": to_bool,
    "datetime": to_datetime,
    "url": to_url,
    "color": to_color,
    "size": to_size,
}
