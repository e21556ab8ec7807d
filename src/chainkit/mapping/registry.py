"""Transformer registry: named conversions from raw decoded values to typed field values."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


Transformer = Callable[[Any], Any]
_TRANSFORMERS: dict[str, Transformer] = {}


def _key(name: str) -> str:
    key = name.strip().lower()
    if not key:
        raise ValueError("Transformer name must be non-empty.")
    return key


def register_transformer(name: str, transformer: Transformer) -> None:
    if not callable(transformer):
        raise TypeError(f"Transformer '{name}' must be callable.")
    _TRANSFORMERS[_key(name)] = transformer


def get_transformer(name: str) -> Transformer:
    key = _key(name)
    try:
        return _TRANSFORMERS[key]
    except KeyError as exc:
        available = ", ".join(sorted(_TRANSFORMERS)) or "<none>"
        raise KeyError(f"Unknown transformer '{name}'. Available transformers: {available}") from exc


def list_transformers() -> tuple[str, ...]:
    return tuple(sorted(_TRANSFORMERS.keys()))


def transform(value: Any, transformer: str) -> Any:
    return get_transformer(transformer)(value)
