"""Exception types raised while configuring, rendering and mapping."""

from __future__ import annotations

from typing import Any


class InvalidConfiguration(ValueError):
    """Base class for builder configuration errors."""


class InvalidMandatoryParameter(InvalidConfiguration):
    """A required construction input is structurally invalid."""


class InvalidOptionalValue(InvalidConfiguration):
    """An optional field value lies outside its documented domain."""

    def __init__(self, field: str, value: Any, reason: str) -> None:
        super().__init__(f"Invalid value for '{field}': {value!r} ({reason}).")
        self.field = field
        self.value = value
        self.reason = reason


class MappingError(ValueError):
    """A payload could not be mapped onto a registered model."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path
        self.message = message
