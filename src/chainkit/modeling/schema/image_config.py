"""Resolved image configuration and the unset-field sentinel."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import Any

from chainkit.core.types import Color, Size


class _Unset:
    """Marker for an optional field the caller never set."""

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass(frozen=True)
class ImageConfig:
    """Mandatory size plus every optional knob, with defaults filled in."""

    size: Size
    fill_color: Color = Color(0.0, 0.0, 0.0, 0.0)
    corner_radius: float = 0.0
    border_width: float = 0.0
    border_color: Color = Color(0.0, 0.0, 0.0)
    opacity: float = 1.0
    scale: float = 1.0
    antialias: int = 4

    @classmethod
    def from_fields(cls, size: Size, values: Mapping[str, Any]) -> ImageConfig:
        """Resolve ``values`` against the defaults, skipping ``UNSET`` entries."""

        known = set(OPTIONAL_FIELDS)
        unknown = set(values) - known
        if unknown:
            raise KeyError(f"Unknown image config fields: {', '.join(sorted(unknown))}")
        return cls(size=size, **{k: v for k, v in values.items() if v is not UNSET})

    @property
    def pixel_size(self) -> tuple[int, int]:
        return self.size.to_pixels(self.scale)

    def optional_values(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in OPTIONAL_FIELDS}


OPTIONAL_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(ImageConfig) if f.name != "size")

IMAGE_DEFAULTS: Mapping[str, Any] = MappingProxyType(
    {f.name: f.default for f in fields(ImageConfig) if f.name != "size"}
)
