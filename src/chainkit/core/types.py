"""Core value types shared by the builder, the renderer and the mapper."""

from __future__ import annotations

import math
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from chainkit.modeling.schema import ImageConfig


Array = np.ndarray

_SIZE_RE = re.compile(r"^\s*([0-9eE\+\-\.]+)\s*[xX×]\s*([0-9eE\+\-\.]+)\s*$")
_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


@dataclass(frozen=True)
class Size:
    """Canvas size in points."""

    width: float
    height: float

    @classmethod
    def coerce(cls, value: Any) -> Size:
        """Build a ``Size`` from a size, ``(w, h)``, ``{"width", "height"}`` or ``"WxH"``.

        Only the shape of ``value`` is checked here; finiteness and positivity are
        left to the finalizer.
        """

        if isinstance(value, Size):
            return value
        if isinstance(value, str):
            m = _SIZE_RE.match(value)
            if m is None:
                raise ValueError(f"Cannot parse size string '{value}', expected 'WxH'.")
            return cls(width=float(m.group(1)), height=float(m.group(2)))
        if isinstance(value, Mapping):
            if "width" not in value or "height" not in value:
                raise ValueError("Size mapping must contain 'width' and 'height'.")
            return cls(width=float(value["width"]), height=float(value["height"]))
        if isinstance(value, Sequence) and len(value) == 2:
            return cls(width=float(value[0]), height=float(value[1]))
        raise TypeError(f"Unsupported size value: {value!r}")

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.width) and math.isfinite(self.height)

    @property
    def area(self) -> float:
        return self.width * self.height

    def scaled(self, factor: float) -> Size:
        return Size(width=self.width * factor, height=self.height * factor)

    def to_pixels(self, scale: float = 1.0) -> tuple[int, int]:
        """Pixel dimensions ``(width_px, height_px)`` at ``scale`` pixels per point."""

        return int(round(self.width * scale)), int(round(self.height * scale))


@dataclass(frozen=True)
class Color:
    """Straight-alpha RGBA colour with float channels in [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            v = getattr(self, name)
            if not math.isfinite(v) or v < 0.0 or v > 1.0:
                raise ValueError(f"Color channel '{name}' must be in [0, 1], got {v!r}.")

    @classmethod
    def from_rgba8(cls, r: int, g: int, b: int, a: int = 255) -> Color:
        for v in (r, g, b, a):
            if not 0 <= int(v) <= 255:
                raise ValueError("8-bit colour channels must be in [0, 255].")
        return cls(r=r / 255.0, g=g / 255.0, b=b / 255.0, a=a / 255.0)

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa``."""

        m = _HEX_RE.match(text.strip())
        if m is None:
            raise ValueError(f"Invalid hex colour '{text}'.")
        digits = m.group(1)
        if len(digits) <= 4:
            digits = "".join(ch * 2 for ch in digits)
        channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
        return cls.from_rgba8(*channels)

    def to_rgba8(self) -> tuple[int, int, int, int]:
        return tuple(int(round(v * 255.0)) for v in (self.r, self.g, self.b, self.a))  # type: ignore[return-value]

    def to_hex(self) -> str:
        r, g, b, a = self.to_rgba8()
        if a == 255:
            return f"#{r:02x}{g:02x}{b:02x}"
        return f"#{r:02x}{g:02x}{b:02x}{a:02x}"

    def with_alpha(self, alpha: float) -> Color:
        return Color(r=self.r, g=self.g, b=self.b, a=alpha)

    def as_array(self) -> Array:
        return np.array([self.r, self.g, self.b, self.a], dtype=float)


@dataclass(frozen=True, eq=False)
class ImageArtifact:
    """Rendered RGBA image together with the resolved configuration that produced it."""

    config: ImageConfig
    pixels: Array

    def __post_init__(self) -> None:
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 4:
            raise ValueError("pixels must have shape (height_px, width_px, 4).")
        if self.pixels.dtype != np.uint8:
            raise ValueError("pixels must be a uint8 array.")
        self.pixels.setflags(write=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImageArtifact):
            return NotImplemented
        return self.config == other.config and np.array_equal(self.pixels, other.pixels)

    __hash__ = None  # type: ignore[assignment]

    @property
    def size(self) -> Size:
        return self.config.size

    @property
    def width_px(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height_px(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def pixel_size(self) -> tuple[int, int]:
        return self.width_px, self.height_px

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        r, g, b, a = self.pixels[y, x]
        return int(r), int(g), int(b), int(a)
