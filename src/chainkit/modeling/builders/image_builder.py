"""Chained-call builder for rounded-rectangle images.

Typical use::

    image = (
        image_with_size((100, 100))
        .fill_color("red")
        .corner_radius(20)
        .build()
    )

Every setter validates its own value, stores it and returns the same builder.
``build`` leaves the builder untouched, so it can be called again or further
configured; artifacts already returned never change.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from chainkit.core.errors import InvalidMandatoryParameter, InvalidOptionalValue
from chainkit.core.raster import render_image
from chainkit.core.types import Color, ImageArtifact, Size
from chainkit.modeling.schema import OPTIONAL_FIELDS, UNSET, ImageConfig
from chainkit.modeling.validators import validate_field, validate_image_config


class ImageBuilder:
    """Accumulates optional settings on top of a mandatory size."""

    def __init__(self, size: Any) -> None:
        try:
            self._size = Size.coerce(size)
        except (TypeError, ValueError) as exc:
            raise InvalidMandatoryParameter(f"Cannot interpret size {size!r}: {exc}") from exc
        self._fields: dict[str, Any] = {name: UNSET for name in OPTIONAL_FIELDS}

    def __repr__(self) -> str:
        set_fields = ", ".join(f"{k}={v!r}" for k, v in self.fields.items())
        return f"ImageBuilder(size={self._size!r}{', ' + set_fields if set_fields else ''})"

    @property
    def size(self) -> Size:
        return self._size

    @property
    def fields(self) -> Mapping[str, Any]:
        """Explicitly set optional fields."""
        return MappingProxyType({k: v for k, v in self._fields.items() if v is not UNSET})

    def _set(self, name: str, value: Any) -> ImageBuilder:
        self._fields[name] = validate_field(name, value)
        return self

    def fill_color(self, color: Color | str | tuple[float, ...]) -> ImageBuilder:
        return self._set("fill_color", color)

    def corner_radius(self, radius: float) -> ImageBuilder:
        return self._set("corner_radius", radius)

    def border_width(self, width: float) -> ImageBuilder:
        return self._set("border_width", width)

    def border_color(self, color: Color | str | tuple[float, ...]) -> ImageBuilder:
        return self._set("border_color", color)

    def opacity(self, opacity: float) -> ImageBuilder:
        return self._set("opacity", opacity)

    def scale(self, scale: float) -> ImageBuilder:
        """Pixels per point, e.g. 2.0 for a retina rendition."""
        return self._set("scale", scale)

    def antialias(self, samples: int) -> ImageBuilder:
        """Supersamples per pixel axis; 1 disables antialiasing."""
        return self._set("antialias", samples)

    def configure(self, **values: Any) -> ImageBuilder:
        """Apply several setters at once, in keyword order."""

        unknown = sorted(set(values) - set(OPTIONAL_FIELDS))
        if unknown:
            raise InvalidOptionalValue(unknown[0], values[unknown[0]], "unknown optional field")
        for name, value in values.items():
            self._set(name, value)
        return self

    def reset(self, name: str) -> ImageBuilder:
        """Return ``name`` to its default."""

        if name not in self._fields:
            raise InvalidOptionalValue(name, None, "unknown optional field")
        self._fields[name] = UNSET
        return self

    def copy(self) -> ImageBuilder:
        clone = ImageBuilder(self._size)
        clone._fields = dict(self._fields)
        return clone

    def config(self) -> ImageConfig:
        """Resolve the current settings against the defaults and validate them."""

        config = ImageConfig.from_fields(self._size, self._fields)
        validate_image_config(config)
        return config

    def build(self) -> ImageArtifact:
        return render_image(self.config())


def image_with_size(size: Any) -> ImageBuilder:
    """Start a builder for an image of ``size`` points."""

    return ImageBuilder(size)
