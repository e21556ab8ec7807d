"""Validation of mandatory parameters and cross-field constraints at build time."""

from __future__ import annotations

from chainkit.core.errors import InvalidMandatoryParameter, InvalidOptionalValue
from chainkit.core.types import Size
from chainkit.modeling.schema import ImageConfig
from chainkit.modeling.validators.field_validator import FIELD_VALIDATORS


def validate_size(size: Size, scale: float = 1.0) -> None:
    if not size.is_finite:
        raise InvalidMandatoryParameter(f"Size must be finite, got {size.width!r}x{size.height!r}.")
    if size.width <= 0.0 or size.height <= 0.0:
        raise InvalidMandatoryParameter(
            f"Size must have positive width and height, got {size.width!r}x{size.height!r}."
        )
    if not size.scaled(scale).is_finite:
        raise InvalidMandatoryParameter(
            f"Size {size.width!r}x{size.height!r} at scale {scale!r} overflows the pixel grid."
        )
    width_px, height_px = size.to_pixels(scale)
    if width_px < 1 or height_px < 1:
        raise InvalidMandatoryParameter(
            f"Size {size.width!r}x{size.height!r} at scale {scale!r} covers less than one pixel per axis."
        )


def validate_image_config(config: ImageConfig) -> None:
    """Check a fully resolved configuration before rendering."""

    for name, validator in FIELD_VALIDATORS.items():
        validator(getattr(config, name))
    validate_size(config.size, config.scale)

    half_short_side = 0.5 * min(config.size.width, config.size.height)
    if config.border_width > half_short_side:
        raise InvalidOptionalValue(
            "border_width",
            config.border_width,
            f"exceeds half the shorter side ({half_short_side:g})",
        )
