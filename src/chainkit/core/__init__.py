from .errors import InvalidConfiguration, InvalidMandatoryParameter, InvalidOptionalValue, MappingError
from .raster import coverage_mask, render_image, render_pixels, rounded_rect_sdf
from .types import Color, ImageArtifact, Size

__all__ = [
    "Color",
    "ImageArtifact",
    "Size",
    "InvalidConfiguration",
    "InvalidMandatoryParameter",
    "InvalidOptionalValue",
    "MappingError",
    "coverage_mask",
    "render_image",
    "render_pixels",
    "rounded_rect_sdf",
]
