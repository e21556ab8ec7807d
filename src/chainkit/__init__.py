from .core import (
    Color,
    ImageArtifact,
    InvalidConfiguration,
    InvalidMandatoryParameter,
    InvalidOptionalValue,
    MappingError,
    Size,
    render_image,
)
from .modeling import IMAGE_DEFAULTS, ImageBuilder, ImageConfig, image_with_size, parse_color

__all__ = [
    "Color",
    "ImageArtifact",
    "Size",
    "InvalidConfiguration",
    "InvalidMandatoryParameter",
    "InvalidOptionalValue",
    "MappingError",
    "render_image",
    "ImageBuilder",
    "ImageConfig",
    "IMAGE_DEFAULTS",
    "image_with_size",
    "parse_color",
]
