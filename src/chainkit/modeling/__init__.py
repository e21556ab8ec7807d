from .builders import ImageBuilder, image_with_size
from .colors import NAMED_COLORS, named_color, parse_color
from .schema import IMAGE_DEFAULTS, OPTIONAL_FIELDS, UNSET, ImageConfig
from .validators import FIELD_VALIDATORS, validate_field, validate_image_config, validate_size

__all__ = [
    "ImageBuilder",
    "image_with_size",
    "ImageConfig",
    "IMAGE_DEFAULTS",
    "OPTIONAL_FIELDS",
    "UNSET",
    "NAMED_COLORS",
    "named_color",
    "parse_color",
    "FIELD_VALIDATORS",
    "validate_field",
    "validate_size",
    "validate_image_config",
]
