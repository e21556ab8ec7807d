from .image_config import IMAGE_DEFAULTS, OPTIONAL_FIELDS, UNSET, ImageConfig

__all__ = ["ImageConfig", "IMAGE_DEFAULTS", "OPTIONAL_FIELDS", "UNSET"]
