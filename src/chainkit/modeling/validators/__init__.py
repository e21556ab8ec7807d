from .config_validator import validate_image_config, validate_size
from .field_validator import FIELD_VALIDATORS, validate_field

__all__ = ["FIELD_VALIDATORS", "validate_field", "validate_size", "validate_image_config"]
