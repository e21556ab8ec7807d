from .image_builder import ImageBuilder, image_with_size

__all__ = ["ImageBuilder", "image_with_size"]
