from chainkit.io.png import read_png_pixels, to_pil_image, write_png
from chainkit.io.recipe import ImageRecipe, canonical_recipe_payload, read_recipe, recipe_builder, recipe_to_dict

__all__ = [
    "ImageRecipe",
    "canonical_recipe_payload",
    "read_recipe",
    "recipe_builder",
    "recipe_to_dict",
    "to_pil_image",
    "write_png",
    "read_png_pixels",
]
