import json

import numpy as np
import pytest

from chainkit import InvalidMandatoryParameter, InvalidOptionalValue, MappingError, Size, image_with_size
from chainkit.io import ImageRecipe, canonical_recipe_payload, read_png_pixels, read_recipe, recipe_builder, recipe_to_dict, to_pil_image, write_png
from chainkit.modeling import NAMED_COLORS


def _recipe_payload() -> dict:
    return {
        "name": "badge",
        "size": [100, 100],
        "fillColor": "red",
        "cornerRadius": "20",
        "alpha": 0.75,
    }


def test_read_recipe_from_dict_accepts_camel_case() -> None:
    recipe = read_recipe(_recipe_payload())
    assert recipe == ImageRecipe(
        size=Size(100.0, 100.0),
        name="badge",
        fill_color=NAMED_COLORS["red"],
        corner_radius=20.0,
        opacity=0.75,
    )
    assert recipe.optional_fields() == {
        "fill_color": NAMED_COLORS["red"],
        "corner_radius": 20.0,
        "opacity": 0.75,
    }


def test_read_recipe_from_json_file(tmp_path) -> None:
    path = tmp_path / "badge.json"
    path.write_text(json.dumps(_recipe_payload()), encoding="utf-8")
    assert read_recipe(path) == read_recipe(_recipe_payload())
    assert read_recipe(str(path)).name == "badge"


def test_read_recipe_rejects_unsupported_source() -> None:
    with pytest.raises(TypeError):
        read_recipe(42)


def test_recipe_requires_size() -> None:
    with pytest.raises(MappingError, match="size"):
        read_recipe({"name": "no-size"})


def test_recipe_builder_applies_only_present_fields() -> None:
    builder = recipe_builder(read_recipe(_recipe_payload()))
    assert set(builder.fields) == {"fill_color", "corner_radius", "opacity"}

    expected = image_with_size((100, 100)).fill_color("red").corner_radius(20).opacity(0.75).build()
    assert builder.build() == expected


def test_recipe_domain_errors_surface_from_builder() -> None:
    recipe = read_recipe({"size": [10, 10], "opacity": 1.5})
    with pytest.raises(InvalidOptionalValue, match="opacity"):
        recipe_builder(recipe)

    degenerate = read_recipe({"size": "0x10"})
    with pytest.raises(InvalidMandatoryParameter):
        recipe_builder(degenerate).build()


def test_recipe_to_dict_round_trips() -> None:
    recipe = read_recipe(_recipe_payload())
    payload = recipe_to_dict(recipe)
    assert payload == {
        "name": "badge",
        "size": [100.0, 100.0],
        "fill_color": "#ff0000",
        "corner_radius": 20.0,
        "opacity": 0.75,
    }
    assert read_recipe(payload) == recipe


def test_write_png_preserves_pixels(tmp_path) -> None:
    image = image_with_size((24, 12)).fill_color("#3366cc").corner_radius(4).scale(2.0).build()
    path = write_png(image, tmp_path / "out" / "pill.png")

    assert path.exists()
    assert np.array_equal(read_png_pixels(path), image.pixels)


def test_to_pil_image_mode_and_size() -> None:
    image = image_with_size((5, 3)).fill_color("blue").build()
    pil = to_pil_image(image)
    assert pil.mode == "RGBA"
    assert pil.size == (5, 3)


def test_canonical_recipe_payload_renames_aliases() -> None:
    payload = canonical_recipe_payload({"fillColor": "red", "fill": "blue", "alpha": 0.5, "extra": 1})
    assert payload == {"fill_color": "red", "opacity": 0.5, "extra": 1}
    merged = {**canonical_recipe_payload({"fill_color": "blue"}), **canonical_recipe_payload({"fillColor": "red"})}
    assert read_recipe({"size": [2, 2], **merged}).fill_color == NAMED_COLORS["red"]
