"""Image recipes: JSON descriptions of a builder call chain.

Supported sources:
- ``dict`` payload with a ``size`` key and any optional builder fields.
- JSON file path containing the same structure.

camelCase keys (``fillColor``, ``cornerRadius``, ...) are accepted alongside
snake_case ones.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from chainkit.core.types import Color, Size
from chainkit.mapping import FieldSpec, dump_model, get_schema, map_model, mapped
from chainkit.modeling.builders import ImageBuilder, image_with_size


@mapped(
    FieldSpec("size", "size", required=True),
    FieldSpec("name", "str", default="image"),
    FieldSpec("fill_color", "color", keys=("fill_color", "fillColor", "fill")),
    FieldSpec("corner_radius", "float", keys=("corner_radius", "cornerRadius", "radius")),
    FieldSpec("border_width", "float", keys=("border_width", "borderWidth")),
    FieldSpec("border_color", "color", keys=("border_color", "borderColor")),
    FieldSpec("opacity", "float", keys=("opacity", "alpha")),
    FieldSpec("scale", "float"),
    FieldSpec("antialias", "int"),
)
@dataclass(frozen=True)
class ImageRecipe:
    """Mandatory size plus the optional fields that were present in the payload."""

    size: Size
    name: str = "image"
    fill_color: Color | None = None
    corner_radius: float | None = None
    border_width: float | None = None
    border_color: Color | None = None
    opacity: float | None = None
    scale: float | None = None
    antialias: int | None = None

    def optional_fields(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in {"size", "name"} and getattr(self, f.name) is not None
        }


def _load_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8-sig") as fh:
        return json.load(fh)


def read_recipe(source: Any) -> ImageRecipe:
    if isinstance(source, Mapping):
        payload = source
    elif isinstance(source, (str, Path)):
        payload = _load_json(Path(source))
    else:
        raise TypeError("Unsupported source type for image recipe.")
    return map_model(payload, ImageRecipe)


def canonical_recipe_payload(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Rename every accepted alias to its primary key; the first present candidate wins.

    Lets partial payloads (shared defaults, per-image overrides) be merged key by key.
    """

    out = dict(payload)
    for field in get_schema(ImageRecipe).fields:
        aliases = [path[0] for path in field.key_paths if len(path) == 1]
        present = [key for key in aliases if key in out]
        if not present:
            continue
        value = out[present[0]]
        for key in present:
            del out[key]
        out[aliases[0]] = value
    return out


def recipe_builder(recipe: ImageRecipe) -> ImageBuilder:
    """Builder with exactly the recipe's present fields applied."""

    return image_with_size(recipe.size).configure(**recipe.optional_fields())


def recipe_to_dict(recipe: ImageRecipe) -> dict[str, Any]:
    return dump_model(recipe)
