import itertools

import numpy as np
import pytest

from chainkit import (
    IMAGE_DEFAULTS,
    Color,
    ImageBuilder,
    InvalidConfiguration,
    InvalidMandatoryParameter,
    InvalidOptionalValue,
    Size,
    image_with_size,
)
from chainkit.modeling import NAMED_COLORS, UNSET


RED = NAMED_COLORS["red"]
BLUE = NAMED_COLORS["blue"]


def test_red_rounded_square_example() -> None:
    image = image_with_size((100, 100)).fill_color("red").corner_radius(20).build()

    assert image.size == Size(100.0, 100.0)
    assert image.pixel_size == (100, 100)
    assert image.config.fill_color == RED
    assert image.config.corner_radius == 20.0
    assert image.config.border_width == IMAGE_DEFAULTS["border_width"]
    assert image.config.border_color == IMAGE_DEFAULTS["border_color"]
    assert image.config.opacity == IMAGE_DEFAULTS["opacity"]
    assert image.config.scale == IMAGE_DEFAULTS["scale"]
    assert image.pixel(50, 50) == (255, 0, 0, 255)
    assert image.pixel(50, 0) == (255, 0, 0, 255)
    # Rounded corner leaves the top-left pixel uncovered.
    assert image.pixel(0, 0)[3] == 0


def test_square_corners_without_radius() -> None:
    image = image_with_size((10, 10)).fill_color("red").build()
    assert image.pixel(0, 0) == (255, 0, 0, 255)
    assert image.pixel(9, 9) == (255, 0, 0, 255)


def test_setters_return_same_builder() -> None:
    builder = image_with_size((10, 10))
    assert builder.fill_color("red") is builder
    assert builder.corner_radius(2) is builder
    assert builder.border_width(1) is builder
    assert builder.border_color("blue") is builder
    assert builder.opacity(0.5) is builder
    assert builder.scale(2.0) is builder
    assert builder.antialias(2) is builder
    assert builder.configure(opacity=1.0) is builder


def test_last_write_wins() -> None:
    image = image_with_size((20, 20)).opacity(0.2).fill_color("blue").opacity(0.8).fill_color("red").build()
    assert image.config.opacity == 0.8
    assert image.config.fill_color == RED


@pytest.mark.parametrize(
    "order",
    list(itertools.permutations(["fill_color", "corner_radius", "border_width"])),
)
def test_setter_order_does_not_matter(order: tuple[str, ...]) -> None:
    values = {"fill_color": "blue", "corner_radius": 3.0, "border_width": 1.5}
    builder = image_with_size((24, 16))
    for name in order:
        getattr(builder, name)(values[name])
    image = builder.build()

    expected = image_with_size((24, 16)).fill_color("blue").corner_radius(3.0).border_width(1.5).build()
    assert image == expected
    assert image.config.fill_color == BLUE
    assert image.config.border_color == IMAGE_DEFAULTS["border_color"]


def test_unset_fields_match_explicit_defaults() -> None:
    implicit = image_with_size((40, 30)).build()
    explicit = image_with_size((40, 30)).configure(**IMAGE_DEFAULTS).build()
    assert implicit == explicit
    assert np.array_equal(implicit.pixels, explicit.pixels)


def test_default_image_is_fully_transparent() -> None:
    image = image_with_size((8, 8)).build()
    assert not image.pixels[..., 3].any()


def test_out_of_domain_opacity_is_rejected_by_setter() -> None:
    builder = image_with_size((10, 10))
    with pytest.raises(InvalidOptionalValue, match="opacity") as excinfo:
        builder.opacity(1.5)
    assert excinfo.value.field == "opacity"
    assert excinfo.value.value == 1.5
    assert dict(builder.fields) == {}


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("opacity", -0.1),
        ("opacity", float("nan")),
        ("corner_radius", -1.0),
        ("border_width", -0.5),
        ("scale", 0.0),
        ("antialias", 0),
        ("antialias", 17),
        ("antialias", True),
        ("fill_color", "not-a-colour"),
        ("border_color", (1.0, 2.0, 0.0)),
        ("corner_radius", "5"),
    ],
)
def test_invalid_optional_values(name: str, value: object) -> None:
    with pytest.raises(InvalidOptionalValue):
        getattr(image_with_size((10, 10)), name)(value)


def test_invalid_optional_value_is_a_configuration_error() -> None:
    with pytest.raises(InvalidConfiguration):
        image_with_size((10, 10)).scale(-1.0)
    with pytest.raises(ValueError):
        image_with_size((10, 10)).scale(-1.0)


@pytest.mark.parametrize(
    "size",
    [(0, 100), (100, 0), (0, 0), (-5, 10), (float("nan"), 10), (float("inf"), 10), (0.2, 0.2)],
)
def test_degenerate_size_fails_at_build(size: tuple[float, float]) -> None:
    builder = image_with_size(size)
    with pytest.raises(InvalidMandatoryParameter):
        builder.build()


def test_uninterpretable_size_fails_at_entry() -> None:
    with pytest.raises(InvalidMandatoryParameter):
        image_with_size("wide")
    with pytest.raises(InvalidMandatoryParameter):
        image_with_size(None)


def test_size_accepts_string_and_mapping() -> None:
    assert image_with_size("100x50").size == Size(100.0, 50.0)
    assert image_with_size({"width": 3, "height": 4}).size == Size(3.0, 4.0)


def test_border_wider_than_half_the_short_side_fails_at_build() -> None:
    builder = image_with_size((20, 10)).border_width(6)
    with pytest.raises(InvalidOptionalValue, match="border_width"):
        builder.build()


def test_border_is_drawn_inside_the_edge() -> None:
    image = image_with_size((100, 100)).fill_color("red").border_width(5).border_color("blue").build()
    assert image.pixel(50, 2) == (0, 0, 255, 255)
    assert image.pixel(2, 50) == (0, 0, 255, 255)
    assert image.pixel(50, 50) == (255, 0, 0, 255)


def test_opacity_scales_alpha() -> None:
    image = image_with_size((10, 10)).fill_color("red").opacity(0.5).build()
    r, g, b, a = image.pixel(5, 5)
    assert (r, g, b) == (255, 0, 0)
    assert a == 128


def test_scale_multiplies_pixel_size() -> None:
    image = image_with_size((100, 50)).scale(2.0).build()
    assert image.pixel_size == (200, 100)
    assert image.size == Size(100.0, 50.0)


def test_oversized_corner_radius_is_clamped() -> None:
    image = image_with_size((40, 20)).fill_color("red").corner_radius(1000).build()
    assert image.pixel(0, 0)[3] == 0
    assert image.pixel(20, 10) == (255, 0, 0, 255)


def test_build_is_repeatable() -> None:
    builder = image_with_size((30, 30)).fill_color("red").corner_radius(6)
    assert builder.build() == builder.build()


def test_configuring_after_build_leaves_earlier_artifacts_untouched() -> None:
    builder = image_with_size((12, 12)).fill_color("red")
    first = builder.build()
    builder.fill_color("blue")
    second = builder.build()

    assert first.config.fill_color == RED
    assert first.pixel(6, 6) == (255, 0, 0, 255)
    assert second.config.fill_color == BLUE
    assert first != second


def test_artifact_pixels_are_read_only() -> None:
    image = image_with_size((4, 4)).fill_color("red").build()
    with pytest.raises(ValueError):
        image.pixels[0, 0, 0] = 0


def test_copy_is_independent() -> None:
    base = image_with_size((16, 16)).fill_color("red")
    fork = base.copy().fill_color("blue").corner_radius(4)

    assert base.fields["fill_color"] == RED
    assert "corner_radius" not in base.fields
    assert fork.fields["fill_color"] == BLUE


def test_reset_restores_default() -> None:
    builder = image_with_size((16, 16)).opacity(0.3).reset("opacity")
    assert "opacity" not in builder.fields
    assert builder.build().config.opacity == 1.0


def test_unknown_field_names_are_rejected() -> None:
    builder = image_with_size((16, 16))
    with pytest.raises(InvalidOptionalValue, match="shadow"):
        builder.configure(shadow=3)
    with pytest.raises(InvalidOptionalValue):
        builder.reset("shadow")


def test_fields_view_hides_unset_entries() -> None:
    builder = ImageBuilder((16, 16)).fill_color(Color(0.0, 0.5, 0.0))
    assert dict(builder.fields) == {"fill_color": Color(0.0, 0.5, 0.0)}
    assert UNSET not in builder.fields.values()
    assert "fill_color" in repr(builder)


def test_size_overflowing_at_scale_fails_at_build() -> None:
    builder = image_with_size((1e308, 10)).scale(10.0)
    with pytest.raises(InvalidMandatoryParameter, match="overflows"):
        builder.build()
