"""Supersampled rasterization of rounded rectangles."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from chainkit.core.types import Array, ImageArtifact

if TYPE_CHECKING:
    from chainkit.modeling.schema import ImageConfig


# Upper bound on samples evaluated per chunk of pixel rows.
MAX_SAMPLES_PER_CHUNK = 1 << 22


def _rows_per_chunk(width_px: int, samples: int, max_samples: int) -> int:
    per_row = max(1, width_px * samples * samples)
    return max(1, max_samples // per_row)


def _sample_axis(start_px: int, stop_px: int, samples: int) -> Array:
    offsets = (np.arange(samples, dtype=float) + 0.5) / samples
    return (np.arange(start_px, stop_px, dtype=float)[:, None] + offsets[None, :]).reshape(-1)


def rounded_rect_sdf(
    x: Array,
    y: Array,
    width: float,
    height: float,
    radius: float,
) -> Array:
    """Signed distance to a rounded rectangle spanning ``[0, width] x [0, height]``.

    Negative inside, zero on the edge, positive outside. ``radius`` is clamped to
    half the shorter side, which turns the shape into a capsule or circle.
    """

    hx = 0.5 * width
    hy = 0.5 * height
    r = min(max(radius, 0.0), hx, hy)
    qx = np.abs(x - hx) - (hx - r)
    qy = np.abs(y - hy) - (hy - r)
    outside = np.hypot(np.maximum(qx, 0.0), np.maximum(qy, 0.0))
    inside = np.minimum(np.maximum(qx, qy), 0.0)
    return outside + inside - r


def _premultiplied(rgba: Array) -> Array:
    out = np.empty(4, dtype=float)
    out[:3] = rgba[:3] * rgba[3]
    out[3] = rgba[3]
    return out


def _shade_chunk(config: ImageConfig, row_start: int, row_stop: int) -> Array:
    width_px, _ = config.pixel_size
    s = config.antialias
    scale = config.scale
    xs = _sample_axis(0, width_px, s)
    ys = _sample_axis(row_start, row_stop, s)
    x, y = np.meshgrid(xs, ys)
    d = rounded_rect_sdf(
        x,
        y,
        width=config.size.width * scale,
        height=config.size.height * scale,
        radius=config.corner_radius * scale,
    )

    fill = _premultiplied(config.fill_color.as_array())
    border = _premultiplied(config.border_color.as_array())
    band_color = border + fill * (1.0 - border[3])
    border_px = config.border_width * scale

    samples = np.zeros(d.shape + (4,), dtype=float)
    inside = d <= 0.0
    if border_px > 0.0:
        band = inside & (d > -border_px)
        interior = inside & ~band
        samples[band] = band_color
        samples[interior] = fill
    else:
        samples[inside] = fill

    n_rows = row_stop - row_start
    return samples.reshape(n_rows, s, width_px, s, 4).mean(axis=(1, 3))


def _to_straight_rgba8(premultiplied: Array, opacity: float) -> Array:
    alpha = premultiplied[..., 3]
    rgb = np.zeros(premultiplied.shape[:-1] + (3,), dtype=float)
    covered = alpha > 0.0
    rgb[covered] = premultiplied[covered, :3] / alpha[covered][:, None]
    out = np.empty(premultiplied.shape, dtype=float)
    out[..., :3] = rgb
    out[..., 3] = alpha * opacity
    return np.clip(np.rint(out * 255.0), 0.0, 255.0).astype(np.uint8)


def render_pixels(config: ImageConfig) -> Array:
    """Render ``config`` into a ``(height_px, width_px, 4)`` uint8 RGBA array."""

    width_px, height_px = config.pixel_size
    out = np.empty((height_px, width_px, 4), dtype=np.uint8)
    step = _rows_per_chunk(width_px, config.antialias, MAX_SAMPLES_PER_CHUNK)
    for row_start in range(0, height_px, step):
        row_stop = min(height_px, row_start + step)
        chunk = _shade_chunk(config, row_start, row_stop)
        out[row_start:row_stop] = _to_straight_rgba8(chunk, config.opacity)
    return out


def render_image(config: ImageConfig) -> ImageArtifact:
    return ImageArtifact(config=config, pixels=render_pixels(config))


def coverage_mask(config: ImageConfig) -> Array:
    """Fraction of each pixel covered by the rounded rectangle, in [0, 1]."""

    width_px, height_px = config.pixel_size
    s = config.antialias
    scale = config.scale
    out = np.empty((height_px, width_px), dtype=float)
    xs = _sample_axis(0, width_px, s)
    step = _rows_per_chunk(width_px, s, MAX_SAMPLES_PER_CHUNK)
    for row_start in range(0, height_px, step):
        row_stop = min(height_px, row_start + step)
        x, y = np.meshgrid(xs, _sample_axis(row_start, row_stop, s))
        d = rounded_rect_sdf(
            x,
            y,
            width=config.size.width * scale,
            height=config.size.height * scale,
            radius=config.corner_radius * scale,
        )
        inside = (d <= 0.0).astype(float)
        out[row_start:row_stop] = inside.reshape(row_stop - row_start, s, width_px, s).mean(axis=(1, 3))
    return out
