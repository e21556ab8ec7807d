"""PNG output for rendered artifacts."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image

from chainkit.core.types import ImageArtifact


def to_pil_image(artifact: ImageArtifact) -> Image.Image:
    return Image.fromarray(np.ascontiguousarray(artifact.pixels))


def write_png(artifact: ImageArtifact, path: str | Path) -> Path:
    """Write ``artifact`` as an RGBA PNG, tagging the scale as DPI (72 dpi per point)."""

    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    dpi = 72.0 * artifact.config.scale
    to_pil_image(artifact).save(out, format="PNG", dpi=(dpi, dpi))
    return out


def read_png_pixels(path: str | Path) -> np.ndarray:
    with Image.open(path) as img:
        return np.asarray(img.convert("RGBA"), dtype=np.uint8).copy()
