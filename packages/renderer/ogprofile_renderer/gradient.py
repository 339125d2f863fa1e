"""Linear gradient fills."""

from __future__ import annotations

import numpy as np
from PIL import Image, ImageColor


def linear_gradient(
    width: int,
    height: int,
    start_color: str,
    end_color: str,
    start: tuple[float, float] = (0.0, 0.0),
    end: tuple[float, float] | None = None,
) -> Image.Image:
    """Render an RGBA image filled with a non-repeating two-stop gradient.

    Each pixel is projected onto the ``start -> end`` axis; positions before
    the first stop or past the last one take the colour of that stop.
    """
    if end is None:
        end = (float(width), float(height))

    c0 = np.array(ImageColor.getrgb(start_color)[:3], dtype=np.float64)
    c1 = np.array(ImageColor.getrgb(end_color)[:3], dtype=np.float64)

    dx = end[0] - start[0]
    dy = end[1] - start[1]
    length_sq = dx * dx + dy * dy
    xs = np.arange(width, dtype=np.float64)[np.newaxis, :] - start[0]
    ys = np.arange(height, dtype=np.float64)[:, np.newaxis] - start[1]
    if length_sq == 0:
        t = np.zeros((height, width), dtype=np.float64)
    else:
        t = np.clip((xs * dx + ys * dy) / length_sq, 0.0, 1.0)

    rgb = c0 * (1.0 - t)[..., np.newaxis] + c1 * t[..., np.newaxis]
    out = np.empty((height, width, 4), dtype=np.uint8)
    out[..., :3] = np.rint(rgb).astype(np.uint8)
    out[..., 3] = 255
    return Image.fromarray(out)
