"""RGB to HSL conversion.

Scalar ``rgb_to_hsl`` is what the formatter uses for a single field.
``np_rgb_to_hsl`` converts a whole (N, 3) uint8 array at once and is used for
scheme-wide tables; it evaluates the same expressions in the same order so
both produce identical floats.

Hue is in degrees [0, 360); saturation and luminance are fractions [0, 1].
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from base16_scheme.core.types import RgbColor

HUE_360 = 360.0


class Hsl(NamedTuple):
    hue: float
    saturation: float
    luminance: float


def rgb_to_hsl(color: RgbColor) -> Hsl:
    r, g, b = color.r / 255.0, color.g / 255.0, color.b / 255.0
    max_c = max(r, g, b)
    min_c = min(r, g, b)

    luminance = (max_c + min_c) / 2.0
    if max_c == min_c:
        # Achromatic: no hue, and saturation would divide by zero
        return Hsl(0.0, 0.0, luminance)

    delta = max_c - min_c
    if luminance <= 0.5:
        saturation = delta / (max_c + min_c)
    else:
        saturation = delta / (2.0 - max_c - min_c)

    if max_c == r:
        hue = (g - b) / delta
    elif max_c == g:
        hue = 2.0 + (b - r) / delta
    else:
        hue = 4.0 + (r - g) / delta

    # Python's % on floats is floored, so the result is never negative
    return Hsl((hue * 60.0) % HUE_360, saturation, luminance)


def np_rgb_to_hsl(rgb: np.ndarray) -> np.ndarray:
    """Vectorized rgb_to_hsl.

    Args:
        rgb: array of shape (..., 3) with channel values 0-255

    Returns:
        array of shape (..., 3): (hue, saturation, luminance) as float64
    """
    unit = np.asarray(rgb, dtype=np.float64) / 255.0
    r, g, b = unit[..., 0], unit[..., 1], unit[..., 2]

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c
    chromatic = delta > 0

    luminance = (max_c + min_c) / 2.0

    saturation = np.zeros_like(luminance)
    low = chromatic & (luminance <= 0.5)
    high = chromatic & (luminance > 0.5)
    saturation[low] = delta[low] / (max_c[low] + min_c[low])
    saturation[high] = delta[high] / (2.0 - max_c[high] - min_c[high])

    # Same precedence as the scalar form: red, then green, then blue
    mask_r = chromatic & (max_c == r)
    mask_g = chromatic & ~mask_r & (max_c == g)
    mask_b = chromatic & ~mask_r & ~mask_g

    hue = np.zeros_like(luminance)
    hue[mask_r] = (g[mask_r] - b[mask_r]) / delta[mask_r]
    hue[mask_g] = 2.0 + (b[mask_g] - r[mask_g]) / delta[mask_g]
    hue[mask_b] = 4.0 + (r[mask_b] - g[mask_b]) / delta[mask_b]
    hue = np.mod(hue * 60.0, HUE_360)

    return np.stack([hue, saturation, luminance], axis=-1)
