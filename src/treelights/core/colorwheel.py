"""
Piecewise-linear hue wheel.

Maps a scalar hue onto a fully saturated RGB color. The unit interval is
split into six sectors (red, yellow, green, cyan, blue, magenta) and within
each sector exactly one channel ramps while the other two are pinned at
0.0 and 1.0.
"""

import math
from typing import Tuple

import numpy as np

Color = Tuple[float, float, float]


def hue(h: float) -> Color:
    """
    Return the fully saturated color for hue ``h``.

    Only the fractional part of ``h`` is used, so ``hue(h) == hue(h + 1)``.

    Args:
        h: Hue value, any real number.

    Returns:
        (r, g, b) tuple with channels in [0, 1].
    """
    r = (h - math.floor(h)) * 6.0
    if r < 1.0:
        return (1.0, r, 0.0)
    elif r < 2.0:
        return (2.0 - r, 1.0, 0.0)
    elif r < 3.0:
        return (0.0, 1.0, r - 2.0)
    elif r < 4.0:
        return (0.0, 4.0 - r, 1.0)
    elif r < 5.0:
        return (r - 4.0, 0.0, 1.0)
    return (1.0, 0.0, 6.0 - r)


def hue_array(h: np.ndarray) -> np.ndarray:
    """
    Vectorized hue wheel.

    Args:
        h: Array of hue values, any shape.

    Returns:
        Float64 array of shape ``h.shape + (3,)``.
    """
    h = np.asarray(h, dtype=np.float64)
    r = (h - np.floor(h)) * 6.0
    sector = np.minimum(r.astype(np.int64), 5)

    rgb = np.zeros(h.shape + (3,), dtype=np.float64)

    mask0 = sector == 0
    mask1 = sector == 1
    mask2 = sector == 2
    mask3 = sector == 3
    mask4 = sector == 4
    mask5 = sector == 5

    rgb[mask0, 0] = 1.0; rgb[mask0, 1] = r[mask0]
    rgb[mask1, 0] = 2.0 - r[mask1]; rgb[mask1, 1] = 1.0
    rgb[mask2, 1] = 1.0; rgb[mask2, 2] = r[mask2] - 2.0
    rgb[mask3, 1] = 4.0 - r[mask3]; rgb[mask3, 2] = 1.0
    rgb[mask4, 0] = r[mask4] - 4.0; rgb[mask4, 2] = 1.0
    rgb[mask5, 0] = 1.0; rgb[mask5, 2] = 6.0 - r[mask5]

    return rgb
