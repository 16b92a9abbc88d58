"""
Snake: a short fading run of lights crawling along the string.

Unlike the other effects this one ignores positions entirely and walks the
LEDs in wiring order.
"""

from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from treelights.core.colorwheel import hue
from treelights.core.points import PointCloud
from treelights.effects.base import Effect


@dataclass(frozen=True)
class Snake(Effect):
    name: ClassVar[str] = "snake"

    length: int = 20
    hue_period: float = 60.0  # frames per trip around the hue wheel

    def render(self, points: PointCloud, frame_index: int, total_frames: int) -> np.ndarray:
        n = len(points)
        color = np.asarray(hue(frame_index / self.hue_period), dtype=np.float64)

        position = (np.arange(n) + frame_index) % n
        fade = np.where(position < self.length, 1.0 - position / self.length, 0.0)

        return fade[:, np.newaxis] * color
