"""
Accelerate: colored bands stream down the tree ever faster.
"""

from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from treelights.core.colorwheel import hue_array
from treelights.core.points import PointCloud
from treelights.effects.base import Effect, dark_frame


@dataclass(frozen=True)
class Accelerate(Effect):
    """
    Alternating lit and dark bands whose offset grows as ``frame ** exponent``.

    This effect never loops; it is meant to be played once.
    """

    name: ClassVar[str] = "accelerate"

    acceleration: float = 0.00002
    exponent: float = 2.2
    levels: int = 4
    hue_step: float = 0.45

    def render(self, points: PointCloud, frame_index: int, total_frames: int) -> np.ndarray:
        level_height = points.max_height / self.levels
        band_height = level_height * 2.0
        if band_height <= 0:
            return dark_frame(points)

        travelled = self.acceleration * float(frame_index) ** self.exponent
        dist = travelled + points.z

        band = np.maximum(np.trunc(dist / band_height), 0.0)
        lit = np.fmod(dist, band_height) < level_height

        colors = hue_array(band * self.hue_step)
        return np.where(lit[:, np.newaxis], colors, 0.0)
