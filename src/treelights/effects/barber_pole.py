"""
Barber pole: a red and grey helix spinning around the trunk.
"""

import math
from dataclasses import dataclass
from typing import ClassVar, Tuple

import numpy as np

from treelights.core.cycles import CycleSync
from treelights.core.points import PointCloud
from treelights.effects.base import Effect


@dataclass(frozen=True)
class BarberPole(Effect):
    """Two-color helix whose stripes twist with height."""

    name: ClassVar[str] = "barber-pole"

    speed: float = 0.05  # radians per frame
    twist: float = 5.0  # radians per unit of height
    stripe_color: Tuple[float, float, float] = (1.0, 0.0, 0.0)
    base_color: Tuple[float, float, float] = (0.5, 0.5, 0.5)

    def cycle(self, total_frames: int) -> CycleSync:
        return CycleSync.fit(2.0 * math.pi / self.speed, total_frames, self.name)

    def validate(self, points: PointCloud, total_frames: int):
        return self.cycle(total_frames)

    def render(self, points: PointCloud, frame_index: int, total_frames: int) -> np.ndarray:
        sync = self.cycle(total_frames)
        # Whole turns add nothing to the angle, so only the fraction of the
        # current turn matters.
        _, phase = sync.position(frame_index)
        offset = phase * self.speed

        angle = np.arctan2(points.x, points.y) + points.z * self.twist + offset
        stripe = np.sin(angle) > 0.0

        return np.where(
            stripe[:, np.newaxis],
            np.asarray(self.stripe_color, dtype=np.float64),
            np.asarray(self.base_color, dtype=np.float64),
        )
