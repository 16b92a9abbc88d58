"""
Roll around: the tree is painted in eight colored octants which then tumble.

Each cycle steps through a fixed table of quarter-turn keyframes. The
rotation about the vertical axis and the rotation about the x axis read
the same table one step apart, so the octants roll end over end.
"""

import math
from dataclasses import dataclass
from typing import ClassVar, Tuple

import numpy as np
from scipy.spatial.transform import Rotation

from treelights.core.colorwheel import hue_array
from treelights.core.cycles import CycleSync
from treelights.core.points import PointCloud
from treelights.effects.base import Effect

KEYFRAMES = (
    math.pi * 0.5,
    math.pi * 0.5,
    0.0,
    0.0,
    math.pi * -0.5,
    math.pi * -0.5,
    0.0,
    0.0,
)


def _lerp(a: float, b: float, t: float) -> float:
    return a * (1.0 - t) + b * t


@dataclass(frozen=True)
class RollAround(Effect):
    name: ClassVar[str] = "roll-around"

    frames_per_rotation: int = 60
    hue_step: float = 0.45

    @property
    def rotations_per_cycle(self) -> int:
        return len(KEYFRAMES)

    def cycle(self, total_frames: int) -> CycleSync:
        nominal = self.frames_per_rotation * self.rotations_per_cycle
        return CycleSync.fit(nominal, total_frames, self.name)

    def validate(self, points: PointCloud, total_frames: int):
        return self.cycle(total_frames)

    def angles(self, frame_index: int, total_frames: int) -> Tuple[float, float]:
        """
        Rotation angles for a frame.

        Each step spends the first half of its frames turning and the
        second half holding still.

        Returns:
            (z_angle, x_angle) in radians.
        """
        _, phase = self.cycle(total_frames).position(frame_index)
        progress = phase / self.frames_per_rotation
        step = int(progress)
        t = min((progress - step) * 2.0, 1.0)

        n = self.rotations_per_cycle
        z_angle = _lerp(KEYFRAMES[step % n], KEYFRAMES[(step + 1) % n], t)
        x_angle = _lerp(KEYFRAMES[(step + 1) % n], KEYFRAMES[(step + 2) % n], t)
        return z_angle, x_angle

    def octants(self, points: PointCloud, frame_index: int, total_frames: int) -> np.ndarray:
        """Octant index 0-7 of every point after rotation."""
        z_angle, x_angle = self.angles(frame_index, total_frames)

        centred = points.coords - np.array([0.0, 0.0, points.max_height / 2.0])
        # Extrinsic z then x: the same as rotating about z, then about the fixed x axis.
        rotated = Rotation.from_euler("zx", [z_angle, x_angle]).apply(centred)

        return (
            (rotated[:, 0] > 0.0).astype(np.int64)
            + 2 * (rotated[:, 1] > 0.0)
            + 4 * (rotated[:, 2] > 0.0)
        )

    def render(self, points: PointCloud, frame_index: int, total_frames: int) -> np.ndarray:
        return hue_array(self.octants(points, frame_index, total_frames) * self.hue_step)
