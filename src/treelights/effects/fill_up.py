"""
Fill up: the tree fills with a new color from the ground up, over and over.
"""

from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from treelights.core.colorwheel import hue
from treelights.core.cycles import CycleSync
from treelights.core.points import PointCloud
from treelights.effects.base import Effect


@dataclass(frozen=True)
class FillUp(Effect):
    """
    Rising color fill.

    Each segment lasts roughly ``frames_per_fill`` frames. During a segment
    the fill level climbs from 0 to the top of the tree; everything at or
    below it already shows the next segment's color, everything above
    still shows the current one.
    """

    name: ClassVar[str] = "fill-up"

    frames_per_fill: int = 60
    hue_step: float = 0.45

    def cycle(self, total_frames: int) -> CycleSync:
        return CycleSync.fit(self.frames_per_fill, total_frames, self.name)

    def validate(self, points: PointCloud, total_frames: int):
        return self.cycle(total_frames)

    def render(self, points: PointCloud, frame_index: int, total_frames: int) -> np.ndarray:
        sync = self.cycle(total_frames)
        fills = sync.cycle_count
        frames_per_segment = total_frames // fills

        segment = sync.cycle_index(frame_index)
        segment_start = (segment * total_frames) // fills
        level = (frame_index - segment_start) * points.max_height / frames_per_segment

        current = hue(sync.wrapped_cycle(frame_index) * self.hue_step)
        following = hue(((segment + 1) % fills) * self.hue_step)

        above = points.z > level
        return np.where(
            above[:, np.newaxis],
            np.asarray(current, dtype=np.float64),
            np.asarray(following, dtype=np.float64),
        )
