"""
Twinkle: four interleaved groups of lights pulse in turn.
"""

import functools
import math
from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from treelights.core.colorwheel import hue_array
from treelights.core.points import PointCloud
from treelights.effects.base import Effect


@functools.lru_cache(maxsize=32)
def phase_assignment(n_points: int, num_phases: int = 4, seed: int = 42) -> np.ndarray:
    """
    Deterministically scatter ``n_points`` LEDs over ``num_phases`` groups.

    The groups are as equal in size as possible and the result depends only
    on the arguments. The returned array is read-only and shared between
    callers.
    """
    rng = np.random.default_rng(seed)
    phases = rng.permutation(np.arange(n_points) % num_phases)
    phases.flags.writeable = False
    return phases


@dataclass(frozen=True)
class Twinkle(Effect):
    name: ClassVar[str] = "twinkle"

    num_phases: int = 4
    turns: float = 3.0  # full brightness sweeps over the whole sequence
    seed: int = 42
    hue_step: float = 0.3

    def render(self, points: PointCloud, frame_index: int, total_frames: int) -> np.ndarray:
        self.validate(points, total_frames)
        phases = phase_assignment(len(points), self.num_phases, self.seed)

        sweep = frame_index * math.pi * 2.0 * self.turns / total_frames
        offsets = phases * (math.pi * 2.0 / self.num_phases) - sweep
        brightness = np.maximum(np.sin(offsets), 0.0)

        return hue_array(phases * self.hue_step) * brightness[:, np.newaxis]
