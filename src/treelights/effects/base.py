"""
Base class for tree lighting effects.
"""

import abc
from dataclasses import dataclass
from typing import ClassVar, Optional

import numpy as np

from treelights.core.cycles import CycleSync
from treelights.core.points import PointCloud
from treelights.errors import SequenceTooShortError


@dataclass(frozen=True)
class Effect(abc.ABC):
    """
    A pure mapping from (points, frame index, total frames) to one color per point.

    Subclasses are frozen dataclasses whose fields are the effect's
    physical constants. They must not keep any state between calls, so a
    single instance can be shared by concurrent frame workers.
    """

    name: ClassVar[str] = ""

    def validate(self, points: PointCloud, total_frames: int) -> Optional[CycleSync]:
        """
        Check that a sequence of ``total_frames`` can be rendered.

        Cyclic effects override this to fit their cycle and return the fit;
        the default only rejects non-positive lengths.

        Raises:
            SequenceTooShortError: If no frame (or no whole cycle) fits.
        """
        if total_frames <= 0:
            raise SequenceTooShortError(total_frames, 1, self.name)
        return None

    @abc.abstractmethod
    def render(self, points: PointCloud, frame_index: int, total_frames: int) -> np.ndarray:
        """
        Compute one frame.

        Returns:
            (N, 3) float64 array of colors in point order.
        """
        pass

    def __call__(self, points: PointCloud, frame_index: int, total_frames: int) -> np.ndarray:
        return self.render(points, frame_index, total_frames)


def dark_frame(points: PointCloud) -> np.ndarray:
    """All-black frame for ``points``."""
    return np.zeros((len(points), 3), dtype=np.float64)
