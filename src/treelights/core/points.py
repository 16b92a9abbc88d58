"""
Immutable LED position cloud.

Row ``i`` of the cloud is the position of LED channel ``i``; every effect
emits its colors in this same order.
"""

from dataclasses import dataclass
from typing import Iterable, Union

import numpy as np

from treelights.errors import EmptyPointCloudError, PointCloudFormatError


@dataclass(frozen=True, eq=False)
class PointCloud:
    """Ordered, read-only set of (x, y, z) LED coordinates."""

    coords: np.ndarray

    def __post_init__(self):
        try:
            arr = np.array(self.coords, dtype=np.float64)
        except (TypeError, ValueError) as exc:
            raise PointCloudFormatError(f"coordinates are not numeric triples: {exc}") from exc
        if arr.size == 0:
            raise EmptyPointCloudError("point cloud contains no points")
        if arr.ndim != 2 or arr.shape[1] != 3:
            raise PointCloudFormatError(
                f"expected (N, 3) coordinates, got shape {arr.shape}"
            )
        arr.flags.writeable = False
        object.__setattr__(self, "coords", arr)

    @classmethod
    def from_points(cls, points: Union[np.ndarray, Iterable]) -> "PointCloud":
        """Build a cloud from any sequence of (x, y, z) triples."""
        if isinstance(points, PointCloud):
            return points
        if not isinstance(points, np.ndarray):
            points = list(points)
        return cls(points)

    def __len__(self) -> int:
        return self.coords.shape[0]

    @property
    def x(self) -> np.ndarray:
        return self.coords[:, 0]

    @property
    def y(self) -> np.ndarray:
        return self.coords[:, 1]

    @property
    def z(self) -> np.ndarray:
        return self.coords[:, 2]

    @property
    def max_height(self) -> float:
        """Largest z coordinate in the cloud."""
        return float(self.z.max())
