"""
LED coordinate loading.

Coordinates are stored one LED per line as headerless ``x,y,z`` CSV, in
the order the LEDs are wired.
"""

import logging
import warnings
from pathlib import Path
from typing import Union

import numpy as np

from treelights.core.points import PointCloud
from treelights.errors import EmptyPointCloudError, PointCloudFormatError

logger = logging.getLogger(__name__)


def load_points(path: Union[str, Path]) -> PointCloud:
    """
    Load an LED coordinate file.

    Args:
        path: CSV file with one ``x,y,z`` row per LED.

    Returns:
        PointCloud in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        EmptyPointCloudError: If the file holds no coordinates.
        PointCloudFormatError: If a row is not three numbers.
    """
    path = Path(path)

    with warnings.catch_warnings():
        # numpy warns instead of failing on an empty input file
        warnings.simplefilter("ignore", UserWarning)
        try:
            coords = np.loadtxt(path, delimiter=",", dtype=np.float64, ndmin=2)
        except ValueError as exc:
            raise PointCloudFormatError(f"{path}: {exc}") from exc

    if coords.size == 0:
        raise EmptyPointCloudError(f"{path}: no coordinates found")
    if coords.shape[1] != 3:
        raise PointCloudFormatError(
            f"{path}: expected 3 columns per row, found {coords.shape[1]}"
        )

    logger.debug("Loaded %d LED positions from %s", coords.shape[0], path)
    return PointCloud(coords)
