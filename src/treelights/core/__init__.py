"""Shared primitives used by every effect."""

from treelights.core.colorwheel import hue, hue_array
from treelights.core.cycles import CycleSync
from treelights.core.points import PointCloud

__all__ = ["hue", "hue_array", "CycleSync", "PointCloud"]
