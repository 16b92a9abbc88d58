"""Tests for the LED point cloud."""

import numpy as np
import pytest

from treelights.core.points import PointCloud
from treelights.errors import EmptyPointCloudError, PointCloudFormatError


class TestPointCloud:
    def test_preserves_order(self):
        pts = [(1.0, 2.0, 3.0), (4.0, 5.0, 6.0), (0.0, 0.0, -1.0)]
        cloud = PointCloud.from_points(pts)
        assert len(cloud) == 3
        np.testing.assert_array_equal(cloud.coords, np.array(pts))
        np.testing.assert_array_equal(cloud.z, [3.0, 6.0, -1.0])

    def test_max_height(self, vertical_line):
        assert vertical_line.max_height == 7.0

    def test_read_only(self, cone_tree):
        with pytest.raises(ValueError):
            cone_tree.coords[0, 0] = 10.0

    def test_does_not_alias_input(self):
        src = np.zeros((2, 3))
        cloud = PointCloud(src)
        src[0, 0] = 5.0
        assert cloud.coords[0, 0] == 0.0

    def test_empty_rejected(self):
        with pytest.raises(EmptyPointCloudError):
            PointCloud(np.zeros((0, 3)))
        with pytest.raises(EmptyPointCloudError):
            PointCloud.from_points([])

    def test_wrong_arity_rejected(self):
        with pytest.raises(PointCloudFormatError):
            PointCloud([(1.0, 2.0)])

    def test_non_numeric_rejected(self):
        with pytest.raises(PointCloudFormatError):
            PointCloud([("a", "b", "c")])

    def test_from_points_passes_cloud_through(self, cone_tree):
        assert PointCloud.from_points(cone_tree) is cone_tree
