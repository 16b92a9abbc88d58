import numpy as np

from treelights.core.colorwheel import hue
from treelights.core.points import PointCloud
from treelights.effects import Accelerate


def test_first_frame_bands(vertical_line):
    # Max height 7 gives lit bands of 1.75 separated by 1.75 of dark.
    colors = Accelerate().render(vertical_line, 0, 1000)
    expected = [
        hue(0.0), hue(0.0), (0, 0, 0), (0, 0, 0),
        hue(0.45), hue(0.45), (0, 0, 0), hue(0.9),
    ]
    np.testing.assert_allclose(colors, expected)


def test_bands_move_faster_over_time(vertical_line):
    effect = Accelerate()
    travel = [effect.acceleration * f ** effect.exponent for f in (100, 200, 300)]
    assert travel[2] - travel[1] > travel[1] - travel[0]
    assert not np.array_equal(effect.render(vertical_line, 0, 1000), effect.render(vertical_line, 1000, 1000))


def test_flat_cloud_is_dark():
    cloud = PointCloud([(0.0, 0.0, 0.0), (1.0, 1.0, 0.0)])
    np.testing.assert_array_equal(Accelerate().render(cloud, 50, 1000), 0.0)


def test_no_minimum_length(single_point):
    Accelerate().validate(single_point, 1)
