import numpy as np
import pytest

from treelights.core.colorwheel import hue
from treelights.effects import FillUp
from treelights.errors import SequenceTooShortError


def test_first_frame_only_floor_shows_next_color(vertical_line):
    colors = FillUp().render(vertical_line, 0, 120)
    np.testing.assert_allclose(colors[0], hue(0.45))
    np.testing.assert_allclose(colors[1:], np.tile(hue(0.0), (7, 1)))


def test_fill_level_rises(vertical_line):
    # Halfway through a 60 frame segment the level is at 3.5 of 7.
    colors = FillUp().render(vertical_line, 30, 120)
    np.testing.assert_allclose(colors[:4], np.tile(hue(0.45), (4, 1)))
    np.testing.assert_allclose(colors[4:], np.tile(hue(0.0), (4, 1)))


def test_next_segment_starts_from_filled_color(vertical_line):
    effect = FillUp()
    colors = effect.render(vertical_line, 60, 120)
    # The color that just filled the tree becomes the current one.
    np.testing.assert_allclose(colors[1:], np.tile(hue(0.45), (7, 1)))
    # With two segments the next color wraps back to the first.
    np.testing.assert_allclose(colors[0], hue(0.0))


def test_at_most_two_colors_per_frame(cone_tree):
    effect = FillUp()
    for frame in range(0, 1000, 41):
        colors = effect.render(cone_tree, frame, 1000)
        assert len({tuple(c) for c in colors}) <= 2


def test_too_short_sequence(vertical_line):
    with pytest.raises(SequenceTooShortError):
        FillUp().validate(vertical_line, 59)
