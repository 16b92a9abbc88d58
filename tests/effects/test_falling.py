import numpy as np
import pytest

from treelights.core.colorwheel import hue, hue_array
from treelights.effects import FallDown, FallDownRainbow
from treelights.errors import SequenceTooShortError


class TestFallDown:
    def test_cycle_length(self, vertical_line):
        # max height 7: 90 pause frames + 38.5 units of travel at 0.15
        assert FallDown().frames_per_cycle(7.0) == pytest.approx(90 + 38.5 / 0.15)

    def test_first_frame_lights_top_only(self, vertical_line):
        colors = FallDown().render(vertical_line, 0, 1000)
        np.testing.assert_array_equal(colors[:7], 0.0)
        np.testing.assert_allclose(colors[7], hue(0.0))

    def test_single_color_per_cycle(self, vertical_line):
        effect = FallDown()
        # 1000 frames hold two cycles of ~347 nominal frames.
        for frame in range(0, 1000, 7):
            colors = effect.render(vertical_line, frame, 1000)
            lit = colors[colors.max(axis=1) > 0]
            expected = hue(0.0) if frame < 500 else hue(0.45)
            np.testing.assert_allclose(lit, np.tile(expected, (len(lit), 1)))

    def test_layers_settle_and_drain(self, vertical_line):
        effect = FallDown()
        bases = [effect.state(vertical_line, f, 1000).base_level for f in range(500)]
        # All eight layers land before the drain starts.
        assert 7.0 * 7 / 8 < max(bases) <= 7.0
        # The stack drains away by the end of the cycle.
        assert bases[-1] < 0.0

    def test_falling_band_is_one_layer_high(self, cone_tree):
        effect = FallDown()
        for frame in range(0, 300, 11):
            st = effect.state(cone_tree, frame, 1000)
            if st.band_max > 0:
                assert st.band_max - st.band_min == pytest.approx(cone_tree.max_height / 8)

    def test_too_short_sequence(self, vertical_line):
        with pytest.raises(SequenceTooShortError):
            FallDown().validate(vertical_line, 346)
        FallDown().validate(vertical_line, 347)


class TestFallDownRainbow:
    def test_first_frame_lights_top_only(self, vertical_line):
        colors = FallDownRainbow().render(vertical_line, 0, 1000)
        np.testing.assert_array_equal(colors[:7], 0.0)
        np.testing.assert_allclose(colors[7], hue(0.0))

    def test_settled_points_keep_layer_color(self, vertical_line):
        effect = FallDownRainbow()
        palette = hue_array(np.arange(8) * 0.45)
        layer_height = 7.0 / 8
        checked = 0
        for frame in range(0, 500, 3):
            st = effect.state(vertical_line, frame, 1000)
            colors = effect.render(vertical_line, frame, 1000)
            for z in range(8):
                if z < st.base_level:
                    layer = min(int(z / layer_height), 7)
                    np.testing.assert_allclose(colors[z], palette[layer])
                    checked += 1
        assert checked > 0

    def test_second_cycle_shifts_palette(self, vertical_line):
        effect = FallDownRainbow()
        np.testing.assert_allclose(effect.layer_colors(1), hue_array((np.arange(8) + 8) * 0.45))

    def test_stack_is_multicolored(self, cone_tree):
        effect = FallDownRainbow()
        most = max(
            len({tuple(c) for c in effect.render(cone_tree, f, 1000) if c.max() > 0})
            for f in range(0, 250, 5)
        )
        assert most >= 4
