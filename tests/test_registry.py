"""Tests for effect lookup."""

import pytest

from treelights.effects import BarberPole, Effect, FallDown, Twinkle
from treelights.errors import ConfigurationError
from treelights.registry import EffectKind, available_effects, create_effect, get_effect

ALL_NAMES = [
    "barber-pole",
    "fill-up",
    "snake",
    "fall-down",
    "fall-down-rainbow",
    "accelerate",
    "roll-around",
    "twinkle",
]


class TestRegistry:
    def test_available_effects(self):
        assert available_effects() == ALL_NAMES

    @pytest.mark.parametrize("name", ALL_NAMES)
    def test_every_name_resolves(self, name):
        effect = get_effect(name)
        assert isinstance(effect, Effect)
        assert effect.name == name

    def test_unknown_name_is_none(self):
        assert get_effect("disco") is None
        assert EffectKind.parse("disco") is None

    def test_kind_is_string(self):
        assert EffectKind.BARBER_POLE == "barber-pole"
        assert EffectKind.parse("twinkle") is EffectKind.TWINKLE

    def test_create_with_overrides(self):
        effect = create_effect("fall-down", fall_speed=0.3, num_layers=4)
        assert isinstance(effect, FallDown)
        assert effect.fall_speed == 0.3
        assert effect.num_layers == 4

    def test_create_rejects_unknown_parameter(self):
        with pytest.raises(ConfigurationError, match="warp"):
            create_effect("barber-pole", warp=2)

    def test_defaults(self):
        assert get_effect("barber-pole") == BarberPole()
        assert get_effect("twinkle").seed == 42
        assert isinstance(get_effect("twinkle"), Twinkle)

    def test_effects_are_immutable(self):
        effect = get_effect("barber-pole")
        with pytest.raises(AttributeError):
            effect.speed = 1.0
