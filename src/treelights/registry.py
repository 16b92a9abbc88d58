"""
Effect lookup by name.
"""

import dataclasses
import enum
import logging
from typing import Any, Dict, List, Optional, Type

from treelights.effects import (
    Accelerate,
    BarberPole,
    Effect,
    FallDown,
    FallDownRainbow,
    FillUp,
    RollAround,
    Snake,
    Twinkle,
)
from treelights.errors import ConfigurationError

logger = logging.getLogger(__name__)


class EffectKind(str, enum.Enum):
    """Every effect the engine knows how to render."""

    BARBER_POLE = "barber-pole"
    FILL_UP = "fill-up"
    SNAKE = "snake"
    FALL_DOWN = "fall-down"
    FALL_DOWN_RAINBOW = "fall-down-rainbow"
    ACCELERATE = "accelerate"
    ROLL_AROUND = "roll-around"
    TWINKLE = "twinkle"

    @classmethod
    def parse(cls, name: str) -> Optional["EffectKind"]:
        """Return the kind called ``name``, or None if there is none."""
        try:
            return cls(name)
        except ValueError:
            return None


EFFECT_CLASSES: Dict[EffectKind, Type[Effect]] = {
    EffectKind.BARBER_POLE: BarberPole,
    EffectKind.FILL_UP: FillUp,
    EffectKind.SNAKE: Snake,
    EffectKind.FALL_DOWN: FallDown,
    EffectKind.FALL_DOWN_RAINBOW: FallDownRainbow,
    EffectKind.ACCELERATE: Accelerate,
    EffectKind.ROLL_AROUND: RollAround,
    EffectKind.TWINKLE: Twinkle,
}


def available_effects() -> List[str]:
    """Names of all registered effects, in registration order."""
    return [kind.value for kind in EffectKind]


def create_effect(name: str, **overrides: Any) -> Optional[Effect]:
    """
    Build an effect by name.

    Args:
        name: Effect name, e.g. ``"barber-pole"``.
        **overrides: Replacement values for the effect's constants.

    Returns:
        Effect instance, or None if ``name`` is not a known effect.

    Raises:
        ConfigurationError: If an override names a constant the effect lacks.
    """
    kind = EffectKind.parse(name)
    if kind is None:
        logger.debug("No effect registered under %r", name)
        return None

    effect_class = EFFECT_CLASSES[kind]
    known = {f.name for f in dataclasses.fields(effect_class)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ConfigurationError(
            f"effect '{name}' has no parameter(s): {', '.join(unknown)}"
        )
    return effect_class(**overrides)


def get_effect(name: str) -> Optional[Effect]:
    """Effect with default constants, or None for an unknown name."""
    return create_effect(name)
