"""Tree lighting effects."""

from treelights.effects.accelerate import Accelerate
from treelights.effects.barber_pole import BarberPole
from treelights.effects.base import Effect
from treelights.effects.falling import FallDown, FallDownRainbow
from treelights.effects.fill_up import FillUp
from treelights.effects.roll_around import RollAround
from treelights.effects.snake import Snake
from treelights.effects.twinkle import Twinkle

__all__ = [
    "Effect",
    "BarberPole",
    "FillUp",
    "Snake",
    "FallDown",
    "FallDownRainbow",
    "Accelerate",
    "RollAround",
    "Twinkle",
]
