"""Light sequence generator for LED christmas trees."""

from treelights.core import CycleSync, PointCloud, hue, hue_array
from treelights.errors import (
    ConfigurationError,
    EmptyPointCloudError,
    PointCloudFormatError,
    SequenceTooShortError,
    TreeLightsError,
)
from treelights.registry import EffectKind, available_effects, create_effect, get_effect
from treelights.sequence import SequenceConfig, SequenceGenerator

__version__ = "0.1.0"
__all__ = [
    "CycleSync",
    "PointCloud",
    "hue",
    "hue_array",
    "EffectKind",
    "available_effects",
    "create_effect",
    "get_effect",
    "SequenceConfig",
    "SequenceGenerator",
    "TreeLightsError",
    "ConfigurationError",
    "SequenceTooShortError",
    "EmptyPointCloudError",
    "PointCloudFormatError",
]
