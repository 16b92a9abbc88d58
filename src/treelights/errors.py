"""
Exception hierarchy for the treelights engine.
"""


class TreeLightsError(Exception):
    """Base exception for all treelights errors."""


class ConfigurationError(TreeLightsError, ValueError):
    """A sequence or effect was configured with unusable parameters."""


class SequenceTooShortError(ConfigurationError):
    """The requested frame count cannot hold a single cycle of an effect."""

    def __init__(self, total_frames: int, nominal_frames_per_cycle: float, effect: str | None = None):
        self.total_frames = total_frames
        self.nominal_frames_per_cycle = nominal_frames_per_cycle
        self.effect = effect
        subject = f"effect '{effect}'" if effect else "effect"
        super().__init__(
            f"requested length too short for {subject}: {total_frames} frames "
            f"requested, one cycle needs {nominal_frames_per_cycle:.1f}"
        )


class EmptyPointCloudError(TreeLightsError, ValueError):
    """A point cloud with no points was supplied."""


class PointCloudFormatError(TreeLightsError, ValueError):
    """Coordinate data could not be parsed into (x, y, z) rows."""
