"""
Cycle quantization for looping animations.

Effects are designed around a physically motivated cycle length (a fall
speed, a rotation speed, ...). The requested sequence length rarely holds a
whole number of such cycles, so time is rescaled to fit exactly
``cycle_count`` complete cycles; the last frame then flows straight back
into the first when the sequence is played on repeat.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from treelights.errors import SequenceTooShortError


@dataclass(frozen=True)
class CycleSync:
    """Whole-cycle fit of a nominal cycle length into a fixed frame budget."""

    nominal_frames_per_cycle: float
    total_frames: int
    cycle_count: int
    scaling_factor: float

    @classmethod
    def fit(
        cls,
        nominal_frames_per_cycle: float,
        total_frames: int,
        effect: Optional[str] = None,
    ) -> "CycleSync":
        """
        Fit as many whole cycles as possible into ``total_frames``.

        Args:
            nominal_frames_per_cycle: Cycle length the effect would like to use.
            total_frames: Requested number of frames in the sequence.
            effect: Effect name, used only in the error message.

        Returns:
            CycleSync with the cycle count and time scaling factor.

        Raises:
            SequenceTooShortError: If not even one cycle fits.
        """
        if total_frames <= 0 or nominal_frames_per_cycle <= 0:
            raise SequenceTooShortError(total_frames, nominal_frames_per_cycle, effect)

        cycle_count = math.floor(total_frames / nominal_frames_per_cycle)
        if cycle_count < 1:
            raise SequenceTooShortError(total_frames, nominal_frames_per_cycle, effect)

        scaling_factor = (nominal_frames_per_cycle * cycle_count) / total_frames
        return cls(
            nominal_frames_per_cycle=nominal_frames_per_cycle,
            total_frames=total_frames,
            cycle_count=cycle_count,
            scaling_factor=scaling_factor,
        )

    def scaled_frame(self, frame_index: int) -> float:
        """Frame index on the effect's nominal time axis."""
        return frame_index * self.scaling_factor

    def cycle_index(self, frame_index: int) -> int:
        """Number of complete cycles elapsed before ``frame_index``."""
        return (frame_index * self.cycle_count) // self.total_frames

    def position(self, frame_index: int) -> Tuple[int, float]:
        """
        Locate a frame inside its cycle.

        Equivalent to ``divmod(scaled_frame(i), nominal_frames_per_cycle)``
        but computed on integers, so frame ``total_frames`` lands exactly
        on phase 0 of cycle ``cycle_count``.

        Returns:
            (cycle_index, phase) with phase in [0, nominal_frames_per_cycle).
        """
        cycle, remainder = divmod(frame_index * self.cycle_count, self.total_frames)
        phase = remainder * self.nominal_frames_per_cycle / self.total_frames
        return cycle, phase

    def wrapped_cycle(self, frame_index: int) -> int:
        """Cycle index folded back into [0, cycle_count)."""
        return self.cycle_index(frame_index) % self.cycle_count
