"""
Looping playback clock.

Sequences are played on repeat at a fixed frame rate. The clock keeps the
elapsed time folded into one pass of the sequence and maps it to a frame.
"""

from dataclasses import dataclass, field
from typing import Iterator

# Frame rate of the physical tree controller.
DEFAULT_FPS = 34.7


@dataclass
class PlaybackClock:
    n_frames: int
    fps: float = DEFAULT_FPS
    time: float = field(default=0.0)

    def __post_init__(self):
        if self.n_frames <= 0:
            raise ValueError(f"n_frames must be positive, got {self.n_frames}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")

    @property
    def duration(self) -> float:
        """Length of one pass through the sequence, in seconds."""
        return self.n_frames / self.fps

    @property
    def frame_index(self) -> int:
        # Guard against time * fps rounding up to n_frames.
        return min(int(self.time * self.fps), self.n_frames - 1)

    def advance(self, dt: float) -> int:
        """Move the clock forward by ``dt`` seconds and return the new frame index."""
        self.time = (self.time + dt) % self.duration
        return self.frame_index


def loop_indices(n_frames: int, fps: float, seconds: float) -> Iterator[int]:
    """
    Frame indices shown during ``seconds`` of looped playback at ``fps``.

    The sequence restarts from frame 0 whenever it runs out.
    """
    clock = PlaybackClock(n_frames, fps)
    count = int(round(seconds * fps))
    if count <= 0:
        return
    yield clock.frame_index
    for _ in range(count - 1):
        yield clock.advance(1.0 / fps)
