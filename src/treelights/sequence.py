"""
Sequence generation.

Drives a single effect across every frame of a sequence and collects the
resulting color matrix.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Tuple, Union

import numpy as np

from treelights.core.points import PointCloud
from treelights.effects.base import Effect
from treelights.errors import ConfigurationError, SequenceTooShortError
from treelights.registry import get_effect

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


@dataclass
class SequenceConfig:
    """Settings for one generated sequence."""

    total_frames: int = 1000
    workers: int = 1


class SequenceGenerator:
    """
    Renders complete light sequences for a fixed point cloud.

    The cloud is shared read-only by every frame, and effects keep no state
    between frames, so frames can be computed in any order or in parallel.
    """

    def __init__(
        self,
        points: Union[PointCloud, np.ndarray],
        config: Optional[SequenceConfig] = None,
    ):
        """
        Initialize the generator.

        Args:
            points: LED positions, in channel order.
            config: Sequence settings (defaults to 1000 frames, one worker).

        Raises:
            EmptyPointCloudError: If ``points`` is empty.
        """
        self.points = PointCloud.from_points(points)
        self.cfg = config or SequenceConfig()

    @property
    def total_frames(self) -> int:
        return self.cfg.total_frames

    def _resolve(self, effect: Union[Effect, str]) -> Effect:
        if isinstance(effect, Effect):
            return effect
        resolved = get_effect(effect)
        if resolved is None:
            raise ConfigurationError(f"Unknown effect: {effect}")
        return resolved

    def validate(self, effect: Effect):
        """
        Check that ``effect`` can render the configured sequence.

        Raises:
            ConfigurationError: If the frame count or worker count is unusable.
        """
        if self.cfg.total_frames <= 0:
            raise SequenceTooShortError(self.cfg.total_frames, 1, effect.name)
        if self.cfg.workers < 1:
            raise ConfigurationError(f"workers must be at least 1, got {self.cfg.workers}")
        sync = effect.validate(self.points, self.cfg.total_frames)
        if sync is not None:
            logger.debug(
                "%s: %d cycles of %.1f nominal frames, scaling %.4f",
                effect.name, sync.cycle_count, sync.nominal_frames_per_cycle, sync.scaling_factor,
            )

    def render_frame(self, effect: Union[Effect, str], frame_index: int) -> np.ndarray:
        """Render one frame as an (N, 3) float array."""
        effect = self._resolve(effect)
        frame = effect.render(self.points, frame_index, self.cfg.total_frames)
        return np.asarray(frame, dtype=np.float64).reshape(len(self.points), 3)

    def iter_frames(
        self,
        effect: Union[Effect, str],
        progress_callback: Optional[ProgressCallback] = None,
    ) -> Iterator[Tuple[int, np.ndarray]]:
        """
        Yield ``(frame_index, frame)`` pairs in order.

        The whole configuration is validated before the first frame is
        produced.
        """
        effect = self._resolve(effect)
        self.validate(effect)

        total = self.cfg.total_frames
        logger.debug("Rendering %s: %d frames, %d points", effect.name, total, len(self.points))
        for i in range(total):
            yield i, self.render_frame(effect, i)
            if progress_callback:
                progress_callback(i + 1, total)

    def generate(
        self,
        effect: Union[Effect, str],
        progress_callback: Optional[ProgressCallback] = None,
    ) -> np.ndarray:
        """
        Render the whole sequence.

        Args:
            effect: Effect instance or registered effect name.
            progress_callback: Optional callback(frames_done, total_frames).

        Returns:
            (total_frames, N, 3) float64 array.

        Raises:
            ConfigurationError: For unknown effect names or sequence lengths
                the effect cannot loop over.
        """
        effect = self._resolve(effect)
        self.validate(effect)

        total = self.cfg.total_frames
        t0 = time.time()

        if self.cfg.workers == 1:
            frames = [frame for _, frame in self.iter_frames(effect, progress_callback)]
        else:
            frames = [None] * total
            with ThreadPoolExecutor(max_workers=self.cfg.workers) as pool:
                results = pool.map(lambda i: self.render_frame(effect, i), range(total))
                for i, frame in enumerate(results):
                    frames[i] = frame
                    if progress_callback:
                        progress_callback(i + 1, total)

        sequence = np.stack(frames)
        logger.info(
            "Generated %s: %d frames x %d points in %.2fs",
            effect.name, total, len(self.points), time.time() - t0,
        )
        return sequence

    def generate_by_name(
        self,
        name: str,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> Optional[np.ndarray]:
        """Like :meth:`generate`, but returns None for an unknown effect name."""
        effect = get_effect(name)
        if effect is None:
            logger.warning("Unknown effect: %s", name)
            return None
        return self.generate(effect, progress_callback)
