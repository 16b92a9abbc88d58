"""
Sequence serialization.

A sequence file is a CSV table with one row per frame. The header is
``FRAME_ID,R_0,G_0,B_0,R_1,...`` and every following row holds the frame
index and then each LED's color as integers in 0-255.
"""

import csv
import logging
from pathlib import Path
from typing import IO, Iterable, List, Tuple, Union

import numpy as np

logger = logging.getLogger(__name__)


def quantize(frame: np.ndarray) -> np.ndarray:
    """
    Convert float colors to 8-bit channel values.

    Channels are clamped to [0, 1], scaled by 255 and truncated (not
    rounded), so 0.5 becomes 127.

    Args:
        frame: Float color array of any shape.

    Returns:
        uint8 array of the same shape.
    """
    clamped = np.clip(np.asarray(frame, dtype=np.float64), 0.0, 1.0)
    return (clamped * 255.0).astype(np.uint8)


class SequenceExporter:
    """Writes generated sequences as CSV tables."""

    def header(self, n_points: int) -> List[str]:
        """Column names for a sequence of ``n_points`` LEDs."""
        columns = ["FRAME_ID"]
        for i in range(n_points):
            columns.extend([f"R_{i}", f"G_{i}", f"B_{i}"])
        return columns

    def _write_rows(self, frames: Iterable[Tuple[int, np.ndarray]], stream: IO[str]) -> int:
        writer = csv.writer(stream, lineterminator="\n")
        count = 0
        for frame_index, frame in frames:
            if count == 0:
                writer.writerow(self.header(len(frame)))
            channels = quantize(frame).reshape(-1)
            writer.writerow([frame_index, *channels.tolist()])
            count += 1
        return count

    def write_csv(
        self,
        frames: Union[np.ndarray, Iterable[Tuple[int, np.ndarray]]],
        output: Union[str, Path, IO[str]],
    ) -> int:
        """
        Write a sequence.

        Args:
            frames: Either a (frames, N, 3) array or an iterable of
                ``(frame_index, frame)`` pairs, as produced by
                ``SequenceGenerator.iter_frames``.
            output: Destination path or open text stream.

        Returns:
            Number of frames written.
        """
        if isinstance(frames, np.ndarray):
            frames = enumerate(frames)

        if hasattr(output, "write"):
            count = self._write_rows(frames, output)
        else:
            output_path = Path(output)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w", encoding="utf-8", newline="") as f:
                count = self._write_rows(frames, f)
            logger.info("Wrote %d frames to %s", count, output_path)

        return count


def read_sequence(path: Union[str, Path]) -> np.ndarray:
    """
    Load a sequence CSV back into float colors.

    Args:
        path: Sequence file written by :class:`SequenceExporter`.

    Returns:
        (frames, N, 3) float64 array with channels in [0, 1].
    """
    data = np.loadtxt(path, delimiter=",", skiprows=1, dtype=np.float64, ndmin=2)
    channels = data[:, 1:]
    if channels.shape[1] % 3:
        raise ValueError(f"{path}: channel count {channels.shape[1]} is not a multiple of 3")
    return channels.reshape(channels.shape[0], -1, 3) / 255.0
