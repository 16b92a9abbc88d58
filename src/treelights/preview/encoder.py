"""
FFmpeg video encoder for sequence previews.

Pipes raw RGB frames to ffmpeg via stdin. No intermediate files are written.
"""

import logging
import subprocess
from pathlib import Path
from typing import Callable, Iterator, Optional

import numpy as np

logger = logging.getLogger(__name__)

# Quality presets: (preset, crf)
QUALITY_PRESETS = {
    "high": ("slow", "18"),
    "medium": ("medium", "23"),
    "fast": ("ultrafast", "28"),
}


def build_command(
    output_path: Path,
    width: int,
    height: int,
    fps: float,
    quality: str = "medium",
) -> list:
    """ffmpeg argument list for encoding raw rgb24 frames from stdin."""
    preset, crf = QUALITY_PRESETS.get(quality, QUALITY_PRESETS["medium"])
    return [
        "ffmpeg", "-y",
        "-loglevel", "error",
        # Raw video input from pipe
        "-f", "rawvideo",
        "-pix_fmt", "rgb24",
        "-s", f"{width}x{height}",
        "-r", f"{fps:g}",
        "-i", "pipe:0",
        # Video encoding
        "-c:v", "libx264",
        "-preset", preset,
        "-crf", crf,
        "-pix_fmt", "yuv420p",
        "-an",
        str(output_path),
    ]


def encode_video(
    frame_iterator: Iterator[np.ndarray],
    output_path: Path,
    width: int,
    height: int,
    fps: float,
    quality: str = "medium",
    total_frames: Optional[int] = None,
    progress_callback: Optional[Callable[[int, int], None]] = None,
) -> Path:
    """
    Encode frames to an MP4 file.

    Args:
        frame_iterator: Yields (H, W, 3) uint8 numpy arrays.
        output_path: Output MP4 path.
        width: Frame width.
        height: Frame height.
        fps: Frames per second.
        quality: "high", "medium", or "fast".
        total_frames: Total frame count for progress reporting.
        progress_callback: Optional callback(current_frame, total_frames).

    Returns:
        Path to the output file.

    Raises:
        RuntimeError: If ffmpeg exits with an error.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    cmd = build_command(output_path, width, height, fps, quality)
    logger.debug("Running %s", " ".join(cmd))

    proc = subprocess.Popen(
        cmd,
        stdin=subprocess.PIPE,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.PIPE,
    )

    frame_count = 0
    try:
        for frame in frame_iterator:
            proc.stdin.write(np.ascontiguousarray(frame, dtype=np.uint8).tobytes())
            frame_count += 1
            if progress_callback and total_frames:
                progress_callback(frame_count, total_frames)
    except BrokenPipeError:
        # ffmpeg died early; its exit status below carries the reason.
        logger.debug("ffmpeg closed its input after %d frames", frame_count)
    finally:
        if proc.stdin:
            proc.stdin.close()

    stderr = proc.stderr.read().decode("utf-8", errors="replace")
    proc.wait()

    if proc.returncode != 0:
        error_lines = [
            line for line in stderr.split("\n")
            if "error" in line.lower() or "invalid" in line.lower()
        ]
        error_msg = "\n".join(error_lines[-5:]) if error_lines else stderr[-500:]
        raise RuntimeError(
            f"ffmpeg exited with code {proc.returncode}: {error_msg}"
        )

    logger.info("Encoded %d frames to %s", frame_count, output_path)
    return output_path
