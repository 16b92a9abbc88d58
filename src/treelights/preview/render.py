"""
Offline tree preview renderer.

Draws every LED as a small glowing bulb seen from a camera that slowly
orbits the trunk, then finishes the image with bloom and a vignette.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Tuple

import numpy as np
from PIL import Image, ImageDraw, ImageFilter

from treelights.core.points import PointCloud
from treelights.io.exporter import quantize
from treelights.preview.playback import DEFAULT_FPS, loop_indices

logger = logging.getLogger(__name__)


@dataclass
class PreviewConfig:
    """Settings for preview videos."""

    width: int = 540
    height: int = 720
    fps: float = DEFAULT_FPS

    bulb_radius: int = 4
    unlit_color: Tuple[int, int, int] = (24, 24, 24)
    background: Tuple[int, int, int] = (4, 6, 12)
    orbit_turns: float = 1.0  # camera turns per pass through the sequence
    margin: float = 0.08  # fraction of the frame kept empty on each side

    # Post-processing
    glow_enabled: bool = True
    glow_intensity: float = 0.6
    glow_radius: int = 8
    vignette_strength: float = 0.3


def add_glow(frame: np.ndarray, intensity: float, radius: int) -> np.ndarray:
    """
    Bloom by screen-blending a blurred copy over the frame.

    Args:
        frame: (H, W, 3) uint8 RGB array.
        intensity: Opacity of the blurred layer (0-1).
        radius: Gaussian blur radius in pixels.

    Returns:
        (H, W, 3) uint8 RGB array.
    """
    if intensity <= 0:
        return frame

    blurred = Image.fromarray(frame).filter(ImageFilter.GaussianBlur(radius=radius))
    a = frame.astype(np.float32) / 255.0
    b = np.asarray(blurred, dtype=np.float32) / 255.0 * intensity

    # Screen blend: 1 - (1-a)(1-b)
    screen = 1.0 - (1.0 - a) * (1.0 - b)
    return (screen * 255).astype(np.uint8)


def vignette(frame: np.ndarray, strength: float) -> np.ndarray:
    """
    Darken the frame towards its corners.

    Args:
        frame: (H, W, 3) uint8 RGB array.
        strength: 0 leaves the frame untouched, 1 fades the corners to black.
    """
    if strength <= 0:
        return frame

    h, w = frame.shape[:2]
    cy, cx = h / 2, w / 2
    yg, xg = np.mgrid[0:h, 0:w].astype(np.float32)
    r = np.sqrt((xg - cx) ** 2 + (yg - cy) ** 2) / math.hypot(cx, cy)

    falloff = 1.0 - np.clip(r * strength, 0, 1) ** 2
    return (frame.astype(np.float32) * falloff[:, :, np.newaxis]).astype(np.uint8)


class TreePreviewRenderer:
    """Turns a generated color sequence into RGB video frames."""

    def __init__(self, points: PointCloud, config: Optional[PreviewConfig] = None):
        self.points = PointCloud.from_points(points)
        self.cfg = config or PreviewConfig()

        coords = self.points.coords
        self._radius = max(float(np.hypot(coords[:, 0], coords[:, 1]).max()), 1e-6)
        self._z_min = float(coords[:, 2].min())
        self._z_span = max(self.points.max_height - self._z_min, 1e-6)

        usable_w = self.cfg.width * (1.0 - 2.0 * self.cfg.margin)
        usable_h = self.cfg.height * (1.0 - 2.0 * self.cfg.margin)
        self._scale = min(usable_w / (2.0 * self._radius), usable_h / self._z_span)
        logger.debug("Preview %dx%d, %.1f px per unit", self.cfg.width, self.cfg.height, self._scale)

    def project(self, camera_angle: float) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Orthographic projection for a camera orbiting the vertical axis.

        Returns:
            (u, v, depth): pixel columns, pixel rows, and distance away from
            the camera (larger is further).
        """
        x, y, z = self.points.x, self.points.y, self.points.z
        c, s = math.cos(camera_angle), math.sin(camera_angle)

        horizontal = x * c - y * s
        depth = x * s + y * c

        u = self.cfg.width / 2.0 + horizontal * self._scale
        # Image rows grow downwards; the tree top goes near row 0.
        v = self.cfg.height * (1.0 - self.cfg.margin) - (z - self._z_min) * self._scale
        return u, v, depth

    def draw(self, colors: np.ndarray, camera_angle: float = 0.0) -> np.ndarray:
        """
        Draw one frame of bulbs.

        Args:
            colors: (N, 3) float colors in point order.
            camera_angle: Camera orbit angle in radians.

        Returns:
            (H, W, 3) uint8 RGB image.
        """
        rgb = quantize(colors)
        u, v, depth = self.project(camera_angle)

        img = Image.new("RGB", (self.cfg.width, self.cfg.height), self.cfg.background)
        draw = ImageDraw.Draw(img)
        r = self.cfg.bulb_radius

        # Painter's order: far bulbs first.
        for i in np.argsort(-depth, kind="stable"):
            color = tuple(int(c) for c in rgb[i])
            lit = max(color) > 0
            draw.ellipse(
                (u[i] - r, v[i] - r, u[i] + r, v[i] + r),
                fill=color if lit else self.cfg.unlit_color,
            )
            if lit:
                # Bright core, as if looking into the bulb.
                core = tuple(min(255, c + 128) for c in color)
                draw.ellipse((u[i] - r / 2, v[i] - r / 2, u[i] + r / 2, v[i] + r / 2), fill=core)

        frame = np.asarray(img, dtype=np.uint8)

        if self.cfg.glow_enabled:
            frame = add_glow(frame, self.cfg.glow_intensity, self.cfg.glow_radius)
        if self.cfg.vignette_strength > 0:
            frame = vignette(frame, self.cfg.vignette_strength)
        return frame

    def render_sequence(
        self,
        sequence: np.ndarray,
        seconds: Optional[float] = None,
        progress_callback: Optional[Callable[[int, int], None]] = None,
    ) -> Iterator[np.ndarray]:
        """
        Yield video frames for ``sequence``.

        Args:
            sequence: (frames, N, 3) float colors.
            seconds: Video length. By default the sequence is shown exactly
                once; longer videos loop it at ``cfg.fps``.
            progress_callback: Optional callback(current_frame, total_frames).
        """
        n_frames = len(sequence)
        if seconds is None:
            indices = list(range(n_frames))
        else:
            indices = list(loop_indices(n_frames, self.cfg.fps, seconds))

        total = len(indices)
        for i, frame_index in enumerate(indices):
            angle = 2.0 * math.pi * self.cfg.orbit_turns * i / max(n_frames, 1)
            yield self.draw(sequence[frame_index], angle)
            if progress_callback:
                progress_callback(i + 1, total)
