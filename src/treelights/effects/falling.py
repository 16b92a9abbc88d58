"""
Falling layers.

The tree is sliced into equal horizontal layers. Starting from the bottom
slot, one layer at a time drops from the top of the tree until it lands on
the stack already settled below it, then waits a few frames before the
next one is released. Once the stack is full it drains away through the
floor and the cycle begins again.
"""

from dataclasses import dataclass
from typing import ClassVar, NamedTuple

import numpy as np

from treelights.core.colorwheel import hue, hue_array
from treelights.core.cycles import CycleSync
from treelights.core.points import PointCloud
from treelights.effects.base import Effect


class LayerState(NamedTuple):
    """Snapshot of the falling simulation at one instant."""

    cycle: int
    base_level: float  # top of the settled stack
    band_min: float  # bottom of the falling layer
    band_max: float  # top of the falling layer
    layer: int  # index of the falling layer


@dataclass(frozen=True)
class _FallingLayers(Effect):
    num_layers: int = 8
    fall_speed: float = 0.15  # height units per frame
    pause_frames: int = 10
    hue_step: float = 0.45

    def frames_per_cycle(self, max_height: float) -> float:
        """Nominal length of one fill-and-drain cycle."""
        layer_height = max_height / self.num_layers
        # Layer k falls (max_height - k * layer_height); the stack then drains
        # a full max_height.
        total_dist = (max_height + layer_height) * self.num_layers * 0.5 + max_height
        return self.pause_frames * (self.num_layers + 1.0) + total_dist / self.fall_speed

    def cycle(self, points: PointCloud, total_frames: int) -> CycleSync:
        return CycleSync.fit(self.frames_per_cycle(points.max_height), total_frames, self.name)

    def validate(self, points: PointCloud, total_frames: int):
        return self.cycle(points, total_frames)

    def state(self, points: PointCloud, frame_index: int, total_frames: int) -> LayerState:
        sync = self.cycle(points, total_frames)
        _, elapsed = sync.position(frame_index)

        max_height = points.max_height
        layer_height = max_height / self.num_layers

        base_level = 0.0
        band_min = 0.0
        band_max = 0.0
        current = 0
        for layer in range(self.num_layers):
            duration = (max_height - layer_height * layer) / self.fall_speed + self.pause_frames
            if elapsed < duration:
                current = layer
                band_min = max(max_height - elapsed * self.fall_speed, base_level)
                band_max = band_min + layer_height
                elapsed = 0.0
                break
            elapsed -= duration
            base_level += layer_height

        # Past the last layer: the whole stack sinks away.
        base_level -= elapsed * self.fall_speed

        return LayerState(
            cycle=sync.wrapped_cycle(frame_index),
            base_level=base_level,
            band_min=band_min,
            band_max=band_max,
            layer=current,
        )


@dataclass(frozen=True)
class FallDown(_FallingLayers):
    """Layers pile up in a single color that changes every cycle."""

    name: ClassVar[str] = "fall-down"

    def render(self, points: PointCloud, frame_index: int, total_frames: int) -> np.ndarray:
        st = self.state(points, frame_index, total_frames)
        z = points.z

        lit = (z < st.base_level) | ((z >= st.band_min) & (z < st.band_max))
        color = np.asarray(hue(st.cycle * self.hue_step), dtype=np.float64)

        return np.where(lit[:, np.newaxis], color, 0.0)


@dataclass(frozen=True)
class FallDownRainbow(_FallingLayers):
    """Every layer gets its own color, so the settled stack is a rainbow."""

    name: ClassVar[str] = "fall-down-rainbow"

    def layer_colors(self, cycle: int) -> np.ndarray:
        layers = np.arange(self.num_layers) + self.num_layers * cycle
        return hue_array(layers * self.hue_step)

    def render(self, points: PointCloud, frame_index: int, total_frames: int) -> np.ndarray:
        st = self.state(points, frame_index, total_frames)
        colors = self.layer_colors(st.cycle)
        z = points.z

        layer_height = points.max_height / self.num_layers
        if layer_height > 0:
            settled_layer = np.clip(np.floor(z / layer_height), 0, self.num_layers - 1).astype(np.int64)
        else:
            settled_layer = np.zeros(len(points), dtype=np.int64)

        settled = z < st.base_level
        falling = ~settled & (z >= st.band_min) & (z < st.band_max)

        frame = np.zeros((len(points), 3), dtype=np.float64)
        frame[settled] = colors[settled_layer[settled]]
        frame[falling] = colors[st.layer]
        return frame
