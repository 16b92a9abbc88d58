"""Offline video previews of generated sequences."""

from treelights.preview.encoder import encode_video
from treelights.preview.playback import PlaybackClock
from treelights.preview.render import PreviewConfig, TreePreviewRenderer

__all__ = ["encode_video", "PlaybackClock", "PreviewConfig", "TreePreviewRenderer"]
