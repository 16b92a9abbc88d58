"""Coordinate loading and sequence serialization."""

from treelights.io.coords import load_points
from treelights.io.exporter import SequenceExporter, quantize, read_sequence

__all__ = ["load_points", "SequenceExporter", "quantize", "read_sequence"]
