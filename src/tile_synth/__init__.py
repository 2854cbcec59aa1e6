"""Synthetic vector tiles for exercising tile-based spatial pipelines."""

from tile_synth.geometry import BoundingBox, TileCoord

__version__ = "0.1.0"
__all__ = ["BoundingBox", "TileCoord"]
