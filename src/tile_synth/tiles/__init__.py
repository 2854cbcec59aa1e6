"""Tile grid, reprojection, decoding, caching and loading."""

from tile_synth.tiles.decoder import DecodedFeature, GeoJSONDecoder
from tile_synth.tiles.grid import TileGrid, create_xyz_grid
from tile_synth.tiles.loader import TileLoadAdapter, split_feature_count
from tile_synth.tiles.projection import transform_extent
from tile_synth.tiles.source import TileState, VectorTile, VectorTileSource

__all__ = [
    "DecodedFeature",
    "GeoJSONDecoder",
    "TileGrid",
    "TileLoadAdapter",
    "TileState",
    "VectorTile",
    "VectorTileSource",
    "create_xyz_grid",
    "split_feature_count",
    "transform_extent",
]
