"""Tile load adapter: one synthesis and one decode per tile request."""

import logging
import random
import time

from pydantic import ValidationError

from tile_synth.geometry import BoundingBox, TileCoord
from tile_synth.parameters import ParameterRegistry
from tile_synth.synth.generator import make_data
from tile_synth.synth.types import GenerationParameters
from tile_synth.tiles.decoder import GeoJSONDecoder
from tile_synth.tiles.projection import transform_extent
from tile_synth.tiles.source import TileState, VectorTile, VectorTileSource

logger = logging.getLogger(__name__)

FEATURE_COUNT_PARAMETER = "count"

# Planar extent used when the source has no tile grid
EMPTY_EXTENT = (0.0, 0.0, 0.0, 0.0)


def split_feature_count(total: int) -> tuple[int, int, int]:
    """Split a total into (points, polygons, lines).

    Lines absorb the rounding remainder so the parts always sum to total.
    """
    count_points = total // 3
    count_polygons = total // 3
    count_lines = total - count_points - count_polygons
    return count_points, count_polygons, count_lines


def tile_seed(seed: int, tile_coord: TileCoord) -> int:
    """Derive a tile-specific seed from the configured seed."""
    # abs() keeps the seed non-negative for any input
    return abs(seed ^ (tile_coord.z * 7907 + tile_coord.x * 7919 + tile_coord.y * 7927))


class TileLoadAdapter:
    """Loads a tile by synthesizing features for its geographic extent."""

    def __init__(
        self,
        source: VectorTileSource,
        parameters: ParameterRegistry,
        decoder: GeoJSONDecoder,
        seed: int | None = None,
        num_vertices: int = 5,
    ) -> None:
        self.source = source
        self.parameters = parameters
        self.decoder = decoder
        self.seed = seed
        self.num_vertices = num_vertices

    def resolve_bbox(self, tile_coord: TileCoord) -> BoundingBox:
        """Geographic bbox of a tile, degenerate when there is no grid."""
        tile_grid = self.source.tile_grid
        if tile_grid is not None:
            extent = tile_grid.get_tile_coord_extent(tile_coord)
        else:
            logger.warning("No tile grid available for %s; using empty extent", tile_coord)
            extent = EMPTY_EXTENT
        return BoundingBox.from_extent(
            transform_extent(
                extent,
                self.decoder.feature_projection,
                self.decoder.data_projection,
            )
        )

    def make_rng(self, tile_coord: TileCoord) -> random.Random:
        if self.seed is None:
            return random.Random()
        return random.Random(tile_seed(self.seed, tile_coord))

    def __call__(self, tile: VectorTile) -> None:
        t_start = time.perf_counter()
        tile_coord = tile.tile_coord

        total = self.parameters.get_value(FEATURE_COUNT_PARAMETER)
        count_points, count_polygons, count_lines = split_feature_count(total)

        try:
            params = GenerationParameters(
                count_points=count_points,
                count_polygons=count_polygons,
                count_lines=count_lines,
                num_vertices=self.num_vertices,
                bbox=self.resolve_bbox(tile_coord),
            )
        except ValidationError as e:
            tile.set_state(TileState.ERROR)
            logger.warning("Rejected generation parameters for tile %s: %s", tile_coord, e)
            raise

        data = make_data(params, rng=self.make_rng(tile_coord))
        features = self.decoder.read_features(data.to_geojson())
        tile.set_features(features)

        logger.debug(
            "Loaded tile %s with %d features (total=%d) in %.1fms",
            tile_coord,
            len(features),
            total,
            (time.perf_counter() - t_start) * 1000,
        )
