"""Wires the parameter registry, tile source and load adapter together."""

import logging

from tile_synth.config import Settings
from tile_synth.invalidation import CacheKey, FeatureCountListener
from tile_synth.parameters import ParameterRegistry
from tile_synth.tiles.decoder import GeoJSONDecoder
from tile_synth.tiles.grid import create_xyz_grid
from tile_synth.tiles.loader import FEATURE_COUNT_PARAMETER, TileLoadAdapter
from tile_synth.tiles.source import VectorTile, VectorTileSource

logger = logging.getLogger(__name__)


class TileService:
    """Everything needed to answer tile and parameter requests."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.parameters = ParameterRegistry()
        self.decoder = GeoJSONDecoder(
            data_projection=settings.data_projection,
            feature_projection=settings.feature_projection,
        )
        self.source = VectorTileSource(
            tile_grid=create_xyz_grid(settings.max_zoom, settings.tile_size),
            max_zoom=settings.max_zoom,
            cache_size=settings.tile_cache_size,
        )
        self.loader = TileLoadAdapter(
            source=self.source,
            parameters=self.parameters,
            decoder=self.decoder,
            seed=settings.random_seed,
            num_vertices=settings.num_vertices,
        )
        self.source.tile_load_function = self.loader

        self.parameters.register(
            FEATURE_COUNT_PARAMETER,
            "Feature count",
            (
                settings.feature_count_min,
                settings.feature_count_max,
                settings.feature_count_step,
            ),
            settings.feature_count_default,
            FeatureCountListener(self.source, CacheKey()),
        )
        logger.info(
            "Tile service ready (max_zoom=%d, feature count=%d)",
            settings.max_zoom,
            self.parameters.get_value(FEATURE_COUNT_PARAMETER),
        )

    def get_tile(self, z: int, x: int, y: int) -> VectorTile:
        return self.source.get_tile(z, x, y)
