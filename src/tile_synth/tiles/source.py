"""Vector tile source: tile cache, load dispatch, refresh and cache key."""

import logging
from collections import OrderedDict
from collections.abc import Callable
from enum import Enum

from tile_synth.geometry import TileCoord
from tile_synth.tiles.decoder import DecodedFeature
from tile_synth.tiles.grid import TileGrid

logger = logging.getLogger(__name__)


class TileState(str, Enum):
    """Lifecycle of a tile."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


class VectorTile:
    """One tile and the features attached to it."""

    def __init__(self, tile_coord: TileCoord, key: str = "") -> None:
        self.tile_coord = tile_coord
        self.key = key
        self.state = TileState.IDLE
        self.features: list[DecodedFeature] = []

    def set_state(self, state: TileState) -> None:
        self.state = state

    def set_features(self, features: list[DecodedFeature]) -> None:
        """Attach a complete feature set and mark the tile loaded."""
        self.features = list(features)
        self.state = TileState.LOADED

    def __repr__(self) -> str:
        return f"VectorTile({self.tile_coord}, state={self.state.value}, features={len(self.features)})"


TileLoadFunction = Callable[[VectorTile], None]
ChangeListener = Callable[["VectorTileSource"], None]


class VectorTileSource:
    """Serves tiles from an LRU cache, loading misses on demand.

    ``refresh()`` drops every cached tile. ``set_key()`` changes the key
    consumers use to tell fresh tiles from ones they cached themselves;
    a cached tile loaded under an older key is reloaded.
    """

    def __init__(
        self,
        tile_grid: TileGrid | None = None,
        tile_load_function: TileLoadFunction | None = None,
        max_zoom: int = 15,
        cache_size: int = 128,
        url: str = "{z}/{x}/{y}",
    ) -> None:
        self.tile_grid = tile_grid
        self.tile_load_function = tile_load_function
        self.max_zoom = max_zoom
        self.cache_size = cache_size
        self.url = url
        self.key = ""
        self.revision = 0
        self._tiles: OrderedDict[TileCoord, VectorTile] = OrderedDict()
        self._listeners: list[ChangeListener] = []

    def on_change(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)

    def _changed(self) -> None:
        self.revision += 1
        for listener in self._listeners:
            listener(self)

    def get_tile_url(self, tile_coord: TileCoord) -> str:
        return self.url.format(z=tile_coord.z, x=tile_coord.x, y=tile_coord.y)

    def validate(self, tile_coord: TileCoord) -> None:
        """Raise ValueError for coordinates this source cannot serve."""
        if tile_coord.z > self.max_zoom:
            raise ValueError(f"Zoom {tile_coord.z} exceeds max zoom {self.max_zoom}")
        if self.tile_grid is not None:
            self.tile_grid.validate(tile_coord)

    def get_tile(self, z: int, x: int, y: int) -> VectorTile:
        """Return the tile at (z, x, y), loading it if needed."""
        tile_coord = TileCoord(z=z, x=x, y=y)
        self.validate(tile_coord)

        cached = self._tiles.get(tile_coord)
        if cached is not None and cached.key == self.key and cached.state == TileState.LOADED:
            self._tiles.move_to_end(tile_coord)
            return cached

        tile = VectorTile(tile_coord, key=self.key)
        self._load(tile)
        self._tiles[tile_coord] = tile
        self._tiles.move_to_end(tile_coord)
        while len(self._tiles) > self.cache_size:
            self._tiles.popitem(last=False)
        return tile

    def _load(self, tile: VectorTile) -> None:
        if self.tile_load_function is None:
            raise RuntimeError("No tile load function configured")
        tile.set_state(TileState.LOADING)
        try:
            self.tile_load_function(tile)
        except Exception:
            tile.set_state(TileState.ERROR)
            raise

    def has_tile(self, z: int, x: int, y: int) -> bool:
        return TileCoord(z=z, x=x, y=y) in self._tiles

    def cached_tile_count(self) -> int:
        return len(self._tiles)

    def refresh(self) -> None:
        """Discard all cached tiles so the next requests load them again."""
        discarded = len(self._tiles)
        self._tiles.clear()
        logger.info("Tile source refreshed; discarded %d cached tiles", discarded)
        self._changed()

    def set_key(self, key: str) -> None:
        if key == self.key:
            return
        self.key = key
        logger.debug("Tile source key set to %s", key)
        self._changed()
