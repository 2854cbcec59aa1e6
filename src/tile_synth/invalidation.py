"""Tile cache invalidation when the feature count changes."""

import logging
import time

from tile_synth.tiles.source import VectorTileSource

logger = logging.getLogger(__name__)


class CacheKey:
    """Issues strictly increasing cache-busting keys.

    Keys are the wall clock in milliseconds. If the clock has not moved
    past the previous key, the previous key plus one is issued instead.
    """

    def __init__(self, clock=time.time_ns) -> None:
        self._clock = clock
        self._last = -1

    def next(self) -> str:
        now_ms = self._clock() // 1_000_000
        self._last = max(now_ms, self._last + 1)
        return str(self._last)


class FeatureCountListener:
    """Invalidates a tile source when the feature count is changed.

    The initial registration pass is ignored.
    """

    def __init__(self, source: VectorTileSource, cache_key: CacheKey | None = None) -> None:
        self.source = source
        self.cache_key = cache_key or CacheKey()

    def __call__(self, value: int, initial: bool) -> None:
        if initial:
            return
        logger.info("Feature count set to %d; invalidating tiles", value)
        self.source.refresh()
        # refresh() does not reach caches keyed on the source key
        self.source.set_key(self.cache_key.next())
