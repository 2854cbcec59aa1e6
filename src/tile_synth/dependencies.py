"""FastAPI dependencies."""

from functools import lru_cache

from tile_synth.config import settings
from tile_synth.service import TileService


@lru_cache(maxsize=1)
def get_tile_service() -> TileService:
    """Process-wide tile service, created on first use."""
    return TileService(settings)
