"""API routes for tile-synth."""

from tile_synth.routes.parameters import router as parameters_router
from tile_synth.routes.tiles import router as tiles_router

__all__ = [
    "parameters_router",
    "tiles_router",
]
