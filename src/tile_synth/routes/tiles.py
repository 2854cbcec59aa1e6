"""Tile endpoints."""

import logging

from fastapi import APIRouter, Depends, Header, HTTPException, Response, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from tile_synth.dependencies import get_tile_service
from tile_synth.geometry import TileCoord
from tile_synth.service import TileService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tiles"])


def tile_etag(key: str, tile_coord: TileCoord) -> str:
    """Entity tag for a tile; changes whenever the source key changes."""
    return f'"{key or "0"}-{tile_coord.z}-{tile_coord.x}-{tile_coord.y}"'


@router.get("/tiles/{z}/{x}/{y}")
async def get_tile(
    z: int,
    x: int,
    y: int,
    if_none_match: str | None = Header(default=None),
    service: TileService = Depends(get_tile_service),
):
    """
    Get the synthetic features of one tile as a GeoJSON FeatureCollection.

    Coordinates are in the service's feature projection.
    """
    try:
        tile_coord = TileCoord(z=z, x=x, y=y)
        service.source.validate(tile_coord)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    etag = tile_etag(service.source.key, tile_coord)
    if if_none_match == etag and service.source.has_tile(z, x, y):
        return Response(status_code=status.HTTP_304_NOT_MODIFIED, headers={"ETag": etag})

    try:
        tile = service.get_tile(z, x, y)
    except ValidationError as e:
        logger.warning("Tile %s could not be generated: %s", tile_coord, e)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Invalid generation parameters for tile {tile_coord}",
        )

    return JSONResponse(
        content={
            "type": "FeatureCollection",
            "features": [f.to_geojson() for f in tile.features],
        },
        headers={"ETag": etag},
    )
