"""Runtime parameter endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from tile_synth.dependencies import get_tile_service
from tile_synth.schemas import ParameterState, ParameterUpdate
from tile_synth.service import TileService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/parameters", tags=["parameters"])


@router.get("", response_model=list[ParameterState])
async def list_parameters(
    service: TileService = Depends(get_tile_service),
) -> list[ParameterState]:
    """List all runtime parameters with their ranges and current values."""
    return [ParameterState.from_parameter(p) for p in service.parameters]


@router.get("/{name}", response_model=ParameterState)
async def get_parameter(
    name: str,
    service: TileService = Depends(get_tile_service),
) -> ParameterState:
    """Get a single parameter."""
    if name not in service.parameters:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Parameter {name} not found",
        )
    return ParameterState.from_parameter(service.parameters.get(name))


@router.put("/{name}", response_model=ParameterState)
async def update_parameter(
    name: str,
    update: ParameterUpdate,
    service: TileService = Depends(get_tile_service),
) -> ParameterState:
    """
    Set a parameter value.

    Changing the feature count invalidates every cached tile.
    """
    if name not in service.parameters:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Parameter {name} not found",
        )
    try:
        service.parameters.set_value(name, update.value)
    except ValueError as e:
        logger.warning("Rejected update of %s to %s: %s", name, update.value, e)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )
    return ParameterState.from_parameter(service.parameters.get(name))
