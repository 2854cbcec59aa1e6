"""Type definitions for synthetic feature generation."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from tile_synth.geometry import BoundingBox

# Wavy line sampling: samples per period and periods per line
CURVE_COMPLEXITY = 2
PERIOD_COUNT = 6


class FeatureKind(str, Enum):
    """Which generation step produced a feature."""

    GRID_POLYGON = "grid_polygon"
    BOUNDARY = "boundary"
    GRID_POINT = "grid_point"
    WAVY_LINE = "wavy_line"


class GenerationParameters(BaseModel):
    """Inputs for one synthesis call.

    Built fresh per tile request. Constructing it is the validation step:
    negative counts, fewer than 3 polygon vertices and malformed boxes all
    fail here, before any geometry exists.
    """

    count_points: int = Field(..., ge=0)
    count_polygons: int = Field(..., ge=0)
    count_lines: int = Field(..., ge=0)
    num_vertices: int = Field(default=5, ge=3)
    bbox: BoundingBox


@dataclass
class Feature:
    """A single synthesized feature in GeoJSON-like form."""

    kind: FeatureKind
    geometry: dict[str, Any]  # GeoJSON geometry
    properties: dict[str, Any] = field(default_factory=dict)

    @property
    def coordinates(self) -> list:
        return self.geometry["coordinates"]

    def to_geojson(self) -> dict[str, Any]:
        return {
            "type": "Feature",
            "properties": dict(self.properties),
            "geometry": self.geometry,
        }


@dataclass
class FeatureCollection:
    """Ordered features produced by one synthesis call."""

    features: list[Feature] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.features)

    def __iter__(self):
        return iter(self.features)

    def of_kind(self, kind: FeatureKind) -> list[Feature]:
        return [f for f in self.features if f.kind == kind]

    def count(self, kind: FeatureKind) -> int:
        return len(self.of_kind(kind))

    def to_geojson(self) -> dict[str, Any]:
        """Convert to a GeoJSON FeatureCollection."""
        return {
            "type": "FeatureCollection",
            "features": [f.to_geojson() for f in self.features],
        }
