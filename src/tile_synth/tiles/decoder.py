"""GeoJSON decoding into shapely features in the tile's feature projection."""

import logging
from dataclasses import dataclass, field
from typing import Any

from shapely.errors import GEOSException
from shapely.geometry import mapping, shape
from shapely.geometry.base import BaseGeometry
from shapely.ops import transform

from tile_synth.tiles.projection import get_transformer

logger = logging.getLogger(__name__)

SUPPORTED_GEOMETRY_TYPES = frozenset({"Point", "LineString", "Polygon"})


@dataclass
class DecodedFeature:
    """A feature ready to be attached to a tile."""

    geometry: BaseGeometry
    properties: dict[str, Any] = field(default_factory=dict)

    def to_geojson(self) -> dict[str, Any]:
        return {
            "type": "Feature",
            "properties": dict(self.properties),
            "geometry": mapping(self.geometry),
        }


class GeoJSONDecoder:
    """Reads GeoJSON feature collections into DecodedFeature objects.

    Coordinates are read in ``data_projection`` and reprojected into
    ``feature_projection``.
    """

    def __init__(
        self,
        data_projection: str = "EPSG:4326",
        feature_projection: str = "EPSG:3857",
    ) -> None:
        self.data_projection = data_projection
        self.feature_projection = feature_projection

    def read_features(self, data: dict[str, Any]) -> list[DecodedFeature]:
        """Decode a FeatureCollection, preserving feature order.

        Raises:
            ValueError: If the document is not a FeatureCollection of
                Point, LineString and Polygon features.
        """
        if not isinstance(data, dict) or data.get("type") != "FeatureCollection":
            raise ValueError("Expected a GeoJSON FeatureCollection")
        raw_features = data.get("features")
        if not isinstance(raw_features, list):
            raise ValueError("FeatureCollection.features must be a list")
        return [self.read_feature(f) for f in raw_features]

    def read_feature(self, data: dict[str, Any]) -> DecodedFeature:
        if not isinstance(data, dict) or data.get("type") != "Feature":
            raise ValueError("Expected a GeoJSON Feature")
        geometry = data.get("geometry") or {}
        geom_type = geometry.get("type")
        if geom_type not in SUPPORTED_GEOMETRY_TYPES:
            raise ValueError(f"Unsupported geometry type: {geom_type}")
        try:
            geom = shape(geometry)
        except (GEOSException, ValueError, TypeError, IndexError) as e:
            raise ValueError(f"Invalid {geom_type} geometry: {e}") from e
        return DecodedFeature(
            geometry=self._reproject(geom),
            properties=dict(data.get("properties") or {}),
        )

    def _reproject(self, geom: BaseGeometry) -> BaseGeometry:
        if self.data_projection == self.feature_projection:
            return geom
        transformer = get_transformer(self.data_projection, self.feature_projection)
        return transform(transformer.transform, geom)
