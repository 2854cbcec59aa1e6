"""Tests for geometry schemas and generation parameter validation."""

import math

import pytest
from pydantic import ValidationError

from tile_synth.geometry import BoundingBox, TileCoord
from tile_synth.synth import FeatureKind, GenerationParameters
from tile_synth.synth.types import Feature, FeatureCollection


class TestBoundingBox:
    """Tests for BoundingBox validation and derived values."""

    def test_derived_values(self):
        bbox = BoundingBox(min_lon=-10.0, min_lat=20.0, max_lon=30.0, max_lat=60.0)
        assert bbox.width == 40.0
        assert bbox.height == 40.0
        assert bbox.center_lon == 10.0
        assert bbox.center_lat == 40.0

    def test_from_extent_round_trip(self):
        bbox = BoundingBox.from_extent([1.0, 2.0, 3.0, 4.0])
        assert bbox.as_tuple() == (1.0, 2.0, 3.0, 4.0)

    def test_from_extent_wrong_length(self):
        with pytest.raises(ValueError):
            BoundingBox.from_extent([1.0, 2.0, 3.0])

    def test_zero_area_allowed(self):
        bbox = BoundingBox(min_lon=5.0, min_lat=5.0, max_lon=5.0, max_lat=5.0)
        assert bbox.width == 0.0
        assert bbox.height == 0.0

    def test_inverted_longitude_rejected(self):
        with pytest.raises(ValidationError):
            BoundingBox(min_lon=2.0, min_lat=0.0, max_lon=1.0, max_lat=1.0)

    def test_inverted_latitude_rejected(self):
        with pytest.raises(ValidationError):
            BoundingBox(min_lon=0.0, min_lat=2.0, max_lon=1.0, max_lat=1.0)

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_rejected(self, bad):
        with pytest.raises(ValidationError):
            BoundingBox(min_lon=bad, min_lat=0.0, max_lon=1.0, max_lat=1.0)


class TestTileCoord:
    """Tests for TileCoord."""

    def test_str(self):
        assert str(TileCoord(z=3, x=1, y=2)) == "3/1/2"

    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            TileCoord(z=1, x=-1, y=0)

    def test_hashable(self):
        assert {TileCoord(z=1, x=0, y=0): "a"}[TileCoord(z=1, x=0, y=0)] == "a"


class TestGenerationParameters:
    """Tests for input validation before synthesis."""

    @pytest.fixture
    def bbox(self):
        return BoundingBox(min_lon=0.0, min_lat=0.0, max_lon=1.0, max_lat=1.0)

    def test_valid(self, bbox):
        params = GenerationParameters(
            count_points=166, count_polygons=166, count_lines=168, num_vertices=5, bbox=bbox
        )
        assert params.num_vertices == 5

    def test_two_vertices_rejected(self, bbox):
        with pytest.raises(ValidationError):
            GenerationParameters(
                count_points=4, count_polygons=4, count_lines=2, num_vertices=2, bbox=bbox
            )

    @pytest.mark.parametrize("field", ["count_points", "count_polygons", "count_lines"])
    def test_negative_count_rejected(self, bbox, field):
        counts = {"count_points": 1, "count_polygons": 1, "count_lines": 1}
        counts[field] = -1
        with pytest.raises(ValidationError):
            GenerationParameters(num_vertices=5, bbox=bbox, **counts)

    def test_zero_counts_allowed(self, bbox):
        params = GenerationParameters(
            count_points=0, count_polygons=0, count_lines=0, num_vertices=3, bbox=bbox
        )
        assert params.count_lines == 0


class TestFeatureCollection:
    """Tests for FeatureCollection helpers."""

    def test_counts_and_geojson(self):
        collection = FeatureCollection(
            features=[
                Feature(
                    kind=FeatureKind.GRID_POINT,
                    geometry={"type": "Point", "coordinates": [1.0, 2.0]},
                    properties={"color": "#ff0000"},
                ),
                Feature(
                    kind=FeatureKind.BOUNDARY,
                    geometry={"type": "LineString", "coordinates": [[0.0, 0.0], [1.0, 1.0]]},
                    properties={"color": "#00ff00"},
                ),
            ]
        )
        assert len(collection) == 2
        assert collection.count(FeatureKind.GRID_POINT) == 1
        assert collection.count(FeatureKind.WAVY_LINE) == 0
        data = collection.to_geojson()
        assert data["features"][0] == {
            "type": "Feature",
            "properties": {"color": "#ff0000"},
            "geometry": {"type": "Point", "coordinates": [1.0, 2.0]},
        }
