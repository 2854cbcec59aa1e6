"""Tests for the tile and parameter endpoints."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_root_endpoint(client: AsyncClient):
    """Test root endpoint returns ok status."""
    response = await client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["service"] == "tile-synth"


@pytest.mark.asyncio
async def test_health_endpoint(client: AsyncClient):
    """Test health endpoint returns healthy status."""
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


class TestGetTile:
    """Tests for GET /tiles/{z}/{x}/{y}."""

    @pytest.mark.asyncio
    async def test_returns_feature_collection(self, client: AsyncClient):
        response = await client.get("/tiles/2/1/1")
        assert response.status_code == 200
        data = response.json()
        assert data["type"] == "FeatureCollection"
        types = {f["geometry"]["type"] for f in data["features"]}
        assert types == {"Polygon", "LineString", "Point"}
        for feature in data["features"]:
            assert list(feature["properties"]) == ["color"]
        assert "etag" in response.headers

    @pytest.mark.asyncio
    async def test_line_count_follows_feature_count(self, client: AsyncClient):
        response = await client.get("/tiles/0/0/0")
        lines = [f for f in response.json()["features"] if f["geometry"]["type"] == "LineString"]
        # Default 500 -> 168 wavy lines plus the boundary
        assert len(lines) == 169

    @pytest.mark.asyncio
    async def test_matching_etag_not_modified(self, client: AsyncClient):
        first = await client.get("/tiles/1/0/1")
        etag = first.headers["etag"]
        second = await client.get("/tiles/1/0/1", headers={"If-None-Match": etag})
        assert second.status_code == 304

    @pytest.mark.asyncio
    async def test_zoom_above_max_not_found(self, client: AsyncClient):
        response = await client.get("/tiles/16/0/0")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_column_outside_grid_not_found(self, client: AsyncClient):
        response = await client.get("/tiles/1/2/0")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_negative_row_not_found(self, client: AsyncClient):
        response = await client.get("/tiles/1/0/-1")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_invalid_generation_parameters(self, client: AsyncClient, service):
        service.loader.num_vertices = 2
        response = await client.get("/tiles/0/0/0")
        assert response.status_code == 422


class TestParameters:
    """Tests for the parameter endpoints."""

    @pytest.mark.asyncio
    async def test_list_parameters(self, client: AsyncClient):
        response = await client.get("/parameters")
        assert response.status_code == 200
        [count] = response.json()
        assert count == {
            "name": "count",
            "label": "Feature count",
            "minimum": 500,
            "maximum": 10000,
            "step": 500,
            "default": 500,
            "value": 500,
        }

    @pytest.mark.asyncio
    async def test_get_unknown_parameter(self, client: AsyncClient):
        response = await client.get("/parameters/missing")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_update_count_invalidates_tiles(self, client: AsyncClient, service):
        first = await client.get("/tiles/1/1/1")
        old_etag = first.headers["etag"]

        response = await client.put("/parameters/count", json={"value": 1000})
        assert response.status_code == 200
        assert response.json()["value"] == 1000
        assert not service.source.has_tile(1, 1, 1)

        # The old entity tag no longer matches
        second = await client.get("/tiles/1/1/1", headers={"If-None-Match": old_etag})
        assert second.status_code == 200
        assert second.headers["etag"] != old_etag
        lines = [f for f in second.json()["features"] if f["geometry"]["type"] == "LineString"]
        assert len(lines) == 334 + 1

    @pytest.mark.asyncio
    async def test_update_out_of_range(self, client: AsyncClient):
        response = await client.put("/parameters/count", json={"value": 20000})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_update_off_step(self, client: AsyncClient):
        response = await client.put("/parameters/count", json={"value": 750})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_update_unknown(self, client: AsyncClient):
        response = await client.put("/parameters/missing", json={"value": 1000})
        assert response.status_code == 404
