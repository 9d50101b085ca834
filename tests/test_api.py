"""Tests for the FastAPI application."""

import pytest
from fastapi.testclient import TestClient

from blockpalette import config
from blockpalette.api.dependencies import get_catalog
from blockpalette.api.main import app


@pytest.fixture
def client(catalog):
    app.dependency_overrides[get_catalog] = lambda: catalog
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealth:
    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "online"


class TestBlocks:
    def test_list_by_pattern(self, client):
        response = client.get("/api/blocks", params={"pattern": "*_wool"})
        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 16
        assert all(block["family"] == "wool" for block in data["blocks"])

    def test_limit_and_sort(self, client):
        data = client.get("/api/blocks", params={"colored": True, "sort": "name", "limit": 5}).json()
        ids = [block["id"] for block in data["blocks"]]
        assert len(ids) == 5
        assert ids == sorted(ids)

    def test_similar_to(self, client):
        data = client.get(
            "/api/blocks", params={"similar_to": "#A12723", "tolerance": 0.0}
        ).json()
        assert [block["id"] for block in data["blocks"]] == ["minecraft:red_wool"]
        assert data["blocks"][0]["color"] == "#A12723"

    @pytest.mark.parametrize("value", ["zzz", "-FFFFF", "FF_FFF"])
    def test_bad_color(self, client, value):
        assert client.get("/api/blocks", params={"similar_to": value}).status_code == 400

    def test_similar_to_uses_default_tolerance(self, client, catalog):
        target = catalog.get("minecraft:red_wool").color
        expected = (
            catalog.query()
            .similar_to_color(target, config.DEFAULT_COLOR_TOLERANCE)
            .sort_by_color_similarity(target)
            .ids()
        )
        data = client.get("/api/blocks", params={"similar_to": "#A12723"}).json()
        assert [block["id"] for block in data["blocks"]] == expected

    def test_unknown_filter_preset(self, client):
        assert client.get("/api/blocks", params={"filter": "shiny"}).status_code == 422


class TestGradient:
    def test_between_colors(self, client):
        response = client.post(
            "/api/gradient", json={"start_color": "#FF0000", "end_color": "#0000FF", "steps": 5}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["requested_steps"] == 5
        ids = [block["id"] for block in data["blocks"]]
        assert len(ids) == 5
        assert len(set(ids)) == 5

    def test_between_blocks(self, client):
        response = client.post(
            "/api/gradient",
            json={
                "start_block": "minecraft:white_concrete",
                "end_block": "minecraft:black_concrete",
                "steps": 4,
                "filter": "solid",
            },
        )
        assert response.status_code == 200
        ids = [block["id"] for block in response.json()["blocks"]]
        assert ids[0] == "minecraft:white_concrete"
        assert ids[-1] == "minecraft:black_concrete"

    def test_missing_endpoints(self, client):
        assert client.post("/api/gradient", json={"steps": 5}).status_code == 400

    def test_unknown_block(self, client):
        response = client.post(
            "/api/gradient",
            json={"start_block": "minecraft:nope", "end_block": "minecraft:stone"},
        )
        assert response.status_code == 404

    def test_steps_validated(self, client):
        response = client.post(
            "/api/gradient",
            json={"start_color": "#FF0000", "end_color": "#0000FF", "steps": 1000},
        )
        assert response.status_code == 422


class TestPalettes:
    def test_themes(self, client):
        data = client.get("/api/palettes/themes").json()
        assert "forest" in data["natural"]
        assert "medieval" in data["architectural"]
        assert "sunset" in data["gradients"]

    def test_natural(self, client):
        response = client.get("/api/palettes/natural/forest")
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Forest Biome"
        assert data["blocks"][0]["role"] == "Primary"

    def test_unknown_theme(self, client):
        assert client.get("/api/palettes/natural/atlantis").status_code == 404

    def test_architectural(self, client):
        assert client.get("/api/palettes/architectural/medieval").status_code == 200

    def test_gradient_theme(self, client):
        data = client.get("/api/palettes/gradient/ocean", params={"steps": 6}).json()
        assert len(data["blocks"]) == 6

    def test_monochrome(self, client):
        response = client.get("/api/palettes/monochrome/minecraft:red_wool", params={"steps": 5})
        assert response.status_code == 200
        assert len(response.json()["blocks"]) == 5

    def test_uncolored_block(self, client):
        assert client.get("/api/palettes/monochrome/minecraft:repeater").status_code == 404
        assert client.get("/api/palettes/complementary/minecraft:nope").status_code == 404

    def test_complementary(self, client):
        data = client.get("/api/palettes/complementary/minecraft:blue_wool").json()
        assert data["theme"] == "Complementary"
        assert len(data["blocks"]) == 4
