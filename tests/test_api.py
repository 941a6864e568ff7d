"""Tests for the HTTP API."""
import pytest


class TestHealth:

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}
        assert client.get("/api/v1/health").json() == {"status": "ok"}


class TestCoordinatesEndpoint:

    def test_match(self, client):
        response = client.get("/api/v1/maps/coordinates", params={"url": "https://maps.google.com/@50.0755,14.4378,15z"})
        assert response.status_code == 200
        assert response.json() == {"matched": True, "lat": 50.0755, "lng": 14.4378}

    @pytest.mark.parametrize("url", ["", "https://example.com/no-coords-here", "?x=200&y=50"])
    def test_no_match_is_not_an_error(self, client, url):
        response = client.get("/api/v1/maps/coordinates", params={"url": url})
        assert response.status_code == 200
        assert response.json() == {"matched": False, "lat": None, "lng": None}

    def test_missing_url_parameter(self, client):
        assert client.get("/api/v1/maps/coordinates").json()["matched"] is False


class TestLocationsApi:

    def test_requires_user(self, client):
        assert client.get("/api/v1/locations").status_code == 401

    def test_create_and_get(self, client, user_headers, sample_location_data):
        response = client.post("/api/v1/locations", json=sample_location_data, headers=user_headers)
        assert response.status_code == 201
        location_id = response.json()["location"]["id"]

        detail = client.get(f"/api/v1/locations/{location_id}", headers=user_headers).json()
        assert detail["location"]["main_photo_url"] == "https://example.com/castle-2.jpg"
        assert detail["map"]["lat"] == 50.0911
        assert detail["map"]["lng"] == 14.4003
        assert [link["key"] for link in detail["links"]] == ["web", "facebook", "map"]

    def test_create_with_category(self, client, user_headers):
        category = client.post("/api/v1/categories", json={"name": "Castle"}).json()
        response = client.post(
            "/api/v1/locations",
            json={"name": "Bouzov", "category_id": category["id"]},
            headers=user_headers,
        )
        assert response.json()["location"]["category_name"] == "Castle"

    def test_create_invalid(self, client, user_headers):
        assert client.post("/api/v1/locations", json={"name": ""}, headers=user_headers).status_code == 422
        assert client.post(
            "/api/v1/locations", json={"name": "X", "category_id": 99}, headers=user_headers,
        ).status_code == 422

    def test_overlong_map_url_rejected(self, client, user_headers):
        url = "https://example.com/?q=" + "1" * 2000
        response = client.post("/api/v1/locations", json={"name": "Lipno", "map_url": url}, headers=user_headers)
        assert response.status_code == 422

        location_id = client.post("/api/v1/locations", json={"name": "Lipno"}, headers=user_headers).json()["location"]["id"]
        response = client.patch(f"/api/v1/locations/{location_id}", json={"map_url": url}, headers=user_headers)
        assert response.status_code == 422

    def test_list_is_per_user(self, client, user_headers, other_user_headers, sample_location_data):
        client.post("/api/v1/locations", json=sample_location_data, headers=user_headers)
        client.post("/api/v1/locations", json={"name": "Lipno"}, headers=other_user_headers)

        body = client.get("/api/v1/locations", headers=user_headers).json()
        assert body["total"] == 1
        assert body["items"][0]["name"] == "Prague Castle"

    def test_get_other_users_location(self, client, user_headers, other_user_headers):
        location_id = client.post("/api/v1/locations", json={"name": "Lipno"}, headers=user_headers).json()["location"]["id"]
        assert client.get(f"/api/v1/locations/{location_id}", headers=other_user_headers).status_code == 404

    def test_map_null_without_coordinates(self, client, user_headers):
        body = client.post(
            "/api/v1/locations",
            json={"name": "Lipno", "map_url": "https://example.com/no-coords-here"},
            headers=user_headers,
        ).json()
        assert body["map"] is None

    def test_patch(self, client, user_headers):
        location_id = client.post("/api/v1/locations", json={"name": "Lipno"}, headers=user_headers).json()["location"]["id"]
        response = client.patch(
            f"/api/v1/locations/{location_id}",
            json={"visited": True, "map_url": "https://example.com/?ll=48.63,14.23"},
            headers=user_headers,
        )
        assert response.status_code == 200
        body = response.json()
        assert body["location"]["visited"] is True
        assert body["location"]["name"] == "Lipno"
        assert body["map"]["lat"] == 48.63

    def test_patch_missing(self, client, user_headers):
        assert client.patch("/api/v1/locations/99", json={"visited": True}, headers=user_headers).status_code == 404


class TestRemoveLocationApi:

    def create(self, client, headers):
        return client.post("/api/v1/locations", json={"name": "Lipno"}, headers=headers).json()["location"]["id"]

    def test_without_confirmation(self, client, user_headers):
        location_id = self.create(client, user_headers)
        response = client.delete(f"/api/v1/locations/{location_id}", headers=user_headers)
        assert response.json() == {"success": False, "error": None}
        assert client.get(f"/api/v1/locations/{location_id}", headers=user_headers).status_code == 200

    def test_confirmed(self, client, user_headers):
        location_id = self.create(client, user_headers)
        response = client.delete(f"/api/v1/locations/{location_id}", params={"confirm": True}, headers=user_headers)
        assert response.json() == {"success": True, "error": None}
        assert client.get(f"/api/v1/locations/{location_id}", headers=user_headers).status_code == 404

    def test_signed_out(self, client, user_headers):
        location_id = self.create(client, user_headers)
        response = client.delete(f"/api/v1/locations/{location_id}", params={"confirm": True})
        assert response.status_code == 200
        assert response.json() == {"success": False, "error": "User is not signed in"}

    def test_not_found(self, client, user_headers):
        response = client.delete("/api/v1/locations/99", params={"confirm": True}, headers=user_headers)
        assert response.status_code == 404


class TestCategoriesApi:

    def test_create_and_list(self, client):
        client.post("/api/v1/categories", json={"name": "Lake"})
        client.post("/api/v1/categories", json={"name": "Castle"})
        assert [c["name"] for c in client.get("/api/v1/categories").json()] == ["Castle", "Lake"]

    def test_duplicate(self, client):
        client.post("/api/v1/categories", json={"name": "Lake"})
        assert client.post("/api/v1/categories", json={"name": "Lake"}).status_code == 422
