"""Tests for the vehicle endpoints."""

from unittest.mock import patch

import pytest

from backend.shared.models import Vehicle
from backend.shared.repositories.catalog_repository import vehicle_repository

NEW_VEHICLE = {
    "name": "Liebherr LTM 1050",
    "description": "All-terrain mobile crane, 50 t capacity",
    "category": "crane",
    "type": "mobile crane",
    "model": "LTM 1050-3.1",
    "year": 2018,
    "pricePerHour": 180,
    "pricePerDay": 1300,
    "city": "Houston",
    "state": "Texas",
}


@pytest.fixture
def owner(seed):
    user = seed.user(email="owner@example.com", role="partner")
    return seed.partner(user_id=user.id)


@pytest.fixture
def rival(seed):
    user = seed.user(email="rival@example.com", role="partner")
    return seed.partner(business_name="Rival Hire", user_id=user.id)


@pytest.fixture
def owner_headers(owner, auth_headers):
    return auth_headers(owner.user_id, partner_id=owner.id)


@pytest.fixture
def rival_headers(rival, auth_headers):
    return auth_headers(rival.user_id, partner_id=rival.id)


class TestListVehicles:
    """Tests for GET /api/vehicles."""

    def test_filtered_second_page(self, client, seed, owner):
        for i in range(25):
            seed.vehicle(owner, name=f"Excavator {i}", price_per_hour=50 + i * 6)
        seed.vehicle(owner, name="Tipper", category="truck", price_per_hour=100)
        seed.vehicle(owner, name="Idle excavator", status="inactive")

        response = client.get(
            "/api/vehicles",
            params={"category": "excavator", "minPriceHour": 50, "maxPriceHour": 200, "page": 2, "limit": 10},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["pagination"] == {"page": 2, "limit": 10, "total": 25, "pages": 3}
        assert len(body["data"]) == 10
        assert all(item["category"] == "excavator" for item in body["data"])

    def test_items_use_camel_case_and_carry_owner(self, client, seed, owner):
        seed.vehicle(owner)

        item = client.get("/api/vehicles").json()["data"][0]

        assert item["pricePerHour"] == 100.0
        assert item["ownerId"] == owner.id
        assert item["owner"]["businessName"] == "Acme Rentals"
        assert "price_per_hour" not in item

    def test_empty_catalog(self, client):
        body = client.get("/api/vehicles").json()

        assert body == {"success": True, "data": [], "pagination": {"page": 1, "limit": 10, "total": 0, "pages": 0}}

    def test_location_and_search(self, client, seed, owner):
        seed.vehicle(owner, name="Austin loader", category="loader", city="Austin")
        seed.vehicle(owner, name="Denver loader", category="loader", city="Denver", state="Colorado")

        by_city = client.get("/api/vehicles", params={"city": "den"}).json()
        by_search = client.get("/api/vehicles", params={"search": "austin"}).json()

        assert [v["name"] for v in by_city["data"]] == ["Denver loader"]
        assert [v["name"] for v in by_search["data"]] == ["Austin loader"]

    @pytest.mark.parametrize("params,field", [
        ({"limit": 0}, "limit"),
        ({"limit": 101}, "limit"),
        ({"page": 0}, "page"),
        ({"page": 10 ** 19}, "page"),
        ({"category": "spaceship"}, "category"),
        ({"minPriceHour": -1}, "minPriceHour"),
        ({"search": ""}, "search"),
    ])
    def test_invalid_query_parameters(self, client, params, field):
        response = client.get("/api/vehicles", params=params)

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Validation failed"
        assert {"field": field, "location": "query"}.items() <= body["errors"][0].items()

    def test_unexpected_failure_is_generic_500(self, unsafe_client):
        with patch.object(vehicle_repository, "search", side_effect=RuntimeError("connection refused")):
            response = unsafe_client.get("/api/vehicles")

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Internal server error"}

    def test_request_id_header(self, client):
        response = client.get("/api/vehicles", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"


class TestGetVehicle:
    """Tests for GET /api/vehicles/{id}."""

    def test_found(self, client, seed, owner):
        vehicle = seed.vehicle(owner)

        response = client.get(f"/api/vehicles/{vehicle.id}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["id"] == vehicle.id
        assert data["owner"]["id"] == owner.id
        assert data["owner"]["contact"] == {"phone": "555-0199"}

    def test_inactive_vehicle_still_readable_by_id(self, client, seed, owner):
        vehicle = seed.vehicle(owner, status="maintenance")

        assert client.get(f"/api/vehicles/{vehicle.id}").json()["data"]["status"] == "maintenance"

    def test_not_found(self, client):
        response = client.get("/api/vehicles/9999")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Vehicle not found"}


class TestCreateVehicle:
    """Tests for POST /api/vehicles."""

    def test_partner_creates_vehicle(self, client, owner, owner_headers):
        response = client.post("/api/vehicles", json=NEW_VEHICLE, headers=owner_headers)

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Vehicle created successfully"
        assert body["data"]["ownerId"] == owner.id
        assert body["data"]["owner"]["businessName"] == "Acme Rentals"
        assert body["data"]["status"] == "active"

    def test_owner_cannot_be_supplied(self, client, owner, rival, owner_headers):
        payload = dict(NEW_VEHICLE, ownerId=rival.id, id=77)

        data = client.post("/api/vehicles", json=payload, headers=owner_headers).json()["data"]

        assert data["ownerId"] == owner.id
        assert data["id"] != 77

    def test_requires_token(self, client):
        response = client.post("/api/vehicles", json=NEW_VEHICLE)

        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "No token, authorization denied"}

    def test_requires_partner(self, client, seed, auth_headers):
        customer = seed.user(email="customer@example.com")

        response = client.post("/api/vehicles", json=NEW_VEHICLE, headers=auth_headers(customer.id))

        assert response.status_code == 403
        assert response.json()["message"] == "Access denied. Partner account required"

    @pytest.mark.parametrize("change,field", [
        ({"year": 1985}, "year"),
        ({"year": 2999}, "year"),
        ({"name": "X"}, "name"),
        ({"description": "short"}, "description"),
        ({"pricePerDay": -10}, "pricePerDay"),
        ({"category": "boat"}, "category"),
    ])
    def test_validation(self, client, owner_headers, fresh_session, change, field):
        response = client.post("/api/vehicles", json=dict(NEW_VEHICLE, **change), headers=owner_headers)

        assert response.status_code == 400
        assert field in [error["field"] for error in response.json()["errors"]]
        assert fresh_session().query(Vehicle).count() == 0


class TestUpdateVehicle:
    """Tests for PUT /api/vehicles/{id}."""

    def test_partial_update(self, client, seed, owner, owner_headers):
        vehicle = seed.vehicle(owner)

        response = client.put(f"/api/vehicles/{vehicle.id}", json={"pricePerHour": 125}, headers=owner_headers)

        assert response.status_code == 200
        data = response.json()["data"]
        assert response.json()["message"] == "Vehicle updated successfully"
        assert data["pricePerHour"] == 125
        assert data["name"] == vehicle.name
        assert data["pricePerDay"] == vehicle.price_per_day

    def test_owner_field_is_not_updatable(self, client, seed, owner, rival, owner_headers):
        vehicle = seed.vehicle(owner)

        data = client.put(
            f"/api/vehicles/{vehicle.id}", json={"ownerId": rival.id, "city": "Waco"}, headers=owner_headers
        ).json()["data"]

        assert data["ownerId"] == owner.id
        assert data["city"] == "Waco"

    @pytest.mark.parametrize("payload", [{"pricePerHour": 1}, {"pricePerHour": -1, "year": 1900}])
    def test_non_owner_is_forbidden_whatever_the_payload(self, client, seed, owner, rival_headers, payload):
        vehicle = seed.vehicle(owner)

        response = client.put(f"/api/vehicles/{vehicle.id}", json=payload, headers=rival_headers)

        assert response.status_code == 403
        assert response.json() == {"success": False, "message": "Not authorized to update this vehicle"}

    def test_invalid_payload_from_owner(self, client, seed, owner, owner_headers, fresh_session):
        vehicle = seed.vehicle(owner)

        response = client.put(f"/api/vehicles/{vehicle.id}", json={"pricePerHour": -1}, headers=owner_headers)

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "pricePerHour"
        assert fresh_session().get(Vehicle, vehicle.id).price_per_hour == vehicle.price_per_hour

    def test_missing_vehicle(self, client, owner_headers):
        response = client.put("/api/vehicles/424242", json={"pricePerHour": 10}, headers=owner_headers)

        assert response.status_code == 404


class TestDeleteVehicle:
    """Tests for DELETE /api/vehicles/{id}."""

    def test_non_owner_is_forbidden_and_record_remains(self, client, seed, owner, rival_headers, fresh_session):
        vehicle = seed.vehicle(owner)

        response = client.delete(f"/api/vehicles/{vehicle.id}", headers=rival_headers)

        assert response.status_code == 403
        assert response.json()["message"] == "Not authorized to delete this vehicle"
        assert fresh_session().get(Vehicle, vehicle.id) is not None

    def test_owner_deletes(self, client, seed, owner, owner_headers):
        vehicle = seed.vehicle(owner)

        response = client.delete(f"/api/vehicles/{vehicle.id}", headers=owner_headers)

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Vehicle deleted successfully"}
        assert client.get(f"/api/vehicles/{vehicle.id}").status_code == 404

    def test_missing_vehicle(self, client, owner_headers):
        response = client.delete("/api/vehicles/31337", headers=owner_headers)

        assert response.status_code == 404
        assert response.json()["message"] == "Vehicle not found"


class TestVehicleAvailability:
    """Tests for POST /api/vehicles/{id}/availability."""

    def test_owner_replaces_availability(self, client, seed, owner, owner_headers):
        vehicle = seed.vehicle(owner, availability={"isAvailable": True, "unavailableDates": ["2026-01-01"]})

        response = client.post(
            f"/api/vehicles/{vehicle.id}/availability",
            json={"isAvailable": False, "unavailableDates": ["2026-11-02", "2026-11-03"]},
            headers=owner_headers,
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Vehicle availability updated successfully"
        assert response.json()["data"]["availability"] == {
            "isAvailable": False,
            "availableFrom": None,
            "availableUntil": None,
            "unavailableDates": ["2026-11-02", "2026-11-03"],
        }

    def test_window_must_be_ordered(self, client, seed, owner, owner_headers):
        vehicle = seed.vehicle(owner)

        response = client.post(
            f"/api/vehicles/{vehicle.id}/availability",
            json={
                "isAvailable": True,
                "availableFrom": "2026-12-01T00:00:00Z",
                "availableUntil": "2026-11-01T00:00:00Z",
            },
            headers=owner_headers,
        )

        assert response.status_code == 400

    def test_non_owner_is_forbidden(self, client, seed, owner, rival_headers):
        vehicle = seed.vehicle(owner)

        response = client.post(
            f"/api/vehicles/{vehicle.id}/availability", json={"isAvailable": False}, headers=rival_headers
        )

        assert response.status_code == 403


class TestVehicleCategories:
    """Tests for GET /api/vehicles/categories/list."""

    def test_default_includes_unavailable(self, client, seed, owner):
        seed.vehicle(owner, category="truck")
        seed.vehicle(owner, category="bulldozer", status="inactive")

        body = client.get("/api/vehicles/categories/list").json()

        assert body == {"success": True, "data": ["bulldozer", "truck"]}

    def test_only_listed_categories(self, client, seed, owner):
        seed.vehicle(owner, category="truck")
        seed.vehicle(owner, category="bulldozer", status="inactive")

        body = client.get("/api/vehicles/categories/list", params={"includeUnavailable": "false"}).json()

        assert body["data"] == ["truck"]
