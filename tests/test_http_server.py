"""Tests for the HTTP facade."""

import pytest
from fastapi.testclient import TestClient

from package_order.http_server import create_app


@pytest.fixture
def client(service_workflow):
    with TestClient(create_app(workflow=service_workflow)) as test_client:
        yield test_client


class TestCatalogEndpoints:
    """Catalog routes."""

    def test_catalog_is_loaded_on_startup(self, client):
        response = client.get("/items")

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 3
        assert data["status"]["state"] == "succeeded"
        assert data["error"] is None

    def test_reload_failure_keeps_items(self, client, fake_service):
        fake_service.state.catalog_available = False

        data = client.post("/items/reload").json()

        assert data == {"success": False, "count": 3, "error": "Failed to load items"}

    def test_health(self, client):
        data = client.get("/health").json()

        assert data["status"] == "healthy"
        assert data["catalog"] == "succeeded"

    def test_root_lists_endpoints(self, client):
        data = client.get("/").json()

        assert data["name"] == "Package Order Client"
        assert "orders" in data["endpoints"]


class TestOrderEndpoints:
    """Selection and submission routes."""

    def test_toggle_and_submit(self, client, fake_service):
        assert client.post("/selection/toggle", json={"item_id": 2}).json()["selected"] is True
        toggled = client.post("/selection/toggle", json={"item_id": 1}).json()
        assert toggled["item_ids"] == [1, 2]

        data = client.post("/orders/submit").json()

        assert data["success"] is True
        assert data["summary"]["package_count"] == 2
        assert data["summary"]["total_courier_display"] == "$12.50"
        assert fake_service.state.calculate_requests == [{"itemIds": [1, 2]}]

    def test_submit_empty_selection(self, client, fake_service):
        data = client.post("/orders/submit").json()

        assert data["success"] is False
        assert data["error"] == "Please select at least one item"
        assert data["status"]["error_type"] == "ValidationError"
        assert fake_service.state.calculate_requests == []

    def test_service_failure(self, client, fake_service):
        fake_service.state.calculate_error = "no courier available"
        client.post("/selection/toggle", json={"item_id": 1})

        data = client.post("/orders/submit").json()

        assert data == {
            "success": False,
            "error": "no courier available",
            "status": {"state": "failed", "message": "no courier available", "error_type": "ServiceError"},
        }

    def test_result_and_state(self, client):
        assert client.get("/orders/result").json()["summary"] is None

        client.post("/selection/toggle", json={"item_id": 3})
        client.post("/orders/submit")

        result = client.get("/orders/result").json()
        assert result["status"]["state"] == "succeeded"
        assert result["summary"]["packages"][0]["courier_display"] == "$12.25"

        state = client.get("/state").json()
        assert state["selection"] == [3]
        assert state["can_submit"] is True

    def test_selection_endpoint(self, client):
        client.post("/selection/toggle", json={"item_id": "gift-wrap"})

        data = client.get("/selection").json()

        assert data == {"count": 1, "item_ids": ["gift-wrap"], "can_submit": True}
