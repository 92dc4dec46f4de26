"""Test maintenance request endpoints."""
import pytest

from property_manager.services.timeframe import today
from tests.conftest import read_collection


@pytest.mark.asyncio
async def test_list_maintenance(seeded, client):
    resp = await client.get("/api/maintenance")
    assert resp.status_code == 200
    requests = resp.json()
    assert [m["id"] for m in requests] == ["m1", "m2"]
    assert requests[0]["property"]["name"] == "Pine Condo"
    assert requests[0]["tenant"]["firstName"] == "Sarah"
    assert requests[1]["property"]["name"] == "Sunset Apartments"
    assert requests[1]["tenant"] is None


@pytest.mark.asyncio
async def test_get_maintenance_is_populated(seeded, client):
    resp = await client.get("/api/maintenance/m1")
    assert resp.status_code == 200
    request = resp.json()
    assert request["property"]["name"] == "Pine Condo"
    assert request["tenant"]["firstName"] == "Sarah"

    resp = await client.get("/api/maintenance/m2")
    assert resp.json()["tenant"] is None


@pytest.mark.asyncio
async def test_create_maintenance_starts_open(seeded, client):
    resp = await client.post("/api/maintenance", json={
        "propertyId": "p1",
        "title": "Broken heater",
        "category": "HVAC",
        "priority": "HIGH",
        "status": "COMPLETED",
    })
    assert resp.status_code == 201
    request = resp.json()
    assert request["status"] == "OPEN"
    assert request["requestedDate"] == today().isoformat()
    assert request["property"]["id"] == "p1"

    dashboard = (await client.get("/api/dashboard")).json()
    assert dashboard["metrics"]["openMaintenanceRequests"] == 2


@pytest.mark.asyncio
async def test_create_maintenance_requires_title(seeded, client):
    resp = await client.post("/api/maintenance", json={"propertyId": "p1"})
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_complete_maintenance(seeded, client):
    resp = await client.put("/api/maintenance/m1", json={
        "status": "COMPLETED",
        "actualCost": 120,
        "completedDate": "2025-10-10",
    })
    assert resp.status_code == 200
    request = resp.json()
    assert request["status"] == "COMPLETED"
    assert request["property"]["id"] == "p3"


@pytest.mark.asyncio
async def test_delete_maintenance(seeded, client):
    resp = await client.delete("/api/maintenance/m2")
    assert resp.status_code == 200
    assert [m["id"] for m in read_collection(seeded, "maintenance")] == ["m1"]
    assert (await client.delete("/api/maintenance/m2")).status_code == 404
