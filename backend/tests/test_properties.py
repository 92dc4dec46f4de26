"""Test property CRUD endpoints."""
import pytest

from tests.conftest import read_collection


@pytest.mark.asyncio
async def test_list_properties(seeded, client):
    resp = await client.get("/api/properties")
    assert resp.status_code == 200
    data = resp.json()
    assert [p["id"] for p in data] == ["p1", "p2", "p3"]
    assert data[0]["zipCode"] == "78701"


@pytest.mark.asyncio
async def test_list_properties_empty(client):
    resp = await client.get("/api/properties")
    assert resp.status_code == 200
    assert resp.json() == []


@pytest.mark.asyncio
async def test_create_property_defaults_to_available(client, data_dir):
    resp = await client.post("/api/properties", json={
        "name": "Maple Townhouse",
        "address": "9 Maple Ave",
        "type": "TOWNHOUSE",
        "bedrooms": 3,
        "rentAmount": 2100,
    })
    assert resp.status_code == 201
    prop = resp.json()
    assert prop["status"] == "AVAILABLE"
    assert prop["id"]
    assert prop["createdAt"] == prop["updatedAt"]

    stored = read_collection(data_dir, "properties")
    assert stored == [prop]


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [
    {},
    {"name": ""},
    {"name": "X", "type": "CASTLE"},
    {"name": "X", "bedrooms": -1},
])
async def test_create_property_rejects_bad_input(client, body):
    resp = await client.post("/api/properties", json=body)
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_get_property(seeded, client):
    resp = await client.get("/api/properties/p2")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Oak House"

    resp = await client.get("/api/properties/missing")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_update_property_merges_fields(seeded, client):
    resp = await client.put("/api/properties/p2", json={"rentAmount": 1750, "status": "MAINTENANCE"})
    assert resp.status_code == 200
    prop = resp.json()
    assert prop["rentAmount"] == 1750
    assert prop["status"] == "MAINTENANCE"
    assert prop["name"] == "Oak House"
    assert prop["createdAt"] == "2025-01-01T00:00:00.000Z"
    assert prop["updatedAt"] != prop["createdAt"]


@pytest.mark.asyncio
async def test_update_property_cannot_change_id(seeded, client):
    resp = await client.put("/api/properties/p2", json={"id": "hijack", "name": "Renamed"})
    assert resp.status_code == 200
    assert resp.json()["id"] == "p2"


@pytest.mark.asyncio
async def test_update_missing_property_is_404(seeded, client):
    resp = await client.put("/api/properties/missing", json={"name": "X"})
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_manual_status_is_overridden_by_next_sync(seeded, client):
    await client.put("/api/properties/p1", json={"status": "AVAILABLE"})
    await client.post("/api/sync-properties")
    resp = await client.get("/api/properties/p1")
    assert resp.json()["status"] == "OCCUPIED"


@pytest.mark.asyncio
async def test_delete_property(seeded, client):
    resp = await client.delete("/api/properties/p2")
    assert resp.status_code == 200
    assert resp.json()["message"] == "Property deleted successfully"
    assert [p["id"] for p in read_collection(seeded, "properties")] == ["p1", "p3"]

    resp = await client.delete("/api/properties/p2")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_delete_property_leaves_leases_dangling(seeded, client):
    await client.delete("/api/properties/p1")
    assert "l1" in [l["id"] for l in read_collection(seeded, "leases")]

    resp = await client.get("/api/dashboard", params={"asOf": "2025-10-15"})
    metrics = resp.json()["metrics"]
    assert metrics["totalProperties"] == 2
    assert metrics["occupiedProperties"] == 1
