"""Test payment CRUD endpoints."""
import pytest

from tests.conftest import read_collection


@pytest.mark.asyncio
async def test_list_payments_is_enriched(seeded, client):
    resp = await client.get("/api/payments")
    assert resp.status_code == 200
    by_id = {p["id"]: p for p in resp.json()}
    assert by_id["pay1"]["tenantName"] == "John Smith"
    assert by_id["pay1"]["propertyName"] == "Sunset Apartments"
    assert by_id["pay3"]["tenantName"] == "Sarah Johnson"
    assert by_id["pay3"]["propertyName"] == "Pine Condo"


@pytest.mark.asyncio
async def test_create_payment(seeded, client):
    resp = await client.post("/api/payments", json={
        "leaseId": "l1",
        "amount": 50,
        "type": "LATE_FEE",
        "dueDate": "2025-10-05",
    })
    assert resp.status_code == 201
    payment = resp.json()
    assert payment["status"] == "PENDING"
    assert payment["type"] == "LATE_FEE"
    assert len(read_collection(seeded, "payments")) == 4


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [
    {"amount": 100, "dueDate": "2025-10-01"},
    {"leaseId": "l1", "amount": 0, "dueDate": "2025-10-01"},
    {"leaseId": "l1", "amount": 100},
    {"leaseId": "l1", "amount": 100, "dueDate": "2025-10-01", "status": "PAID"},
    {"leaseId": "l1", "amount": 100, "dueDate": "2025-10-01", "method": "BITCOIN"},
])
async def test_create_payment_rejects_bad_input(seeded, client, body):
    resp = await client.post("/api/payments", json=body)
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_mark_payment_paid(seeded, client):
    resp = await client.put("/api/payments/pay2", json={
        "status": "PAID",
        "paidDate": "2025-10-03",
        "method": "BANK_TRANSFER",
    })
    assert resp.status_code == 200
    assert resp.json()["status"] == "PAID"

    dashboard = (await client.get("/api/dashboard", params={"asOf": "2025-10-15"})).json()
    assert dashboard["metrics"]["pendingPayments"] == 0
    assert dashboard["recentPayments"][0]["id"] == "pay2"


@pytest.mark.asyncio
async def test_mark_paid_without_paid_date_is_400(seeded, client):
    resp = await client.put("/api/payments/pay2", json={"status": "PAID"})
    assert resp.status_code == 400
    stored = {p["id"]: p for p in read_collection(seeded, "payments")}
    assert stored["pay2"]["status"] == "PENDING"


@pytest.mark.asyncio
async def test_get_update_delete_missing_payment(seeded, client):
    assert (await client.get("/api/payments/nope")).status_code == 404
    assert (await client.put("/api/payments/nope", json={"notes": "x"})).status_code == 404
    assert (await client.delete("/api/payments/nope")).status_code == 404


@pytest.mark.asyncio
async def test_delete_payment(seeded, client):
    resp = await client.delete("/api/payments/pay1")
    assert resp.status_code == 200
    assert [p["id"] for p in read_collection(seeded, "payments")] == ["pay2", "pay3"]
