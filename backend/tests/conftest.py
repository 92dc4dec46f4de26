"""
Test fixtures for the Property Manager backend tests.

Each test gets its own temporary data directory; the app's store
dependency is overridden so tests never touch a real data directory.
"""
import json
import pytest
from pathlib import Path

from httpx import AsyncClient, ASGITransport
from property_manager.main import app
from property_manager.api.deps import get_store
from property_manager.db.store import RecordStore


# ── Seed data ──────────────────────────────────────────────────────────

AS_OF = "2025-10-15"
CREATED = "2025-01-01T00:00:00.000Z"


def make_property(prop_id, status="AVAILABLE", name=None, **extra):
    return {
        "id": prop_id,
        "name": name or f"Property {prop_id}",
        "address": "123 Main St",
        "city": "Austin",
        "state": "TX",
        "zipCode": "78701",
        "type": "APARTMENT",
        "bedrooms": 2,
        "bathrooms": 1,
        "rentAmount": 1500,
        "status": status,
        "createdAt": CREATED,
        "updatedAt": CREATED,
        **extra,
    }


def make_tenant(tenant_id, first="Jane", last="Doe", **extra):
    return {
        "id": tenant_id,
        "firstName": first,
        "lastName": last,
        "email": f"{first.lower()}@example.com",
        "createdAt": CREATED,
        "updatedAt": CREATED,
        **extra,
    }


def make_lease(lease_id, tenant_id, property_id, status="ACTIVE", rent=1500, **extra):
    return {
        "id": lease_id,
        "tenantId": tenant_id,
        "propertyId": property_id,
        "startDate": "2025-01-01",
        "endDate": "2025-12-31",
        "monthlyRent": rent,
        "securityDeposit": rent,
        "status": status,
        "createdAt": CREATED,
        "updatedAt": CREATED,
        **extra,
    }


def make_payment(payment_id, lease_id, status="PENDING", due="2025-10-01",
                 paid=None, tenant_id=None, amount=1500, **extra):
    record = {
        "id": payment_id,
        "leaseId": lease_id,
        "amount": amount,
        "type": "RENT",
        "status": status,
        "dueDate": due,
        "paidDate": paid,
        "createdAt": CREATED,
        "updatedAt": CREATED,
        **extra,
    }
    if tenant_id:
        record["tenantId"] = tenant_id
    return record


def make_maintenance(request_id, property_id, status="OPEN", tenant_id=None, **extra):
    return {
        "id": request_id,
        "propertyId": property_id,
        "tenantId": tenant_id,
        "title": "Leaky faucet",
        "priority": "MEDIUM",
        "status": status,
        "requestedDate": "2025-10-01",
        "createdAt": CREATED,
        "updatedAt": CREATED,
        **extra,
    }


def write_collection(data_dir: Path, name: str, records) -> None:
    """Write raw JSON, bypassing the store, the way a hand-edited file would look."""
    data_dir.mkdir(parents=True, exist_ok=True)
    (data_dir / f"{name}.json").write_text(json.dumps(records, indent=2), encoding="utf-8")


def read_collection(data_dir: Path, name: str):
    return json.loads((data_dir / f"{name}.json").read_text(encoding="utf-8"))


# ── Fixtures ───────────────────────────────────────────────────────────

@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "data"


@pytest.fixture
def store(data_dir):
    return RecordStore(data_dir)


@pytest.fixture
def seeded(data_dir):
    """
    Small portfolio:
      p1 AVAILABLE but leased (ACTIVE)   -> should become OCCUPIED
      p2 OCCUPIED with no lease          -> should become AVAILABLE
      p3 MAINTENANCE with an ACTIVE lease -> must stay MAINTENANCE
    """
    write_collection(data_dir, "properties", [
        make_property("p1", "AVAILABLE", name="Sunset Apartments"),
        make_property("p2", "OCCUPIED", name="Oak House"),
        make_property("p3", "MAINTENANCE", name="Pine Condo"),
    ])
    write_collection(data_dir, "tenants", [
        make_tenant("t1", "John", "Smith"),
        make_tenant("t2", "Sarah", "Johnson"),
    ])
    write_collection(data_dir, "leases", [
        make_lease("l1", "t1", "p1", rent=1500),
        make_lease("l2", "t2", "p3", rent=2000),
    ])
    write_collection(data_dir, "payments", [
        make_payment("pay1", "l1", "PAID", due="2025-09-01", paid="2025-09-01"),
        make_payment("pay2", "l1", "PENDING", due="2025-10-01"),
        make_payment("pay3", "l2", "PENDING", due="2025-11-01", amount=2000),
    ])
    write_collection(data_dir, "maintenance", [
        make_maintenance("m1", "p3", "OPEN", tenant_id="t2"),
        make_maintenance("m2", "p1", "COMPLETED"),
    ])
    return data_dir


@pytest.fixture
async def client(store):
    """Async HTTP client bound to the app, reading and writing the temp data dir."""
    app.dependency_overrides[get_store] = lambda: store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.pop(get_store, None)
