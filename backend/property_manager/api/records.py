"""
CRUD routes for properties, tenants, payments and maintenance requests.
Leases live in leases.py because their writes carry side effects.
"""
import logging
from typing import Callable

from fastapi import APIRouter, Depends, HTTPException

from property_manager.api.deps import get_store
from property_manager.db.store import (
    MAINTENANCE,
    PAYMENTS,
    PROPERTIES,
    TENANTS,
    RecordStore,
    to_json,
)
from property_manager.models import (
    MaintenanceCreate,
    MaintenanceStatus,
    MaintenanceUpdate,
    PaymentCreate,
    PaymentUpdate,
    PropertyCreate,
    PropertyUpdate,
    TenantCreate,
    TenantUpdate,
)
from property_manager.services.record_service import (
    RecordService,
    check_payment,
    enriched_payments,
    populate_maintenance,
    populated_maintenance,
    tenant_with_leases,
)
from property_manager.services.timeframe import format_date_iso, today

logger = logging.getLogger(__name__)

router = APIRouter()


def _run(label: str, action: Callable):
    """Run a store mutation, mapping ValueError to 400 and anything else to 500."""
    try:
        return action()
    except HTTPException:
        raise
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"[{label.upper()}] Request failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to save {label}")


def _found(record, label: str):
    if record is None:
        raise HTTPException(status_code=404, detail=f"{label} not found")
    return record


# =========================================================================
# Properties
# =========================================================================

@router.get("/properties", tags=["Properties"])
async def list_properties(store: RecordStore = Depends(get_store)):
    return [to_json(p) for p in RecordService(store, PROPERTIES).list()]


@router.post("/properties", status_code=201, tags=["Properties"])
async def create_property(body: PropertyCreate, store: RecordStore = Depends(get_store)):
    """POST: Create a property. Status defaults to AVAILABLE."""
    service = RecordService(store, PROPERTIES)
    return to_json(_run("property", lambda: service.create(body.model_dump(mode="json"))))


@router.get("/properties/{property_id}", tags=["Properties"])
async def get_property(property_id: str, store: RecordStore = Depends(get_store)):
    return to_json(_found(RecordService(store, PROPERTIES).get(property_id), "Property"))


@router.put("/properties/{property_id}", tags=["Properties"])
async def update_property(property_id: str, body: PropertyUpdate,
                          store: RecordStore = Depends(get_store)):
    """
    PUT: Merge the sent fields over the property.
    A manual OCCUPIED/AVAILABLE status sticks only until the next lease change
    or /sync-properties; MAINTENANCE and UNAVAILABLE are never overridden.
    """
    service = RecordService(store, PROPERTIES)
    updated = _run("property", lambda: service.update(property_id, body.changes()))
    return to_json(_found(updated, "Property"))


@router.delete("/properties/{property_id}", tags=["Properties"])
async def delete_property(property_id: str, store: RecordStore = Depends(get_store)):
    service = RecordService(store, PROPERTIES)
    _found(_run("property", lambda: service.delete(property_id)), "Property")
    return {"message": "Property deleted successfully"}


# =========================================================================
# Tenants
# =========================================================================

@router.get("/tenants", tags=["Tenants"])
async def list_tenants(store: RecordStore = Depends(get_store)):
    return [to_json(t) for t in RecordService(store, TENANTS).list()]


@router.post("/tenants", status_code=201, tags=["Tenants"])
async def create_tenant(body: TenantCreate, store: RecordStore = Depends(get_store)):
    service = RecordService(store, TENANTS)
    return to_json(_run("tenant", lambda: service.create(body.model_dump(mode="json"))))


@router.get("/tenants/{tenant_id}", tags=["Tenants"])
async def get_tenant(tenant_id: str, store: RecordStore = Depends(get_store)):
    """GET: Tenant with its leases; each lease carries its property."""
    tenant = _found(RecordService(store, TENANTS).get(tenant_id), "Tenant")
    return tenant_with_leases(tenant, store)


@router.put("/tenants/{tenant_id}", tags=["Tenants"])
async def update_tenant(tenant_id: str, body: TenantUpdate,
                        store: RecordStore = Depends(get_store)):
    service = RecordService(store, TENANTS)
    updated = _run("tenant", lambda: service.update(tenant_id, body.changes()))
    return to_json(_found(updated, "Tenant"))


@router.delete("/tenants/{tenant_id}", tags=["Tenants"])
async def delete_tenant(tenant_id: str, store: RecordStore = Depends(get_store)):
    service = RecordService(store, TENANTS)
    _found(_run("tenant", lambda: service.delete(tenant_id)), "Tenant")
    return {"message": "Tenant deleted successfully"}


# =========================================================================
# Payments
# =========================================================================

@router.get("/payments", tags=["Payments"])
async def list_payments(store: RecordStore = Depends(get_store)):
    """GET: All payments with tenantName and propertyName attached."""
    return enriched_payments(store)


@router.post("/payments", status_code=201, tags=["Payments"])
async def create_payment(body: PaymentCreate, store: RecordStore = Depends(get_store)):
    """POST: Record a payment. paidDate is required when status is PAID."""
    service = RecordService(store, PAYMENTS, check=check_payment)
    return to_json(_run("payment", lambda: service.create(body.model_dump(mode="json"))))


@router.get("/payments/{payment_id}", tags=["Payments"])
async def get_payment(payment_id: str, store: RecordStore = Depends(get_store)):
    return to_json(_found(RecordService(store, PAYMENTS).get(payment_id), "Payment"))


@router.put("/payments/{payment_id}", tags=["Payments"])
async def update_payment(payment_id: str, body: PaymentUpdate,
                         store: RecordStore = Depends(get_store)):
    service = RecordService(store, PAYMENTS, check=check_payment)
    updated = _run("payment", lambda: service.update(payment_id, body.changes()))
    return to_json(_found(updated, "Payment"))


@router.delete("/payments/{payment_id}", tags=["Payments"])
async def delete_payment(payment_id: str, store: RecordStore = Depends(get_store)):
    service = RecordService(store, PAYMENTS)
    _found(_run("payment", lambda: service.delete(payment_id)), "Payment")
    return {"message": "Payment deleted successfully"}


# =========================================================================
# Maintenance
# =========================================================================

@router.get("/maintenance", tags=["Maintenance"])
async def list_maintenance(store: RecordStore = Depends(get_store)):
    """GET: All maintenance requests, each with its property and tenant inlined."""
    return populated_maintenance(store)


@router.post("/maintenance", status_code=201, tags=["Maintenance"])
async def create_maintenance(body: MaintenanceCreate, store: RecordStore = Depends(get_store)):
    """POST: Open a maintenance request. Status starts OPEN, requested today."""
    service = RecordService(store, MAINTENANCE)
    fields = {
        **body.model_dump(mode="json"),
        "status": MaintenanceStatus.OPEN.value,
        "requested_date": format_date_iso(today()),
    }
    created = _run("maintenance request", lambda: service.create(fields))
    return populate_maintenance(created, store)


@router.get("/maintenance/{request_id}", tags=["Maintenance"])
async def get_maintenance(request_id: str, store: RecordStore = Depends(get_store)):
    """GET: Maintenance request with its property and tenant inlined."""
    request = _found(RecordService(store, MAINTENANCE).get(request_id), "Maintenance request")
    return populate_maintenance(request, store)


@router.put("/maintenance/{request_id}", tags=["Maintenance"])
async def update_maintenance(request_id: str, body: MaintenanceUpdate,
                             store: RecordStore = Depends(get_store)):
    service = RecordService(store, MAINTENANCE)
    updated = _run("maintenance request", lambda: service.update(request_id, body.changes()))
    return populate_maintenance(_found(updated, "Maintenance request"), store)


@router.delete("/maintenance/{request_id}", tags=["Maintenance"])
async def delete_maintenance(request_id: str, store: RecordStore = Depends(get_store)):
    service = RecordService(store, MAINTENANCE)
    _found(_run("maintenance request", lambda: service.delete(request_id)), "Maintenance request")
    return {"message": "Maintenance request deleted successfully"}
