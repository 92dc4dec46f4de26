"""
Lease API routes.

Two addressing styles are served with identical semantics:
  PUT/DELETE /leases/{lease_id}
  PUT/DELETE /leases?id=<lease_id>
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from property_manager.api.deps import get_store
from property_manager.db.store import RecordStore, to_json
from property_manager.models import LeaseCreate, LeaseUpdate
from property_manager.services.lease_service import LeaseService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Leases"])


def _require_id(lease_id: Optional[str]) -> str:
    if not lease_id:
        raise HTTPException(status_code=400, detail="Lease ID is required")
    return lease_id


@router.get("/leases")
async def list_leases(store: RecordStore = Depends(get_store)):
    return [to_json(l) for l in LeaseService(store).list_leases()]


@router.post("/leases", status_code=201)
async def create_lease(body: LeaseCreate, store: RecordStore = Depends(get_store)):
    """
    POST: Create a lease.
    Required: tenantId, propertyId, startDate, endDate, monthlyRent.
    Set generatePayments=false to skip the monthly rent schedule.
    """
    try:
        return to_json(LeaseService(store).create_lease(body))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"[LEASES] Create failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to create lease")


@router.get("/leases/{lease_id}")
async def get_lease(lease_id: str, store: RecordStore = Depends(get_store)):
    lease = LeaseService(store).get_lease(lease_id)
    if not lease:
        raise HTTPException(status_code=404, detail="Lease not found")
    return to_json(lease)


def _update(lease_id: str, body: LeaseUpdate, store: RecordStore) -> dict:
    try:
        lease = LeaseService(store).update_lease(lease_id, body)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"[LEASES] Update of {lease_id} failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to update lease")

    if not lease:
        raise HTTPException(status_code=404, detail="Lease not found")
    return to_json(lease)


def _delete(lease_id: str, store: RecordStore) -> dict:
    try:
        deleted = LeaseService(store).delete_lease(lease_id)
    except Exception as e:
        logger.error(f"[LEASES] Delete of {lease_id} failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to delete lease")

    if not deleted:
        raise HTTPException(status_code=404, detail="Lease not found")
    return {"message": "Lease deleted successfully"}


@router.put("/leases/{lease_id}")
async def update_lease(lease_id: str, body: LeaseUpdate, store: RecordStore = Depends(get_store)):
    """PUT: Merge the sent fields over the lease. Status changes re-sync property statuses."""
    return _update(lease_id, body, store)


@router.put("/leases")
async def update_lease_by_query(
    body: LeaseUpdate,
    lease_id: Optional[str] = Query(None, alias="id"),
    store: RecordStore = Depends(get_store),
):
    return _update(_require_id(lease_id), body, store)


@router.delete("/leases/{lease_id}")
async def delete_lease(lease_id: str, store: RecordStore = Depends(get_store)):
    """DELETE: Remove the lease and its payments, then re-sync property statuses."""
    return _delete(lease_id, store)


@router.delete("/leases")
async def delete_lease_by_query(
    lease_id: Optional[str] = Query(None, alias="id"),
    store: RecordStore = Depends(get_store),
):
    return _delete(_require_id(lease_id), store)
