"""
API Routes - Property Manager
Health checks, the dashboard summary, and manual property status sync.
"""
import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from property_manager.api.deps import get_store
from property_manager.db.store import COLLECTIONS, RecordStore
from property_manager.models import DashboardSummary
from property_manager.services.dashboard_service import DashboardAggregator
from property_manager.services.reconciler import StatusReconciler
from property_manager.services.timeframe import utc_now_iso

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(store: RecordStore = Depends(get_store)):
    """Health check endpoint. Reports which collection files exist."""
    return {
        "status": "healthy",
        "message": "API server is running",
        "dataDir": str(store.data_dir.resolve()),
        "collections": {name: store.exists(name) for name in COLLECTIONS},
        "timestamp": utc_now_iso(),
    }


@router.get("/test")
async def test_endpoint():
    return {
        "status": "success",
        "message": "Simple test API working",
        "timestamp": utc_now_iso(),
    }


@router.get("/dashboard", response_model=DashboardSummary)
async def get_dashboard(
    as_of: Optional[date] = Query(
        None,
        alias="asOf",
        description="Reference date (YYYY-MM-DD) for the due-this-month metric. Defaults to today.",
    ),
    store: RecordStore = Depends(get_store),
):
    """
    GET: Dashboard summary.

    Returns:
    - metrics: property/tenant counts, occupancy rate, expected monthly income,
      pending payments due this month, overdue payments, open maintenance
    - recentPayments: last 5 PAID payments (newest first)
    - upcomingPayments: next 5 PENDING payments (earliest due first)
    """
    try:
        return DashboardAggregator(store).get_dashboard(now=as_of)
    except Exception as e:
        logger.error(f"[DASHBOARD] Failed to build dashboard: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch dashboard data")


@router.post("/sync-properties")
async def sync_properties(store: RecordStore = Depends(get_store)):
    """
    POST: Re-derive every property's status from the ACTIVE leases.
    Unlike the automatic sync after lease changes, failures surface here.
    """
    try:
        changed = StatusReconciler(store).reconcile()
    except Exception as e:
        logger.error(f"[RECONCILE] Manual sync failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to sync property statuses")

    return {
        "success": True,
        "message": "Property statuses synced successfully",
        "updated": [{"id": p.id, "status": p.status.value} for p in changed],
    }
