"""
Dashboard Service - summary metrics derived from all five collections.

READ-ONLY: every call re-loads and re-joins the collections; nothing is cached
and nothing is written. Foreign keys are resolved by linear lookup.
"""
import logging
from datetime import date, datetime
from typing import Dict, List, Optional

from property_manager.db.store import (
    LEASES,
    MAINTENANCE,
    PAYMENTS,
    PROPERTIES,
    TENANTS,
    RecordStore,
    find,
    to_json,
)
from property_manager.models import (
    DashboardMetrics,
    DashboardPayment,
    DashboardSummary,
    Lease,
    LeaseRef,
    LeaseStatus,
    MaintenanceRequest,
    MaintenanceStatus,
    Payment,
    PaymentStatus,
    Property,
    PropertyRef,
    Tenant,
    TenantRef,
)
from property_manager.services.timeframe import is_same_month, parse_date, today

logger = logging.getLogger(__name__)

LIST_LIMIT = 5


def occupancy_rate(occupied: int, total: int) -> int:
    """Whole-percent occupancy, rounding halves up. 0 when total is 0."""
    if total <= 0:
        return 0
    return (occupied * 200 + total) // (total * 2)


def enrich_payment(
    payment: Payment,
    tenants: List[Tenant],
    leases: List[Lease],
    properties: List[Property],
) -> DashboardPayment:
    """
    Attach tenant and property names to a payment.
    Any link that cannot be resolved yields None rather than an error.
    """
    lease = find(leases, payment.lease_id)
    tenant = find(tenants, payment.tenant_id or (lease.tenant_id if lease else None))
    prop = find(properties, lease.property_id) if lease else None

    data = to_json(payment)
    for key in ("tenant", "lease", "tenantName", "propertyName"):
        data.pop(key, None)

    enriched = DashboardPayment.model_validate(data)
    enriched.tenant_name = tenant.full_name if tenant else None
    enriched.property_name = prop.name if prop else None
    enriched.tenant = TenantRef(first_name=tenant.first_name, last_name=tenant.last_name) if tenant else None
    enriched.lease = LeaseRef(property=PropertyRef(name=prop.name)) if prop else None
    return enriched


def build_dashboard(
    properties: List[Property],
    tenants: List[Tenant],
    leases: List[Lease],
    payments: List[Payment],
    maintenance: List[MaintenanceRequest],
    now: date,
) -> DashboardSummary:
    """Pure aggregation over already-loaded collections."""
    property_ids = {p.id for p in properties}
    active_leases = [l for l in leases if l.status == LeaseStatus.ACTIVE]

    # Dangling propertyIds on active leases do not count as occupied
    occupied = {l.property_id for l in active_leases if l.property_id in property_ids}

    pending_this_month = [
        p for p in payments
        if p.status == PaymentStatus.PENDING and is_same_month(parse_date(p.due_date), now)
    ]

    metrics = DashboardMetrics(
        total_properties=len(properties),
        occupied_properties=len(occupied),
        total_tenants=len(tenants),
        active_leases=len(active_leases),
        pending_payments=len(pending_this_month),
        overdue_payments=sum(1 for p in payments if p.status == PaymentStatus.OVERDUE),
        open_maintenance_requests=sum(1 for m in maintenance if m.status == MaintenanceStatus.OPEN),
        occupancy_rate=occupancy_rate(len(occupied), len(properties)),
        total_monthly_income=sum(l.monthly_rent or 0 for l in active_leases),
    )

    paid = [p for p in payments if p.status == PaymentStatus.PAID]
    paid.sort(key=lambda p: parse_date(p.paid_date) or date.min, reverse=True)

    pending = [p for p in payments if p.status == PaymentStatus.PENDING]
    pending.sort(key=lambda p: parse_date(p.due_date) or date.max)

    return DashboardSummary(
        as_of=now.isoformat(),
        metrics=metrics,
        recent_payments=[enrich_payment(p, tenants, leases, properties) for p in paid[:LIST_LIMIT]],
        upcoming_payments=[enrich_payment(p, tenants, leases, properties) for p in pending[:LIST_LIMIT]],
    )


class DashboardAggregator:
    """Loads every collection from the store and builds the dashboard."""

    def __init__(self, store: RecordStore):
        self.store = store

    def get_dashboard(self, now: Optional[date] = None) -> DashboardSummary:
        """
        Build the dashboard summary.

        Args:
            now: Reference date for the "due this month" metric
                 (defaults to today, UTC)
        """
        if now is None:
            now = today()
        elif isinstance(now, datetime):
            now = now.date()

        data: Dict[str, list] = self.store.load_all()
        summary = build_dashboard(
            properties=data[PROPERTIES],
            tenants=data[TENANTS],
            leases=data[LEASES],
            payments=data[PAYMENTS],
            maintenance=data[MAINTENANCE],
            now=now,
        )
        logger.debug(
            f"[DASHBOARD] {summary.metrics.total_properties} properties, "
            f"occupancy {summary.metrics.occupancy_rate}% as of {summary.as_of}"
        )
        return summary
