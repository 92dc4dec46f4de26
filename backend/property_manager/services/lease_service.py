"""
Lease Service - lease lifecycle plus its side effects.

- Creating a lease can generate one PENDING rent payment per month of the term.
- Creating an ACTIVE lease, changing a lease's status (or property), and
  deleting a lease re-run property status reconciliation (best effort).
- Deleting a lease always deletes its payments.
"""
import logging
from datetime import date
from typing import List, Optional

from property_manager.db.store import LEASES, PAYMENTS, RecordStore, new_id
from property_manager.models import (
    Lease,
    LeaseCreate,
    LeaseStatus,
    LeaseUpdate,
    Payment,
    PaymentStatus,
    PaymentType,
)
from property_manager.services.reconciler import StatusReconciler
from property_manager.services.record_service import RecordService
from property_manager.services.timeframe import (
    format_date_iso,
    format_month_year,
    month_starts,
    parse_date,
    utc_now_iso,
)

logger = logging.getLogger(__name__)


def generate_monthly_payments(
    lease_id: str,
    tenant_id: str,
    start: date,
    end: date,
    monthly_rent: float,
) -> List[Payment]:
    """One PENDING rent payment due on each 1st of the month within the term."""
    now = utc_now_iso()
    return [
        Payment(
            id=new_id(),
            lease_id=lease_id,
            tenant_id=tenant_id,
            amount=monthly_rent,
            type=PaymentType.RENT,
            status=PaymentStatus.PENDING,
            due_date=format_date_iso(due),
            paid_date=None,
            method=None,
            notes=f"Monthly rent for {format_month_year(due)}",
            created_at=now,
            updated_at=now,
        )
        for due in month_starts(start, end)
    ]


def _check_term(lease: Lease) -> None:
    start, end = parse_date(lease.start_date), parse_date(lease.end_date)
    if start and end and end < start:
        raise ValueError("endDate must not be before startDate")


class LeaseService:
    """Lease CRUD that keeps payments and property statuses in step."""

    def __init__(self, store: RecordStore):
        self.store = store
        self.leases = RecordService(store, LEASES, check=_check_term)
        self.reconciler = StatusReconciler(store)

    def list_leases(self) -> List[Lease]:
        return self.leases.list()

    def get_lease(self, lease_id: str) -> Optional[Lease]:
        return self.leases.get(lease_id)

    def create_lease(self, payload: LeaseCreate) -> Lease:
        fields = payload.model_dump(mode="json")
        generate = fields.pop("generate_payments", True)

        lease = self.leases.build(fields)
        payments: List[Payment] = []
        if generate:
            payments = generate_monthly_payments(
                lease.id,
                payload.tenant_id,
                payload.start_date,
                payload.end_date,
                payload.monthly_rent,
            )
        lease.payments = payments
        lease.payment_count = len(payments)

        self.leases.insert(lease)
        if payments:
            all_payments = self.store.load(PAYMENTS)
            all_payments.extend(payments)
            self.store.save(PAYMENTS, all_payments)
            logger.info(f"[LEASES] Generated {len(payments)} rent payment(s) for lease {lease.id}")

        if lease.status == LeaseStatus.ACTIVE:
            self.reconciler.reconcile_safely()
        return lease

    def update_lease(self, lease_id: str, payload: LeaseUpdate) -> Optional[Lease]:
        existing = self.leases.get(lease_id)
        if existing is None:
            return None

        updated = self.leases.update(lease_id, payload.changes())
        if updated is None:
            return None

        if updated.status != existing.status or updated.property_id != existing.property_id:
            self.reconciler.reconcile_safely()
        return updated

    def delete_lease(self, lease_id: str) -> bool:
        """Delete a lease and every payment that references it."""
        removed = self.leases.delete(lease_id)
        if removed is None:
            return False

        payments = self.store.load(PAYMENTS)
        remaining = [p for p in payments if p.lease_id != lease_id]
        if len(remaining) != len(payments):
            self.store.save(PAYMENTS, remaining)
            logger.info(f"[LEASES] Removed {len(payments) - len(remaining)} payment(s) of lease {lease_id}")

        self.reconciler.reconcile_safely()
        return True
