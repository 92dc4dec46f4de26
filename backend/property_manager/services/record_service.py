"""
Generic CRUD over one collection of the record store.

Every mutation is a full read-modify-write of the collection file. Lookups
that miss return None (routes turn that into a 404); invalid field
combinations raise ValueError (routes turn that into a 400).
"""
import logging
from typing import Callable, Dict, List, Optional

from property_manager.db.store import (
    LEASES,
    MAINTENANCE,
    PAYMENTS,
    PROPERTIES,
    TENANTS,
    RecordStore,
    find,
    new_id,
    to_json,
)
from property_manager.models import (
    MaintenanceRequest,
    Payment,
    PaymentStatus,
    Property,
    Record,
    Tenant,
)
from property_manager.services.dashboard_service import enrich_payment
from property_manager.services.timeframe import utc_now_iso

logger = logging.getLogger(__name__)


def merge(record: Record, changes: Dict) -> Record:
    """Overlay changes (keyed by attribute name) on a record and re-validate."""
    model = type(record)
    merged = {**record.model_dump(exclude_unset=True), **changes}
    return model.model_validate(merged)


class RecordService:
    """CRUD for a single named collection."""

    def __init__(self, store: RecordStore, collection: str,
                 check: Optional[Callable[[Record], None]] = None):
        self.store = store
        self.collection = collection
        self.model = store.model_for(collection)
        self.check = check

    def list(self) -> List[Record]:
        return self.store.load(self.collection)

    def get(self, record_id: str) -> Optional[Record]:
        return find(self.store.load(self.collection), record_id)

    def build(self, fields: Dict) -> Record:
        """A new record with id and timestamps assigned, not yet saved."""
        now = utc_now_iso()
        record = self.model.model_validate({
            **fields,
            "id": new_id(),
            "created_at": now,
            "updated_at": now,
        })
        if self.check:
            self.check(record)
        return record

    def insert(self, record: Record) -> Record:
        records = self.store.load(self.collection)
        records.append(record)
        self.store.save(self.collection, records)
        logger.info(f"[{self.collection.upper()}] Created {record.id}")
        return record

    def create(self, fields: Dict) -> Record:
        return self.insert(self.build(fields))

    def update(self, record_id: str, changes: Dict) -> Optional[Record]:
        """Merge changes over the stored record. None if the id is unknown."""
        records = self.store.load(self.collection)
        for index, record in enumerate(records):
            if record.id != record_id:
                continue
            updated = merge(record, {**changes, "updated_at": utc_now_iso()})
            if self.check:
                self.check(updated)
            records[index] = updated
            self.store.save(self.collection, records)
            logger.info(f"[{self.collection.upper()}] Updated {record_id}")
            return updated
        return None

    def delete(self, record_id: str) -> Optional[Record]:
        """Remove a record and return it. None if the id is unknown."""
        records = self.store.load(self.collection)
        for index, record in enumerate(records):
            if record.id == record_id:
                del records[index]
                self.store.save(self.collection, records)
                logger.info(f"[{self.collection.upper()}] Deleted {record_id}")
                return record
        return None


def check_payment(payment: Payment) -> None:
    if payment.status == PaymentStatus.PAID and not payment.paid_date:
        raise ValueError("paidDate is required when status is PAID")


# =========================================================================
# Read-side joins for individual resources
# =========================================================================

def _inline_links(request: MaintenanceRequest, properties: List[Property],
                  tenants: List[Tenant]) -> dict:
    prop = find(properties, request.property_id)
    tenant = find(tenants, request.tenant_id)
    return {
        **to_json(request),
        "property": to_json(prop) if prop else None,
        "tenant": to_json(tenant) if tenant else None,
    }


def populate_maintenance(request: MaintenanceRequest, store: RecordStore) -> dict:
    """Maintenance request with its property and tenant inlined (or null)."""
    return _inline_links(request, store.load(PROPERTIES), store.load(TENANTS))


def populated_maintenance(store: RecordStore) -> List[dict]:
    """Every maintenance request, populated like populate_maintenance."""
    properties = store.load(PROPERTIES)
    tenants = store.load(TENANTS)
    return [_inline_links(m, properties, tenants) for m in store.load(MAINTENANCE)]


def tenant_with_leases(tenant: Tenant, store: RecordStore) -> dict:
    """Tenant with every lease that references it, each carrying its property."""
    properties = store.load(PROPERTIES)
    leases = []
    for lease in store.load(LEASES):
        if lease.tenant_id != tenant.id:
            continue
        prop = find(properties, lease.property_id)
        leases.append({**to_json(lease), "property": to_json(prop) if prop else None})
    return {**to_json(tenant), "leases": leases}


def enriched_payments(store: RecordStore) -> List[dict]:
    """All payments with tenant and property names attached."""
    tenants = store.load(TENANTS)
    leases = store.load(LEASES)
    properties = store.load(PROPERTIES)
    return [
        enrich_payment(p, tenants, leases, properties).model_dump(by_alias=True, mode="json")
        for p in store.load(PAYMENTS)
    ]
