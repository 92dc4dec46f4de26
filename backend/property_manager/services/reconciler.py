"""
Property status reconciliation.

Property.status is derived from the leases: a property with at least one
ACTIVE lease is OCCUPIED, and an OCCUPIED property without one goes back to
AVAILABLE. MAINTENANCE and UNAVAILABLE are set by users and never changed
here, whatever the leases say. Neither is a status value we do not recognize.
"""
import logging
from typing import Iterable, List, Optional, Set

from property_manager.db.store import LEASES, PROPERTIES, RecordStore
from property_manager.models import Lease, LeaseStatus, Property, PropertyStatus
from property_manager.services.timeframe import utc_now_iso

logger = logging.getLogger(__name__)

PROTECTED_STATUSES = {PropertyStatus.MAINTENANCE, PropertyStatus.UNAVAILABLE}


def occupied_property_ids(leases: Iterable[Lease]) -> Set[str]:
    """Property ids referenced by at least one ACTIVE lease."""
    return {
        lease.property_id
        for lease in leases
        if lease.status == LeaseStatus.ACTIVE and lease.property_id
    }


def reconcile_statuses(
    properties: List[Property],
    leases: Iterable[Lease],
    timestamp: Optional[str] = None,
) -> List[Property]:
    """
    Bring property statuses in line with the ACTIVE leases, in place.

    Returns the properties whose status changed (each gets updatedAt
    stamped). An empty result means nothing needs to be written.
    """
    occupied_ids = occupied_property_ids(leases)
    stamp = timestamp or utc_now_iso()
    changed = []

    for prop in properties:
        if prop.status in PROTECTED_STATUSES:
            continue
        # Unrecognized stored status, left as found
        if "status" in prop.unparsed_fields():
            continue

        should_be_occupied = prop.id in occupied_ids
        currently_occupied = prop.status == PropertyStatus.OCCUPIED

        if should_be_occupied and not currently_occupied:
            prop.status = PropertyStatus.OCCUPIED
        elif not should_be_occupied and currently_occupied:
            prop.status = PropertyStatus.AVAILABLE
        else:
            continue

        prop.updated_at = stamp
        changed.append(prop)

    return changed


class StatusReconciler:
    """Runs reconciliation against the record store."""

    def __init__(self, store: RecordStore):
        self.store = store

    def reconcile(self) -> List[Property]:
        """
        Re-derive every property status and persist the property collection
        only when at least one status changed. Storage errors propagate.
        """
        leases = self.store.load(LEASES)
        properties = self.store.load(PROPERTIES)

        changed = reconcile_statuses(properties, leases)
        if not changed:
            logger.debug("[RECONCILE] Property statuses already consistent")
            return []

        self.store.save(PROPERTIES, properties)
        for prop in changed:
            logger.info(f"[RECONCILE] Property {prop.id} set to {prop.status.value}")
        return changed

    def reconcile_safely(self) -> List[Property]:
        """
        Best-effort reconcile used after lease mutations.

        A failure here is logged and swallowed: the lease change that
        triggered it has already been saved and stays saved, and the property
        status is corrected by the next successful run.
        """
        try:
            return self.reconcile()
        except Exception as e:
            logger.error(f"[RECONCILE] Failed to sync property statuses: {e}", exc_info=True)
            return []
