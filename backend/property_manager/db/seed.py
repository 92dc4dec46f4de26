"""
Sample data for a fresh install.

Writes a small, internally consistent portfolio (three properties, three
tenants, leases, a few payments and maintenance requests) into an empty data
directory. Existing collection files are never overwritten.

Usage:
    python -m property_manager.db.seed                    # uses PROPERTY_MANAGER_DATA_DIR or ./data
    python -m property_manager.db.seed --data-dir /tmp/pm
"""
import argparse
import logging
from typing import Dict, List

from property_manager.db.store import (
    COLLECTIONS,
    LEASES,
    MAINTENANCE,
    PAYMENTS,
    PROPERTIES,
    TENANTS,
    RecordStore,
)

logger = logging.getLogger(__name__)

_CREATED = "2024-01-01T00:00:00.000Z"

SAMPLE_DATA: Dict[str, List[dict]] = {
    PROPERTIES: [
        {
            "id": "1", "name": "Sunset Apartments Unit 1A", "address": "123 Main Street, Unit 1A",
            "city": "Springfield", "state": "IL", "zipCode": "62701", "type": "APARTMENT",
            "bedrooms": 2, "bathrooms": 1.5, "squareFeet": 950, "rentAmount": 1200.0,
            "description": "2-bedroom apartment with modern amenities", "imageUrl": None,
            "status": "OCCUPIED", "createdAt": _CREATED, "updatedAt": _CREATED,
        },
        {
            "id": "2", "name": "Oak Hill House", "address": "456 Oak Street",
            "city": "Springfield", "state": "IL", "zipCode": "62702", "type": "HOUSE",
            "bedrooms": 3, "bathrooms": 2.0, "squareFeet": 1500, "rentAmount": 1800.0,
            "description": "Family home with backyard", "imageUrl": None,
            "status": "OCCUPIED", "createdAt": _CREATED, "updatedAt": _CREATED,
        },
        {
            "id": "3", "name": "Downtown Studio", "address": "789 City Center Blvd",
            "city": "Springfield", "state": "IL", "zipCode": "62703", "type": "STUDIO",
            "bedrooms": 0, "bathrooms": 1.0, "squareFeet": 600, "rentAmount": 900.0,
            "description": "Studio in the heart of downtown", "imageUrl": None,
            "status": "MAINTENANCE", "createdAt": _CREATED, "updatedAt": _CREATED,
        },
    ],
    TENANTS: [
        {
            "id": "1", "firstName": "John", "lastName": "Smith", "email": "john.smith@email.com",
            "phone": "(555) 123-4567", "dateOfBirth": "1985-03-15",
            "emergencyContactName": "Jane Smith", "emergencyContactPhone": "(555) 987-6543",
            "notes": "Always pays on time", "createdAt": _CREATED, "updatedAt": _CREATED,
        },
        {
            "id": "2", "firstName": "Emily", "lastName": "Johnson", "email": "emily.johnson@email.com",
            "phone": "(555) 234-5678", "dateOfBirth": "1990-07-22",
            "emergencyContactName": "Mike Johnson", "emergencyContactPhone": "(555) 876-5432",
            "notes": "", "createdAt": _CREATED, "updatedAt": _CREATED,
        },
        {
            "id": "3", "firstName": "Michael", "lastName": "Brown", "email": "michael.brown@email.com",
            "phone": "(555) 345-6789", "dateOfBirth": "1988-11-10",
            "emergencyContactName": "Sarah Brown", "emergencyContactPhone": "(555) 765-4321",
            "notes": "Previous tenant", "createdAt": _CREATED, "updatedAt": _CREATED,
        },
    ],
    LEASES: [
        {
            "id": "1", "tenantId": "1", "propertyId": "1", "startDate": "2025-01-01",
            "endDate": "2025-12-31", "monthlyRent": 1200.0, "securityDeposit": 1200.0,
            "status": "ACTIVE", "notes": "", "createdAt": _CREATED, "updatedAt": _CREATED,
        },
        {
            "id": "2", "tenantId": "2", "propertyId": "2", "startDate": "2025-09-01",
            "endDate": "2026-08-31", "monthlyRent": 1800.0, "securityDeposit": 1800.0,
            "status": "ACTIVE", "notes": "", "createdAt": _CREATED, "updatedAt": _CREATED,
        },
        {
            "id": "3", "tenantId": "3", "propertyId": "3", "startDate": "2023-06-01",
            "endDate": "2024-05-31", "monthlyRent": 900.0, "securityDeposit": 900.0,
            "status": "EXPIRED", "notes": "", "createdAt": _CREATED, "updatedAt": _CREATED,
        },
    ],
    PAYMENTS: [
        {
            "id": "1", "leaseId": "1", "tenantId": "1", "amount": 1200.0, "type": "RENT",
            "status": "PAID", "dueDate": "2025-10-01", "paidDate": "2025-09-30",
            "method": "BANK_TRANSFER", "notes": "October rent payment",
            "createdAt": _CREATED, "updatedAt": _CREATED,
        },
        {
            "id": "2", "leaseId": "1", "tenantId": "1", "amount": 1200.0, "type": "RENT",
            "status": "PENDING", "dueDate": "2025-11-01", "paidDate": None, "method": None,
            "notes": "November rent payment", "createdAt": _CREATED, "updatedAt": _CREATED,
        },
        {
            "id": "3", "leaseId": "2", "tenantId": "2", "amount": 1800.0, "type": "RENT",
            "status": "PAID", "dueDate": "2025-10-01", "paidDate": "2025-10-02",
            "method": "CHECK", "notes": "October rent payment",
            "createdAt": _CREATED, "updatedAt": _CREATED,
        },
        {
            "id": "4", "leaseId": "2", "tenantId": "2", "amount": 1800.0, "type": "RENT",
            "status": "OVERDUE", "dueDate": "2025-11-01", "paidDate": None, "method": None,
            "notes": "November rent payment", "createdAt": _CREATED, "updatedAt": _CREATED,
        },
        {
            "id": "5", "leaseId": "2", "tenantId": "2", "amount": 50.0, "type": "LATE_FEE",
            "status": "PENDING", "dueDate": "2025-11-05", "paidDate": None, "method": None,
            "notes": "Late fee for November rent", "createdAt": _CREATED, "updatedAt": _CREATED,
        },
    ],
    MAINTENANCE: [
        {
            "id": "1", "propertyId": "1", "tenantId": "1", "title": "Leaky Faucet in Kitchen",
            "description": "The kitchen faucet has been dripping for a week.",
            "category": "PLUMBING", "priority": "MEDIUM", "status": "OPEN", "assignedTo": None,
            "estimatedCost": 150.0, "actualCost": None, "requestedDate": "2025-10-15",
            "scheduledDate": None, "completedDate": None, "notes": "",
            "createdAt": _CREATED, "updatedAt": _CREATED,
        },
        {
            "id": "2", "propertyId": "2", "tenantId": "2", "title": "Broken Dishwasher",
            "description": "Dishwasher has no power.", "category": "APPLIANCE",
            "priority": "HIGH", "status": "IN_PROGRESS", "assignedTo": "Mike's Appliance Repair",
            "estimatedCost": 300.0, "actualCost": None, "requestedDate": "2025-10-12",
            "scheduledDate": "2025-10-20", "completedDate": None, "notes": "",
            "createdAt": _CREATED, "updatedAt": _CREATED,
        },
        {
            "id": "3", "propertyId": "3", "tenantId": None, "title": "Ceiling Light Fixture Loose",
            "description": "Living room fixture is wobbling.", "category": "ELECTRICAL",
            "priority": "MEDIUM", "status": "COMPLETED", "assignedTo": "Bright Electric Co.",
            "estimatedCost": 100.0, "actualCost": 85.0, "requestedDate": "2025-10-05",
            "scheduledDate": "2025-10-08", "completedDate": "2025-10-08", "notes": "",
            "createdAt": _CREATED, "updatedAt": _CREATED,
        },
    ],
}


def seed_if_empty(store: RecordStore) -> List[str]:
    """
    Write sample collections for every collection file that does not exist yet.
    Returns the names of the collections that were written.
    """
    written = []
    for name in COLLECTIONS:
        if store.exists(name):
            continue
        store.save(name, SAMPLE_DATA.get(name, []))
        written.append(name)

    if written:
        logger.info(f"[SEED] Wrote sample data for {', '.join(written)} in {store.data_dir}")
    return written


def main():
    from property_manager.config import get_settings

    parser = argparse.ArgumentParser(description="Seed the data directory with sample records")
    parser.add_argument("--data-dir", default=None, help="Target directory (defaults to settings)")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    store = RecordStore(args.data_dir or get_settings().data_dir)
    written = seed_if_empty(store)
    if written:
        print(f"✅ Seeded {len(written)} collection(s) in {store.data_dir}")
    else:
        print(f"Nothing to do: all collections already exist in {store.data_dir}")


if __name__ == "__main__":
    main()
