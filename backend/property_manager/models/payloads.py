"""
Request bodies for the CRUD routes.
Create payloads enforce required fields; update payloads are partial and
only the fields actually sent are merged over the stored record.
"""
from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from .records import (
    LeaseStatus,
    MaintenancePriority,
    MaintenanceStatus,
    PaymentMethod,
    PaymentStatus,
    PaymentType,
    PropertyStatus,
    PropertyType,
)


class Payload(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def changes(self) -> dict:
        """Fields the client sent, JSON-ready, keyed by attribute name."""
        data = self.model_dump(mode="json", exclude_unset=True)
        for key in ("id", "created_at", "createdAt", "updated_at", "updatedAt"):
            data.pop(key, None)
        return data


# =========================================================================
# Properties
# =========================================================================

class PropertyCreate(Payload):
    name: str = Field(min_length=1)
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    type: Optional[PropertyType] = None
    bedrooms: Optional[int] = Field(default=None, ge=0)
    bathrooms: Optional[float] = Field(default=None, ge=0)
    square_feet: Optional[int] = Field(default=None, ge=0)
    rent_amount: Optional[float] = Field(default=None, ge=0)
    description: Optional[str] = None
    image_url: Optional[str] = None
    status: PropertyStatus = PropertyStatus.AVAILABLE


class PropertyUpdate(Payload):
    name: Optional[str] = Field(default=None, min_length=1)
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    type: Optional[PropertyType] = None
    bedrooms: Optional[int] = Field(default=None, ge=0)
    bathrooms: Optional[float] = Field(default=None, ge=0)
    square_feet: Optional[int] = Field(default=None, ge=0)
    rent_amount: Optional[float] = Field(default=None, ge=0)
    description: Optional[str] = None
    image_url: Optional[str] = None
    status: Optional[PropertyStatus] = None


# =========================================================================
# Tenants
# =========================================================================

class TenantCreate(Payload):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    date_of_birth: Optional[date] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None
    notes: Optional[str] = None


class TenantUpdate(Payload):
    first_name: Optional[str] = Field(default=None, min_length=1)
    last_name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    date_of_birth: Optional[date] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None
    notes: Optional[str] = None


# =========================================================================
# Leases
# =========================================================================

class LeaseCreate(Payload):
    tenant_id: str = Field(min_length=1)
    property_id: str = Field(min_length=1)
    start_date: date
    end_date: date
    monthly_rent: float = Field(gt=0)
    security_deposit: float = Field(default=0, ge=0)
    status: LeaseStatus = LeaseStatus.ACTIVE
    notes: str = ""
    generate_payments: bool = True

    @model_validator(mode="after")
    def _check_term(self):
        if self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self


class LeaseUpdate(Payload):
    tenant_id: Optional[str] = Field(default=None, min_length=1)
    property_id: Optional[str] = Field(default=None, min_length=1)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    monthly_rent: Optional[float] = Field(default=None, gt=0)
    security_deposit: Optional[float] = Field(default=None, ge=0)
    status: Optional[LeaseStatus] = None
    notes: Optional[str] = None


# =========================================================================
# Payments
# =========================================================================

class PaymentCreate(Payload):
    lease_id: str = Field(min_length=1)
    tenant_id: Optional[str] = None
    amount: float = Field(gt=0)
    due_date: date
    paid_date: Optional[date] = None
    status: PaymentStatus = PaymentStatus.PENDING
    type: PaymentType = PaymentType.RENT
    method: Optional[PaymentMethod] = None
    notes: Optional[str] = None

    @model_validator(mode="after")
    def _check_paid_date(self):
        if self.status == PaymentStatus.PAID and self.paid_date is None:
            raise ValueError("paidDate is required when status is PAID")
        return self


class PaymentUpdate(Payload):
    lease_id: Optional[str] = Field(default=None, min_length=1)
    tenant_id: Optional[str] = None
    amount: Optional[float] = Field(default=None, gt=0)
    due_date: Optional[date] = None
    paid_date: Optional[date] = None
    status: Optional[PaymentStatus] = None
    type: Optional[PaymentType] = None
    method: Optional[PaymentMethod] = None
    notes: Optional[str] = None


# =========================================================================
# Maintenance
# =========================================================================

class MaintenanceCreate(Payload):
    property_id: str = Field(min_length=1)
    tenant_id: Optional[str] = None
    title: str = Field(min_length=1)
    description: Optional[str] = None
    category: Optional[str] = None
    priority: MaintenancePriority = MaintenancePriority.MEDIUM
    assigned_to: Optional[str] = None
    estimated_cost: Optional[float] = Field(default=None, ge=0)
    scheduled_date: Optional[date] = None
    notes: Optional[str] = None


class MaintenanceUpdate(Payload):
    property_id: Optional[str] = Field(default=None, min_length=1)
    tenant_id: Optional[str] = None
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    category: Optional[str] = None
    priority: Optional[MaintenancePriority] = None
    status: Optional[MaintenanceStatus] = None
    assigned_to: Optional[str] = None
    estimated_cost: Optional[float] = Field(default=None, ge=0)
    actual_cost: Optional[float] = Field(default=None, ge=0)
    scheduled_date: Optional[date] = None
    completed_date: Optional[date] = None
    notes: Optional[str] = None
