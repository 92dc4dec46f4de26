"""
Pydantic models for the dashboard response.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Optional

from .records import Payment


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DashboardMetrics(_CamelModel):
    """Headline numbers for the dashboard cards."""
    total_properties: int
    occupied_properties: int      # Distinct existing properties with an ACTIVE lease
    total_tenants: int
    active_leases: int
    pending_payments: int         # PENDING and due in the reference month
    overdue_payments: int = 0
    open_maintenance_requests: int
    occupancy_rate: int           # Whole percent, 0 when there are no properties
    total_monthly_income: float   # Expected rent from ACTIVE leases, not collected


class TenantRef(_CamelModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class PropertyRef(_CamelModel):
    name: Optional[str] = None


class LeaseRef(_CamelModel):
    property: PropertyRef


class DashboardPayment(Payment):
    """A payment joined with its tenant and property for display."""
    tenant_name: Optional[str] = None
    property_name: Optional[str] = None
    tenant: Optional[TenantRef] = None
    lease: Optional[LeaseRef] = None


class DashboardSummary(_CamelModel):
    """Complete dashboard payload."""
    as_of: str
    metrics: DashboardMetrics
    recent_payments: List[DashboardPayment]
    upcoming_payments: List[DashboardPayment]
