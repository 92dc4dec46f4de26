# Models package - record types for the JSON collections, request payloads,
# and dashboard response shapes.

from .records import (
    PropertyStatus,
    PropertyType,
    LeaseStatus,
    PaymentStatus,
    PaymentType,
    PaymentMethod,
    MaintenancePriority,
    MaintenanceStatus,
    Record,
    Property,
    Tenant,
    Lease,
    Payment,
    MaintenanceRequest,
)

from .payloads import (
    PropertyCreate,
    PropertyUpdate,
    TenantCreate,
    TenantUpdate,
    LeaseCreate,
    LeaseUpdate,
    PaymentCreate,
    PaymentUpdate,
    MaintenanceCreate,
    MaintenanceUpdate,
)

from .dashboard import (
    DashboardMetrics,
    DashboardPayment,
    DashboardSummary,
    TenantRef,
    PropertyRef,
    LeaseRef,
)
