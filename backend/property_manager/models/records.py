"""
Record models for the flat-file collections.
Field names are snake_case in Python and camelCase on disk and over HTTP.
Every field is optional here: older records may lack fields, and unknown
fields are carried through a load/save cycle untouched. A stored value
that does not fit its field (e.g. "type": "apartment") reads as None and
is written back exactly as it was found.
"""
from pydantic import (
    BaseModel,
    ConfigDict,
    PrivateAttr,
    ValidationError,
    model_serializer,
    model_validator,
)
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Optional, Union
from enum import Enum

# Keeps ints as ints so stored numbers round-trip byte for byte
Number = Union[int, float]


class PropertyStatus(str, Enum):
    AVAILABLE = "AVAILABLE"
    OCCUPIED = "OCCUPIED"
    MAINTENANCE = "MAINTENANCE"
    UNAVAILABLE = "UNAVAILABLE"


class PropertyType(str, Enum):
    APARTMENT = "APARTMENT"
    HOUSE = "HOUSE"
    CONDO = "CONDO"
    TOWNHOUSE = "TOWNHOUSE"
    STUDIO = "STUDIO"
    DUPLEX = "DUPLEX"
    OTHER = "OTHER"


class LeaseStatus(str, Enum):
    ACTIVE = "ACTIVE"
    PENDING = "PENDING"
    EXPIRED = "EXPIRED"
    TERMINATED = "TERMINATED"


class PaymentStatus(str, Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    OVERDUE = "OVERDUE"
    CANCELLED = "CANCELLED"


class PaymentType(str, Enum):
    RENT = "RENT"
    LATE_FEE = "LATE_FEE"
    DEPOSIT = "DEPOSIT"
    UTILITY = "UTILITY"
    MAINTENANCE = "MAINTENANCE"
    OTHER = "OTHER"


class PaymentMethod(str, Enum):
    CASH = "CASH"
    CHECK = "CHECK"
    BANK_TRANSFER = "BANK_TRANSFER"
    CREDIT_CARD = "CREDIT_CARD"
    ONLINE_PAYMENT = "ONLINE_PAYMENT"
    MONEY_ORDER = "MONEY_ORDER"


class MaintenancePriority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class MaintenanceStatus(str, Enum):
    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    SCHEDULED = "SCHEDULED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class Record(BaseModel):
    """Base for every stored record: opaque id plus audit timestamps."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    id: Optional[str] = None
    created_at: Optional[str] = None  # ISO-8601 UTC
    updated_at: Optional[str] = None

    # Field name -> stored value that failed validation
    _unparsed: Dict[str, Any] = PrivateAttr(default_factory=dict)

    @classmethod
    def _alias_of(cls, name: str) -> str:
        return cls.model_fields[name].alias or to_camel(name)

    @model_validator(mode="wrap")
    @classmethod
    def _set_aside_bad_values(cls, data, handler):
        try:
            return handler(data)
        except ValidationError as e:
            if not isinstance(data, dict):
                raise
            by_key = {}
            for name in cls.model_fields:
                by_key[name] = name
                by_key[cls._alias_of(name)] = name

            cleaned = dict(data)
            unparsed = {}
            for error in e.errors():
                key = error["loc"][0] if error["loc"] else None
                if key in cleaned and key in by_key:
                    unparsed[by_key[key]] = cleaned.pop(key)
            if not unparsed:
                raise

        record = handler(cleaned)
        record._unparsed = unparsed
        return record

    @model_serializer(mode="wrap")
    def _restore_bad_values(self, handler, info):
        data = handler(self)
        for name, raw in self._unparsed.items():
            # A value assigned since loading replaces the stored one
            if name in self.model_fields_set:
                continue
            data[self._alias_of(name) if info.by_alias else name] = raw
        return data

    def unparsed_fields(self) -> Dict[str, Any]:
        return {k: v for k, v in self._unparsed.items() if k not in self.model_fields_set}


class Property(Record):
    name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    type: Optional[PropertyType] = None
    bedrooms: Optional[int] = None
    bathrooms: Optional[Number] = None
    square_feet: Optional[int] = None
    rent_amount: Optional[Number] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    status: Optional[PropertyStatus] = None  # reconciler-managed for AVAILABLE/OCCUPIED


class Tenant(Record):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    date_of_birth: Optional[str] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None
    notes: Optional[str] = None

    @property
    def full_name(self) -> str:
        return " ".join(p for p in (self.first_name, self.last_name) if p)


class Payment(Record):
    lease_id: Optional[str] = None
    tenant_id: Optional[str] = None
    amount: Optional[Number] = None
    due_date: Optional[str] = None   # YYYY-MM-DD
    paid_date: Optional[str] = None  # YYYY-MM-DD
    status: Optional[PaymentStatus] = None
    type: Optional[PaymentType] = None
    method: Optional[PaymentMethod] = None
    notes: Optional[str] = None


class Lease(Record):
    """A lease is the only source of truth for property occupancy."""
    tenant_id: Optional[str] = None
    property_id: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    monthly_rent: Optional[Number] = None
    security_deposit: Optional[Number] = None
    status: Optional[LeaseStatus] = None
    notes: Optional[str] = None
    # Rent stubs generated at creation time
    payments: Optional[List[Payment]] = None
    payment_count: Optional[int] = None


class MaintenanceRequest(Record):
    property_id: Optional[str] = None
    tenant_id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None  # PLUMBING, HVAC, ELECTRICAL, ...
    priority: Optional[MaintenancePriority] = None
    status: Optional[MaintenanceStatus] = None
    assigned_to: Optional[str] = None
    estimated_cost: Optional[Number] = None
    actual_cost: Optional[Number] = None
    requested_date: Optional[str] = None
    scheduled_date: Optional[str] = None
    completed_date: Optional[str] = None
    notes: Optional[str] = None
