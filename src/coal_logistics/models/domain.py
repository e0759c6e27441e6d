"""Domain models for logistics records."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(slots=True, frozen=True)
class Route:
    """A fixed source to destination lane with billing and vendor rates per ton."""

    id: str
    source: str
    destination: str
    billing_rate_per_ton: float
    vendor_rate_per_ton: float
    distance_km: float = 0.0
    estimated_time: float = 0.0
    assigned_package_id: Optional[str] = None
    package_name: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(slots=True)
class Shipment:
    """A single transport movement of coal, optionally linked to a route."""

    id: str
    source: str
    destination: str
    quantity_tons: float
    status: str
    created_at: datetime
    route_id: Optional[str] = None
    transporter_id: Optional[str] = None
    vehicle_id: Optional[str] = None
    departure_time: Optional[datetime] = None
    arrival_time: Optional[datetime] = None
    remarks: Optional[str] = None
    package_id: Optional[str] = None
    material_id: Optional[str] = None
    transporter_name: Optional[str] = None
    vehicle_number: Optional[str] = None
    billing_rate_per_ton: Optional[float] = None
    vendor_rate_per_ton: Optional[float] = None


@dataclass(slots=True)
class Transporter:
    id: str
    name: str
    gstn: str
    contact_person: str
    contact_number: str
    address: str
    created_at: Optional[datetime] = None


@dataclass(slots=True)
class Vehicle:
    id: str
    transporter_id: str
    vehicle_number: str
    vehicle_type: str
    capacity: float
    status: str
    last_maintenance: Optional[datetime] = None
    transporter_name: Optional[str] = None


@dataclass(slots=True)
class Material:
    id: str
    name: str
    unit: str
    status: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(slots=True)
class Package:
    id: str
    name: str
    status: str
    created_by_id: str
    shipment_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(slots=True)
class Profile:
    """A user profile row; authentication itself lives in Supabase Auth."""

    id: str
    username: str
    role: str
    active: bool
    full_name: Optional[str] = None
    phone_number: Optional[str] = None
    assigned_packages: list[str] = field(default_factory=list)
