"""Shipment schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ShipmentCreate(BaseModel):
    transporter_id: str
    vehicle_id: str
    source: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)
    quantity_tons: float = Field(..., ge=0)
    status: str = "Pending"
    departure_time: datetime
    arrival_time: Optional[datetime] = None
    remarks: Optional[str] = None
    route_id: Optional[str] = Field(default=None, description="Matched from source/destination when omitted.")
    package_id: Optional[str] = None
    material_id: Optional[str] = None


class ShipmentUpdate(BaseModel):
    transporter_id: Optional[str] = None
    vehicle_id: Optional[str] = None
    source: Optional[str] = Field(default=None, min_length=1)
    destination: Optional[str] = Field(default=None, min_length=1)
    quantity_tons: Optional[float] = Field(default=None, ge=0)
    status: Optional[str] = None
    departure_time: Optional[datetime] = None
    arrival_time: Optional[datetime] = None
    remarks: Optional[str] = None
    route_id: Optional[str] = None
    package_id: Optional[str] = None
    material_id: Optional[str] = None


class ShipmentModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

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
