"""Transporter and vehicle schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TransporterCreate(BaseModel):
    name: str = Field(..., min_length=1)
    gstn: str
    contact_person: str
    contact_number: str
    address: str


class TransporterUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    gstn: Optional[str] = None
    contact_person: Optional[str] = None
    contact_number: Optional[str] = None
    address: Optional[str] = None


class TransporterModel(TransporterCreate):
    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: Optional[datetime] = None


class VehicleCreate(BaseModel):
    transporter_id: str
    vehicle_number: str = Field(..., min_length=1)
    vehicle_type: str = "Truck"
    capacity: float = Field(..., ge=0)
    status: str = "Available"
    last_maintenance: Optional[datetime] = None


class VehicleUpdate(BaseModel):
    transporter_id: Optional[str] = None
    vehicle_number: Optional[str] = Field(default=None, min_length=1)
    vehicle_type: Optional[str] = None
    capacity: Optional[float] = Field(default=None, ge=0)
    status: Optional[str] = None
    last_maintenance: Optional[datetime] = None


class VehicleModel(VehicleCreate):
    model_config = ConfigDict(from_attributes=True)

    id: str
    transporter_name: Optional[str] = None
