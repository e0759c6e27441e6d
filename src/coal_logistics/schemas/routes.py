"""Route schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RouteCreate(BaseModel):
    source: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)
    distance_km: float = Field(..., ge=0)
    billing_rate_per_ton: float = Field(..., ge=0)
    vendor_rate_per_ton: float = Field(..., ge=0)
    estimated_time: float = Field(default=0, ge=0, description="Estimated travel time in hours.")
    assigned_package_id: Optional[str] = None


class RouteUpdate(BaseModel):
    source: Optional[str] = Field(default=None, min_length=1)
    destination: Optional[str] = Field(default=None, min_length=1)
    distance_km: Optional[float] = Field(default=None, ge=0)
    billing_rate_per_ton: Optional[float] = Field(default=None, ge=0)
    vendor_rate_per_ton: Optional[float] = Field(default=None, ge=0)
    estimated_time: Optional[float] = Field(default=None, ge=0)
    assigned_package_id: Optional[str] = None


class RouteModel(RouteCreate):
    model_config = ConfigDict(from_attributes=True)

    id: str
    package_name: Optional[str] = None
