"""Material and package schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MaterialCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    unit: str = "tons"
    status: str = "available"


class MaterialUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    unit: Optional[str] = None
    status: Optional[str] = None


class MaterialModel(MaterialCreate):
    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PackageCreate(BaseModel):
    name: str = Field(..., min_length=1)
    created_by_id: str
    status: str = "pending"
    shipment_id: Optional[str] = None


class PackageUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    status: Optional[str] = None
    shipment_id: Optional[str] = None


class PackageModel(PackageCreate):
    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
