"""User profile schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class ProfileUpdate(BaseModel):
    full_name: Optional[str] = None
    phone_number: Optional[str] = None
    role: Optional[str] = None
    active: Optional[bool] = None


class ProfileModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    role: str
    active: bool
    full_name: Optional[str] = None
    phone_number: Optional[str] = None
    assigned_packages: List[str] = []


class AssignPackagesRequest(BaseModel):
    package_ids: List[str]
