"""Row coercion from Supabase responses into domain objects."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Mapping, Optional, TypeVar

from .errors import RecordValidationError
from ..models.domain import Material, Package, Profile, Route, Shipment, Transporter, Vehicle

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _coerce_float(value: Any, field_name: str, default: float = 0.0) -> float:
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        raise RecordValidationError(f"Unable to parse float for '{field_name}' from value '{value}'")
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value).replace(",", "").strip())
    except ValueError as exc:
        raise RecordValidationError(f"Unable to parse float for '{field_name}' from value '{value}'") from exc


def _coerce_datetime(value: Any, field_name: str) -> Optional[datetime]:
    """Parse ISO-8601 timestamps; naive values are taken as UTC."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as exc:
            raise RecordValidationError(f"Unable to parse timestamp for '{field_name}' from value '{value}'") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _required_str(row: Mapping[str, Any], field_name: str) -> str:
    value = row.get(field_name)
    if value is None or str(value).strip() == "":
        raise RecordValidationError(f"Missing required field '{field_name}'")
    return str(value)


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None


def _joined(row: Mapping[str, Any], relation: str, column: str) -> Any:
    nested = row.get(relation)
    if isinstance(nested, list):
        nested = nested[0] if nested else None
    if isinstance(nested, Mapping):
        return nested.get(column)
    return None


def route_from_row(row: Mapping[str, Any]) -> Route:
    return Route(
        id=_required_str(row, "id"),
        source=_required_str(row, "source"),
        destination=_required_str(row, "destination"),
        billing_rate_per_ton=_coerce_float(row.get("billing_rate_per_ton"), "billing_rate_per_ton"),
        vendor_rate_per_ton=_coerce_float(row.get("vendor_rate_per_ton"), "vendor_rate_per_ton"),
        distance_km=_coerce_float(row.get("distance_km"), "distance_km"),
        estimated_time=_coerce_float(row.get("estimated_time"), "estimated_time"),
        assigned_package_id=_optional_str(row.get("assigned_package_id")),
        package_name=_optional_str(_joined(row, "packages", "name")),
        created_at=_coerce_datetime(row.get("created_at"), "created_at"),
    )


def shipment_from_row(row: Mapping[str, Any]) -> Shipment:
    created_at = _coerce_datetime(row.get("created_at"), "created_at")
    if created_at is None:
        raise RecordValidationError("Missing required field 'created_at'")

    billing = _joined(row, "routes", "billing_rate_per_ton")
    vendor = _joined(row, "routes", "vendor_rate_per_ton")
    return Shipment(
        id=_required_str(row, "id"),
        source=str(row.get("source") or ""),
        destination=str(row.get("destination") or ""),
        quantity_tons=_coerce_float(row.get("quantity_tons"), "quantity_tons"),
        # Column default in the shipments table
        status=str(row.get("status") or "").strip() or "Pending",
        created_at=created_at,
        route_id=_optional_str(row.get("route_id")),
        transporter_id=_optional_str(row.get("transporter_id")),
        vehicle_id=_optional_str(row.get("vehicle_id")),
        departure_time=_coerce_datetime(row.get("departure_time"), "departure_time"),
        arrival_time=_coerce_datetime(row.get("arrival_time"), "arrival_time"),
        remarks=_optional_str(row.get("remarks")),
        package_id=_optional_str(row.get("package_id")),
        material_id=_optional_str(row.get("material_id")),
        transporter_name=_optional_str(_joined(row, "transporters", "name")),
        vehicle_number=_optional_str(_joined(row, "vehicles", "vehicle_number")),
        billing_rate_per_ton=_coerce_float(billing, "billing_rate_per_ton") if billing is not None else None,
        vendor_rate_per_ton=_coerce_float(vendor, "vendor_rate_per_ton") if vendor is not None else None,
    )


def transporter_from_row(row: Mapping[str, Any]) -> Transporter:
    return Transporter(
        id=_required_str(row, "id"),
        name=_required_str(row, "name"),
        gstn=str(row.get("gstn") or ""),
        contact_person=str(row.get("contact_person") or ""),
        contact_number=str(row.get("contact_number") or ""),
        address=str(row.get("address") or ""),
        created_at=_coerce_datetime(row.get("created_at"), "created_at"),
    )


def vehicle_from_row(row: Mapping[str, Any]) -> Vehicle:
    return Vehicle(
        id=_required_str(row, "id"),
        transporter_id=str(row.get("transporter_id") or ""),
        vehicle_number=_required_str(row, "vehicle_number"),
        vehicle_type=str(row.get("vehicle_type") or ""),
        capacity=_coerce_float(row.get("capacity"), "capacity"),
        status=str(row.get("status") or "Available"),
        last_maintenance=_coerce_datetime(row.get("last_maintenance"), "last_maintenance"),
        transporter_name=_optional_str(_joined(row, "transporters", "name")),
    )


def material_from_row(row: Mapping[str, Any]) -> Material:
    return Material(
        id=_required_str(row, "id"),
        name=_required_str(row, "name"),
        unit=str(row.get("unit") or "tons"),
        status=str(row.get("status") or "available"),
        description=_optional_str(row.get("description")),
        created_at=_coerce_datetime(row.get("created_at"), "created_at"),
        updated_at=_coerce_datetime(row.get("updated_at"), "updated_at"),
    )


def package_from_row(row: Mapping[str, Any]) -> Package:
    return Package(
        id=_required_str(row, "id"),
        name=_required_str(row, "name"),
        status=str(row.get("status") or "pending"),
        created_by_id=str(row.get("created_by_id") or ""),
        shipment_id=_optional_str(row.get("shipment_id")),
        created_at=_coerce_datetime(row.get("created_at"), "created_at"),
        updated_at=_coerce_datetime(row.get("updated_at"), "updated_at"),
    )


def profile_from_row(row: Mapping[str, Any]) -> Profile:
    return Profile(
        id=_required_str(row, "id"),
        username=_required_str(row, "username"),
        role=str(row.get("role") or "user"),
        active=bool(row.get("active", True)),
        full_name=_optional_str(row.get("full_name")),
        phone_number=_optional_str(row.get("phone_number")),
        assigned_packages=list(row.get("assigned_packages") or []),
    )


def parse_rows(rows: Iterable[Mapping[str, Any]], parser: Callable[[Mapping[str, Any]], T], table: str) -> list[T]:
    """Parse rows, skipping (and logging) any that fail validation."""
    parsed: list[T] = []
    for row in rows:
        try:
            parsed.append(parser(row))
        except RecordValidationError as e:
            logger.warning(f"Skipping invalid {table} row {row.get('id')!r}: {e}")
    return parsed
