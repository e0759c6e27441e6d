from datetime import datetime, timezone

from coal_logistics.models.domain import Route, Shipment
from coal_logistics.services.analytics.route_index import RouteIndex


def _route(rid: str, source: str, destination: str, billing: float = 850, vendor: float = 750) -> Route:
    return Route(
        id=rid,
        source=source,
        destination=destination,
        billing_rate_per_ton=billing,
        vendor_rate_per_ton=vendor,
    )


def _shipment(sid: str, route_id: str | None, source: str, destination: str) -> Shipment:
    return Shipment(
        id=sid,
        route_id=route_id,
        source=source,
        destination=destination,
        quantity_tons=10,
        status="Pending",
        created_at=datetime(2024, 3, 5, tzinfo=timezone.utc),
    )


def test_resolve_prefers_route_id():
    index = RouteIndex.build([_route("R1", "Jharia", "Delhi"), _route("R2", "Dhanbad", "Kolkata")])

    resolved = index.resolve(_shipment("S1", "R2", "Jharia", "Delhi"))

    assert resolved is not None
    assert resolved.id == "R2"


def test_resolve_falls_back_to_lane_case_insensitively():
    index = RouteIndex.build([_route("R1", "Jharia", "Delhi")])

    resolved = index.resolve(_shipment("S1", None, "jharia", "DELHI"))

    assert resolved is not None
    assert resolved.id == "R1"


def test_unknown_route_id_still_uses_lane():
    index = RouteIndex.build([_route("R1", "Jharia", "Delhi")])

    resolved = index.resolve(_shipment("S1", "deleted-route", "Jharia", "Delhi"))

    assert resolved is not None
    assert resolved.id == "R1"


def test_unresolvable_shipment_returns_none():
    index = RouteIndex.build([_route("R1", "Jharia", "Delhi")])

    assert index.resolve(_shipment("S1", None, "Jharia", "Mumbai")) is None
    assert index.resolve(_shipment("S2", None, "", "")) is None


def test_later_route_wins_duplicate_lane():
    index = RouteIndex.build([_route("R1", "Jharia", "Delhi"), _route("R9", "JHARIA", "delhi")])

    assert len(index) == 2
    assert index.resolve(_shipment("S1", None, "Jharia", "Delhi")).id == "R9"
