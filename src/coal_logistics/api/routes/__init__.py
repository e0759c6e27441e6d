"""Route group exports."""

from . import analytics, health, materials, packages, reports, routes, shipments, transporters, users, vehicles

__all__ = [
    "analytics",
    "health",
    "materials",
    "packages",
    "reports",
    "routes",
    "shipments",
    "transporters",
    "users",
    "vehicles",
]
