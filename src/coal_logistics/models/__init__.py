"""Domain value objects."""

from .domain import Material, Package, Profile, Route, Shipment, Transporter, Vehicle

__all__ = ["Material", "Package", "Profile", "Route", "Shipment", "Transporter", "Vehicle"]
