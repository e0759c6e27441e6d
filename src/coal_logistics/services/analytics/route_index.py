"""Route lookup by id with a source/destination fallback."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

from ...models.domain import Route, Shipment


def lane_key(source: str, destination: str) -> str:
    return f"{source}|{destination}".lower()


@dataclass(slots=True)
class RouteIndex:
    by_id: Dict[str, Route] = field(default_factory=dict)
    by_lane: Dict[str, Route] = field(default_factory=dict)

    @classmethod
    def build(cls, routes: Iterable[Route]) -> "RouteIndex":
        index = cls()
        for route in routes:
            index.by_id[route.id] = route
            # later duplicates of a lane win
            index.by_lane[lane_key(route.source, route.destination)] = route
        return index

    def __len__(self) -> int:
        return len(self.by_id)

    def resolve(self, shipment: Shipment) -> Optional[Route]:
        """Route for a shipment, or None when neither the id nor the lane matches."""
        if shipment.route_id and shipment.route_id in self.by_id:
            return self.by_id[shipment.route_id]
        if shipment.source and shipment.destination:
            return self.by_lane.get(lane_key(shipment.source, shipment.destination))
        return None
