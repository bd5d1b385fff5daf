"""Railway stations placed on the city map."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RailwayStation:
    """A railway station with its code, city and map position."""

    station_id: str = ""
    name: str = ""
    code: str = ""
    city: str = ""
    vertex_id: str = ""
    latitude: float = 0.0
    longitude: float = 0.0

    def is_valid(self) -> bool:
        """A station needs an id, a name, a code and a graph vertex id."""
        return all((self.station_id, self.name, self.code, self.vertex_id))

    def describe(self) -> str:
        """Return a multi-line description of the station."""
        return "\n".join(
            [
                f"Station ID: {self.station_id}",
                f"Name: {self.name}",
                f"Station Code: {self.code}",
                f"City: {self.city}",
                f"Vertex ID: {self.vertex_id}",
                f"Coordinates: ({self.latitude:g}, {self.longitude:g})",
            ]
        )