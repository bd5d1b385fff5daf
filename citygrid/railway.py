"""Registry of railway stations with lookup, nearest-station and distance queries."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from citygrid.station import RailwayStation

EARTH_RADIUS_KM = 6371.0
STATION_FIELDS = 5

_BLANKS = " \t"


def _parse_number(text: str) -> float:
    """Read a signed decimal number, ignoring any stray characters."""
    negative = text.startswith("-")
    if negative:
        text = text[1:]
    value = 0.0
    fraction = 0.1
    seen_point = False
    for ch in text:
        if "0" <= ch <= "9":
            digit = ord(ch) - ord("0")
            if seen_point:
                value += digit * fraction
                fraction *= 0.1
            else:
                value = value * 10.0 + digit
        elif ch == "." and not seen_point:
            seen_point = True
    return -value if negative else value


def parse_coordinates(text: str) -> tuple[float, float]:
    """Parse ``"lat, lon"`` (optionally wrapped in double quotes).

    Raises ValueError when the text is empty or has no comma.
    """
    if not text:
        raise ValueError("empty coordinates")
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        text = text[1:-1]
    lat_text, comma, lon_text = text.partition(",")
    if not comma:
        raise ValueError(f"coordinates have no comma: {text!r}")
    return (
        _parse_number(lat_text.strip(_BLANKS)),
        _parse_number(lon_text.strip(_BLANKS)),
    )


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometres between two points in degrees."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2.0) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2.0) ** 2
    )
    c = 2.0 * math.atan2(math.sqrt(a), math.sqrt(1.0 - a))
    return EARTH_RADIUS_KM * c


def _distance_between(a: RailwayStation, b: RailwayStation) -> float:
    return haversine_distance(a.latitude, a.longitude, b.latitude, b.longitude)


class RailwayManager:
    """Keeps railway stations indexed by id, name and code, in insertion order."""

    def __init__(self) -> None:
        self._by_id: dict[str, RailwayStation] = {}
        self._by_name: dict[str, RailwayStation] = {}
        self._by_code: dict[str, RailwayStation] = {}

    def add_station(self, station: RailwayStation) -> bool:
        """Register a station; False if a station with that id already exists.

        Raises ValueError for a station missing its id, name, code or vertex id.
        """
        if not station.is_valid():
            raise ValueError(f"invalid railway station: {station!r}")
        if station.station_id in self._by_id:
            return False
        self._by_id[station.station_id] = station
        self._by_name[station.name] = station
        self._by_code[station.code] = station
        return True

    def find_by_id(self, station_id: str) -> RailwayStation | None:
        """Return the station with this id, if any."""
        return self._by_id.get(station_id) if station_id else None

    def find_by_name(self, name: str) -> RailwayStation | None:
        """Return the station with this name, if any."""
        return self._by_name.get(name) if name else None

    def find_by_code(self, code: str) -> RailwayStation | None:
        """Return the station with this code, if any."""
        return self._by_code.get(code) if code else None

    def stations(self) -> list[RailwayStation]:
        """All stations in the order they were added."""
        return list(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)

    def describe_all(self) -> str:
        """Return a numbered description of every station."""
        if not self._by_id:
            return "No railway stations registered.\n"
        parts = [f"Registered Railway Stations ({len(self)} stations):\n"]
        for number, station in enumerate(self._by_id.values(), start=1):
            parts.append(f"  [{number}] {station.describe()}\n\n")
        return "".join(parts)

    def nearest_station(self, latitude: float, longitude: float) -> RailwayStation | None:
        """Return the station closest to the point, or None if there are none."""
        if not self._by_id:
            return None
        return min(
            self._by_id.values(),
            key=lambda s: haversine_distance(latitude, longitude, s.latitude, s.longitude),
        )

    def _require(self, station_id: str) -> RailwayStation:
        station = self.find_by_id(station_id)
        if station is None:
            raise KeyError(station_id)
        return station

    def rail_distance(self, from_id: str, to_id: str) -> float:
        """Straight-line rail distance in km; KeyError for an unknown station."""
        return _distance_between(self._require(from_id), self._require(to_id))

    def station_path(self, from_id: str, to_id: str) -> tuple[list[str], float]:
        """Direct route between two stations and its length in km.

        Raises KeyError for an unknown station.
        """
        distance = self.rail_distance(from_id, to_id)
        return [from_id, to_id], distance

    def load_stations(self, rows: Iterable[Sequence[str]]) -> int:
        """Add stations from rows of StationID, Name, Code, City, Coordinates.

        Short rows, rows with bad coordinates, invalid stations and duplicates
        are skipped. Returns the number of stations added.
        """
        added = 0
        for row in rows:
            fields = list(row)
            if len(fields) < STATION_FIELDS:
                continue
            station_id, name, code, city, coordinates = fields[:STATION_FIELDS]
            try:
                latitude, longitude = parse_coordinates(coordinates)
                station = RailwayStation(
                    station_id, name, code, city, station_id, latitude, longitude
                )
                if self.add_station(station):
                    added += 1
            except ValueError:
                continue
        return added

    def clear(self) -> None:
        """Remove every station."""
        self._by_id.clear()
        self._by_name.clear()
        self._by_code.clear()