import math

import pytest

from citygrid.railway import RailwayManager, haversine_distance, parse_coordinates
from citygrid.station import RailwayStation


def _station(sid, name, code, lat, lon):
    return RailwayStation(sid, name, code, "Islamabad", sid, lat, lon)


@pytest.fixture
def manager():
    m = RailwayManager()
    m.add_station(_station("RLY01", "Central", "CEN", 33.684, 73.025))
    m.add_station(_station("RLY02", "North", "NOR", 33.72, 73.06))
    m.add_station(_station("RLY03", "South", "SOU", 33.6, 73.0))
    return m


def test_parse_coordinates_plain():
    lat, lon = parse_coordinates("33.684, 73.025")
    assert lat == pytest.approx(33.684)
    assert lon == pytest.approx(73.025)


def test_parse_coordinates_quoted_and_negative():
    lat, lon = parse_coordinates('"-33.5,\t-73.25"')
    assert lat == pytest.approx(-33.5)
    assert lon == pytest.approx(-73.25)


@pytest.mark.parametrize("text", ["", "33.684 73.025"])
def test_parse_coordinates_rejects(text):
    with pytest.raises(ValueError):
        parse_coordinates(text)


def test_haversine_same_point_and_symmetry():
    assert haversine_distance(33.684, 73.025, 33.684, 73.025) == pytest.approx(0.0)
    assert haversine_distance(33.6, 73.0, 33.7, 73.1) == pytest.approx(
        haversine_distance(33.7, 73.1, 33.6, 73.0)
    )


def test_haversine_one_degree_at_equator():
    assert haversine_distance(0.0, 0.0, 1.0, 0.0) == pytest.approx(6371.0 * math.pi / 180.0)


def test_lookup_by_id_name_code(manager):
    assert manager.find_by_id("RLY02").name == "North"
    assert manager.find_by_name("South").station_id == "RLY03"
    assert manager.find_by_code("CEN").station_id == "RLY01"
    assert manager.find_by_id("") is None
    assert manager.find_by_code("XXX") is None


def test_duplicate_id_rejected(manager):
    assert manager.add_station(_station("RLY01", "Other", "OTH", 1.0, 1.0)) is False
    assert len(manager) == 3
    assert manager.find_by_code("OTH") is None


def test_invalid_station_raises():
    m = RailwayManager()
    with pytest.raises(ValueError):
        m.add_station(RailwayStation("RLY09", "", "C", "City", "RLY09"))
    assert len(m) == 0


def test_stations_in_insertion_order(manager):
    assert [s.station_id for s in manager.stations()] == ["RLY01", "RLY02", "RLY03"]


def test_nearest_station(manager):
    assert manager.nearest_station(33.72, 73.06).station_id == "RLY02"
    assert manager.nearest_station(33.59, 72.99).station_id == "RLY03"
    assert RailwayManager().nearest_station(0.0, 0.0) is None


def test_rail_distance_and_path(manager):
    distance = manager.rail_distance("RLY01", "RLY02")
    assert distance == pytest.approx(haversine_distance(33.684, 73.025, 33.72, 73.06))
    assert manager.rail_distance("RLY02", "RLY01") == pytest.approx(distance)
    path, length = manager.station_path("RLY01", "RLY02")
    assert path == ["RLY01", "RLY02"]
    assert length == pytest.approx(distance)


def test_unknown_station_raises(manager):
    with pytest.raises(KeyError):
        manager.rail_distance("RLY01", "NOPE")
    with pytest.raises(KeyError):
        manager.station_path("", "RLY01")


def test_load_stations_skips_bad_rows():
    m = RailwayManager()
    rows = [
        ["RLY01", "Central", "CEN", "Islamabad", "33.684, 73.025"],
        ["RLY02", "North", "NOR", "Islamabad"],
        ["RLY03", "South", "SOU", "Islamabad", "no comma"],
        ["RLY01", "Again", "AGN", "Islamabad", "1.0, 2.0"],
        ["RLY04", "East", "", "Islamabad", "1.0, 2.0"],
        ["RLY05", "West", "WES", "Rawalpindi", '"33.6, 73.0"'],
    ]
    assert m.load_stations(rows) == 2
    assert [s.station_id for s in m.stations()] == ["RLY01", "RLY05"]
    west = m.find_by_id("RLY05")
    assert west.vertex_id == "RLY05"
    assert west.latitude == pytest.approx(33.6)


def test_describe_all(manager):
    text = manager.describe_all()
    assert text.startswith("Registered Railway Stations (3 stations):\n")
    assert "  [2] Station ID: RLY02" in text
    assert RailwayManager().describe_all() == "No railway stations registered.\n"


def test_clear(manager):
    manager.clear()
    assert len(manager) == 0
    assert manager.find_by_name("Central") is None
    assert manager.stations() == []