"""
Tests for the in-memory City incident directory.

Run:  python -m pytest fire_dispatch/test_city.py
"""

import pytest

from fire_dispatch.city import City, ExtinguishResult
from fire_dispatch.exceptions import FireproofBuildingError, OutOfCityError
from fire_dispatch.models import Position


def test_ignite_and_extinguish():
    city = City(3, 3, Position(0, 0))
    city.ignite(Position(1, 2), Position(2, 2))
    assert city.is_burning(Position(1, 2))
    assert sorted(p.as_tuple() for p in city.burning()) == [(1, 2), (2, 2)]

    assert city.extinguish(Position(1, 2)) is ExtinguishResult.EXTINGUISHED
    assert not city.is_burning(Position(1, 2))
    assert city.extinguish(Position(1, 2)) is ExtinguishResult.NO_INCIDENT
    assert not ExtinguishResult.NO_INCIDENT.ok


def test_fire_station_is_fireproof():
    city = City(2, 2, Position(1, 1))
    with pytest.raises(FireproofBuildingError):
        city.ignite(Position(0, 0), Position(1, 1))
    # nothing ignited when any target is rejected
    assert city.burning() == []


def test_positions_outside_grid():
    city = City(2, 2, Position(0, 0))
    with pytest.raises(OutOfCityError):
        city.ignite(Position(5, 5))
    assert not city.is_burning(Position(5, 5))
    assert city.extinguish(Position(-1, 0)) is ExtinguishResult.NO_INCIDENT


@pytest.mark.parametrize("width,height,station", [
    (0, 3, Position(0, 0)),
    (3, -1, Position(0, 0)),
])
def test_bad_dimensions(width, height, station):
    with pytest.raises(ValueError):
        City(width, height, station)


def test_station_must_be_inside():
    with pytest.raises(OutOfCityError):
        City(2, 2, Position(2, 0))
