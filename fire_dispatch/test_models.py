"""
Tests for Position distance and Firefighter movement bookkeeping.

Run:  python -m pytest fire_dispatch/test_models.py
"""

import dataclasses
import random

import pytest

from fire_dispatch.models import Firefighter, Position


def test_distance_is_manhattan():
    assert Position(0, 0).distance_to(Position(1, 1)) == 2
    assert Position(2, 3).distance_to(Position(0, 5)) == 4
    assert Position(-1, 4).distance_to(Position(3, -2)) == 10


def test_distance_symmetric_and_zero_on_self():
    rng = random.Random(7)
    for _ in range(200):
        a = Position(rng.randint(-50, 50), rng.randint(-50, 50))
        b = Position(rng.randint(-50, 50), rng.randint(-50, 50))
        assert a.distance_to(b) == b.distance_to(a)
        assert a.distance_to(a) == 0


def test_position_is_hashable_value():
    assert Position(3, 4) == Position(3, 4)
    assert len({Position(3, 4), Position(3, 4), Position(4, 3)}) == 2
    with pytest.raises(dataclasses.FrozenInstanceError):
        Position(1, 1).x = 2


def test_firefighter_accumulates_distance():
    firefighter = Firefighter(Position(0, 0))
    assert firefighter.move_to(Position(2, 3)) == 5
    assert firefighter.distance_traveled == 5
    firefighter.move_to(Position(0, 5))
    assert firefighter.distance_traveled == 9
    assert firefighter.position == Position(0, 5)


def test_firefighter_distance_is_sum_of_legs_and_never_decreases():
    rng = random.Random(11)
    firefighter = Firefighter(Position(0, 0))
    total = 0
    previous = 0
    for _ in range(50):
        total += firefighter.move_to(Position(rng.randint(0, 9), rng.randint(0, 9)))
        assert firefighter.distance_traveled >= previous
        previous = firefighter.distance_traveled
    assert firefighter.distance_traveled == total


def test_snapshot_is_detached():
    firefighter = Firefighter(Position(0, 0))
    snap = firefighter.snapshot()
    firefighter.move_to(Position(0, 3))
    assert snap.position == Position(0, 0)
    assert snap.distance_traveled == 0
