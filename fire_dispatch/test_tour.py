"""
Tests for the exact (brute-force) tour solver.

Run:  python -m pytest fire_dispatch/test_tour.py
"""

import itertools
import math
import random

import pytest

from fire_dispatch.exceptions import InvalidArgumentError
from fire_dispatch.models import Position
from fire_dispatch.tour import best_order, exact_tour, path_cost, permute

ORIGIN = Position(2, 2)


def _random_stops(rng, n, bound=10):
    stops = set()
    while len(stops) < n:
        stops.add(Position(rng.randrange(bound), rng.randrange(bound)))
    return list(stops)


@pytest.mark.parametrize("n", range(1, 7))
def test_permute_yields_every_ordering_once(n):
    perms = list(permute(n))
    assert len(perms) == math.factorial(n)
    assert set(perms) == set(itertools.permutations(range(n)))


def test_permute_insertion_order():
    assert list(permute(3)) == [
        (2, 1, 0), (2, 0, 1),
        (1, 2, 0), (0, 2, 1),
        (1, 0, 2), (0, 1, 2),
    ]


def test_permute_empty():
    assert list(permute(0)) == []


def test_permute_rejects_more_than_ten():
    with pytest.raises(InvalidArgumentError):
        next(permute(11))


def test_path_cost():
    path = [Position(3, 1), Position(2, 4), Position(5, 2), Position(0, 0)]
    # 2 + 4 + 5 + 7
    assert path_cost(ORIGIN, path) == 18
    assert path_cost(ORIGIN, []) == 0


def test_exact_tour_beats_every_ordering():
    rng = random.Random(1)
    for n in range(1, 7):
        for _ in range(3):
            stops = _random_stops(rng, n)
            tour = exact_tour(ORIGIN, stops)
            assert sorted(tour, key=Position.as_tuple) == sorted(stops, key=Position.as_tuple)
            best = min(path_cost(ORIGIN, p) for p in itertools.permutations(stops))
            assert path_cost(ORIGIN, tour) == best


def test_best_order_reports_cost():
    stops = [Position(0, 1), Position(1, 1)]
    order, cost = best_order(Position(0, 0), stops)
    assert order == (0, 1)
    assert cost == 2


def test_exact_tour_empty():
    assert exact_tour(ORIGIN, []) == []


def test_exact_tour_rejects_eleven_stops():
    stops = [Position(x, 0) for x in range(11)]
    with pytest.raises(InvalidArgumentError):
        exact_tour(ORIGIN, stops)
    # also a ValueError for callers that don't know the package hierarchy
    with pytest.raises(ValueError):
        best_order(ORIGIN, stops)
