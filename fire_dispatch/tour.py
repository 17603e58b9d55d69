"""
Fire Dispatch — Exact Tour Solver
=================================

Owns: brute-force shortest visiting order for a single firefighter.

Every ordering of the stops is generated and costed; the first ordering with
the minimum cost wins. Input is capped at MAX_EXACT_TOUR_SIZE stops (10! =
3,628,800 orderings) and anything larger is rejected before any work starts.
"""

from typing import Iterator, List, Optional, Sequence, Tuple

from .exceptions import InvalidArgumentError
from .models import Position

MAX_EXACT_TOUR_SIZE = 10


def permute(n: int, max_size: int = MAX_EXACT_TOUR_SIZE) -> Iterator[Tuple[int, ...]]:
    """
    Yield every ordering of ``range(n)`` by incremental insertion.

    Starting from ``(0,)``, index ``k`` is inserted into each of the ``k + 1``
    slots of every ordering of the first ``k`` indices (slot-major). All levels
    but the last are held in memory; the last level is yielded as it is built.
    """
    if n > max_size:
        raise InvalidArgumentError(
            f"refusing to enumerate orderings of {n} stops (limit {max_size})"
        )
    if n <= 0:
        return

    perms: List[Tuple[int, ...]] = [(0,)]
    for k in range(1, n - 1):
        perms = [
            perm[:slot] + (k,) + perm[slot:]
            for slot in range(k + 1)
            for perm in perms
        ]

    if n == 1:
        yield from perms
        return

    last = n - 1
    for slot in range(n):
        for perm in perms:
            yield perm[:slot] + (last,) + perm[slot:]


def path_cost(origin: Position, path: Sequence[Position]) -> int:
    """Distance from ``origin`` through every stop of ``path`` in order."""
    cost = 0
    here = origin
    for stop in path:
        cost += here.distance_to(stop)
        here = stop
    return cost


def best_order(
    origin: Position,
    stops: Sequence[Position],
    max_size: int = MAX_EXACT_TOUR_SIZE,
) -> Tuple[Tuple[int, ...], int]:
    """
    Return ``(order, cost)`` for the cheapest visiting order of ``stops``.

    ``order`` holds indices into ``stops``. Ties keep the first ordering
    generated by ``permute``.
    """
    n = len(stops)
    if n > max_size:
        raise InvalidArgumentError(
            f"exact tour supports at most {max_size} stops, got {n}"
        )
    if n == 0:
        return (), 0

    from_origin = [origin.distance_to(s) for s in stops]
    between = [[a.distance_to(b) for b in stops] for a in stops]

    best: Optional[Tuple[int, ...]] = None
    best_cost = 0
    for perm in permute(n, max_size):
        cost = from_origin[perm[0]]
        for i in range(n - 1):
            cost += between[perm[i]][perm[i + 1]]
        if best is None or cost < best_cost:
            best, best_cost = perm, cost
    return best, best_cost


def exact_tour(
    origin: Position,
    stops: Sequence[Position],
    max_size: int = MAX_EXACT_TOUR_SIZE,
) -> List[Position]:
    order, _ = best_order(origin, stops, max_size)
    return [stops[i] for i in order]
