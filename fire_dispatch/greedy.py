"""
Fire Dispatch — Greedy Assignment
=================================

Owns: the firefighter x building distance matrix and the move-selection rules
used by the greedy dispatch loop.

Tie-break tiers, applied in order while more than one candidate remains:
  1. nearest building         — minimum matrix distance
  2. most isolated building   — maximum column sum (distance from everyone)
  3. least-traveled firefighter — minimum cumulative distance
Anything still tied falls back to the first candidate in firefighter-major,
building-minor order.
"""

from typing import Callable, List, Sequence

import numpy as np

from .city import IncidentDirectory
from .models import Firefighter, Move, Position

# Marks a claimed or non-burning building; larger than any real distance.
UNREACHABLE = int(np.iinfo(np.int64).max)


class DistanceMatrix:
    """
    Scratch distance table for one dispatch call.

    Row ``i`` is firefighter ``i``; column ``j`` is ``buildings[j]``.
    """

    def __init__(
        self,
        firefighters: Sequence[Firefighter],
        buildings: Sequence[Position],
        city: IncidentDirectory,
    ):
        self.firefighters = firefighters
        self.buildings = list(buildings)
        self.city = city
        self.values = np.full((len(firefighters), len(self.buildings)), UNREACHABLE, dtype=np.int64)
        for i in range(len(firefighters)):
            self.refresh_row(i)

    @property
    def shape(self):
        return self.values.shape

    def refresh_row(self, firefighter_idx: int) -> None:
        """Recompute distances from a firefighter's current position."""
        here = self.firefighters[firefighter_idx].position
        row = self.values[firefighter_idx]
        for j, building in enumerate(self.buildings):
            if self.city.is_burning(building):
                row[j] = here.distance_to(building)
            else:
                row[j] = UNREACHABLE

    def claim(self, building_idx: int) -> None:
        """Take a building out of play for every firefighter."""
        self.values[:, building_idx] = UNREACHABLE

    def distance(self, move: Move) -> int:
        return int(self.values[move.firefighter_idx, move.building_idx])

    def column_sum(self, building_idx: int) -> int:
        col = self.values[:, building_idx]
        return int(col[col < UNREACHABLE].sum())

    def possible_moves(self) -> List[Move]:
        rows, cols = np.nonzero(self.values < UNREACHABLE)
        return [Move(int(i), int(j)) for i, j in zip(rows, cols)]

    def to_lists(self) -> List[List]:
        return [
            [None if v == UNREACHABLE else int(v) for v in row]
            for row in self.values.tolist()
        ]


def keep_minimum(moves: List[Move], key: Callable[[Move], int]) -> List[Move]:
    """Return the moves sharing the smallest ``key`` value, in their original order."""
    best: List[Move] = []
    best_val = None
    for move in moves:
        val = key(move)
        if best_val is None or val < best_val:
            best_val = val
            best = [move]
        elif val == best_val:
            best.append(move)
    return best


def select_move(matrix: DistanceMatrix, moves: List[Move]) -> Move:
    """Narrow ``moves`` down to one using the three tie-break tiers."""
    if not moves:
        raise ValueError("no candidate moves to choose from")

    if len(moves) > 1:
        moves = keep_minimum(moves, matrix.distance)
    if len(moves) > 1:
        moves = keep_minimum(moves, lambda m: -matrix.column_sum(m.building_idx))
    if len(moves) > 1:
        firefighters = matrix.firefighters
        moves = keep_minimum(moves, lambda m: firefighters[m.firefighter_idx].distance_traveled)
    return moves[0]
