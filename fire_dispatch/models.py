"""
Fire Dispatch — Data Models
===========================

Owns: Position, Firefighter, FirefighterSnapshot, Move, Assignment dataclasses.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def distance_to(self, other: "Position") -> int:
        """Manhattan distance on the city grid."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass(frozen=True)
class FirefighterSnapshot:
    position: Position
    distance_traveled: int


@dataclass
class Firefighter:
    position: Position
    distance_traveled: int = 0     # cumulative Manhattan distance since hire

    def move_to(self, position: Position) -> int:
        """Relocate to ``position`` and return the distance covered by this leg."""
        leg = self.position.distance_to(position)
        self.distance_traveled += leg
        self.position = position
        return leg

    def snapshot(self) -> FirefighterSnapshot:
        return FirefighterSnapshot(self.position, self.distance_traveled)


@dataclass(frozen=True)
class Move:
    firefighter_idx: int
    building_idx: int


@dataclass(frozen=True)
class Assignment:
    firefighter_idx: int
    position: Position
    distance: int
