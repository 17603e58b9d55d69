"""
Fire Dispatch — City Model
==========================

Owns: the incident directory the engine reads burning state from and sends
extinguish commands to.

The engine only depends on the ``IncidentDirectory`` protocol; ``City`` is the
in-memory grid implementation used by callers that don't bring their own.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Protocol

from .exceptions import FireproofBuildingError, OutOfCityError
from .models import Position


class ExtinguishResult(Enum):
    EXTINGUISHED = "extinguished"
    NO_INCIDENT = "no_incident"    # target was not burning (stale or duplicate)

    @property
    def ok(self) -> bool:
        return self is ExtinguishResult.EXTINGUISHED


class IncidentDirectory(Protocol):
    @property
    def fire_station(self) -> Position: ...

    def is_burning(self, position: Position) -> bool: ...

    def extinguish(self, position: Position) -> ExtinguishResult: ...


@dataclass
class Building:
    position: Position
    fireproof: bool = False
    burning: bool = False


class City:
    """A ``width`` x ``height`` grid of buildings with one fire station."""

    def __init__(self, width: int, height: int, fire_station: Position):
        if width < 1 or height < 1:
            raise ValueError("city dimensions must be >= 1")
        self.width = width
        self.height = height
        self._buildings: Dict[Position, Building] = {}
        for x in range(width):
            for y in range(height):
                pos = Position(x, y)
                self._buildings[pos] = Building(position=pos)

        if fire_station not in self._buildings:
            raise OutOfCityError(f"fire station {fire_station} outside {width}x{height} city")
        self._fire_station = fire_station
        self._buildings[fire_station].fireproof = True

    @property
    def fire_station(self) -> Position:
        return self._fire_station

    def get_building(self, position: Position) -> Building:
        try:
            return self._buildings[position]
        except KeyError:
            raise OutOfCityError(
                f"{position} outside {self.width}x{self.height} city"
            ) from None

    # ── Incident API ──────────────────────────────────────────────────────────

    def ignite(self, *positions: Position) -> None:
        """Set every given building on fire."""
        buildings = [self.get_building(pos) for pos in positions]
        for building in buildings:
            if building.fireproof:
                raise FireproofBuildingError(f"building at {building.position} is fireproof")
        for building in buildings:
            building.burning = True

    def is_burning(self, position: Position) -> bool:
        building = self._buildings.get(position)
        return building is not None and building.burning

    def extinguish(self, position: Position) -> ExtinguishResult:
        building = self._buildings.get(position)
        if building is None or not building.burning:
            return ExtinguishResult.NO_INCIDENT
        building.burning = False
        return ExtinguishResult.EXTINGUISHED

    def burning(self) -> List[Position]:
        return [pos for pos, b in self._buildings.items() if b.burning]
