from fire_dispatch.models import (
    Assignment,
    Firefighter,
    FirefighterSnapshot,
    Move,
    Position,
)
from fire_dispatch.city import Building, City, ExtinguishResult, IncidentDirectory
from fire_dispatch.engine import DispatchEngine, DispatchPhase
from fire_dispatch.exceptions import (
    DispatchError,
    DispatchInProgressError,
    EmptyRosterError,
    FireproofBuildingError,
    InvalidArgumentError,
    OutOfCityError,
)
from fire_dispatch.tour import MAX_EXACT_TOUR_SIZE, exact_tour, path_cost

__all__ = [
    "Assignment",
    "Firefighter",
    "FirefighterSnapshot",
    "Move",
    "Position",
    "Building",
    "City",
    "ExtinguishResult",
    "IncidentDirectory",
    "DispatchEngine",
    "DispatchPhase",
    "DispatchError",
    "DispatchInProgressError",
    "EmptyRosterError",
    "FireproofBuildingError",
    "InvalidArgumentError",
    "OutOfCityError",
    "MAX_EXACT_TOUR_SIZE",
    "exact_tour",
    "path_cost",
]
