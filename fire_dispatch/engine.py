"""
Fire Dispatch Engine
====================

Owns: Deciding which firefighter puts out which fire, then moving them there.

Responsibilities:
  1. Firefighter roster (hire / snapshot)
  2. Solver policy (greedy vs brute force)
  3. Dispatch loops (greedy assignment, exact single-firefighter tour)
  4. Output API (JSON-ready summaries, distance matrix dump)

Usage:
  from fire_dispatch import City, DispatchEngine, Position
"""

import time
import logging
from enum import Enum
from typing import List, Optional, Sequence

from .city import IncidentDirectory
from .exceptions import DispatchInProgressError, EmptyRosterError, InvalidArgumentError
from .greedy import DistanceMatrix, select_move
from .models import Assignment, Firefighter, FirefighterSnapshot, Position
from .tour import MAX_EXACT_TOUR_SIZE, best_order, exact_tour, path_cost

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
log = logging.getLogger("DispatchEngine")

STRATEGIES = ("auto", "greedy", "brute_force")


class DispatchPhase(Enum):
    IDLE = "idle"
    BUILDING_MATRIX = "building_matrix"
    SELECTING_MOVE = "selecting_move"
    COMMITTING = "committing"


class DispatchEngine:
    """
    Dispatches a roster of firefighters to batches of burning buildings.

    Strategies:
      auto        — brute force for a single firefighter and a small batch,
                    greedy otherwise
      greedy      — always run the greedy assignment loop
      brute_force — always run the exact tour with the first firefighter
    """

    def __init__(
        self,
        city: IncidentDirectory,
        strategy: str = "auto",
        max_exact_size: int = MAX_EXACT_TOUR_SIZE,   # auto: largest batch sent to brute force
        exact_max_firefighters: int = 1,             # auto: roster size above which greedy is used
    ):
        if not 0 <= max_exact_size <= MAX_EXACT_TOUR_SIZE:
            raise ValueError(f"max_exact_size must be in [0, {MAX_EXACT_TOUR_SIZE}]")
        if exact_max_firefighters < 1:
            raise ValueError("exact_max_firefighters must be >= 1")

        self.city = city
        self.strategy = strategy
        self.max_exact_size = max_exact_size
        self.exact_max_firefighters = exact_max_firefighters

        self.firefighters: List[Firefighter] = []
        self.phase = DispatchPhase.IDLE

        # Scratch state of the most recent dispatch
        self._last_matrix: Optional[DistanceMatrix] = None
        self._last_assignments: List[Assignment] = []

        # History for diagnostics
        self._dispatch_history: list[dict] = []

    @property
    def strategy(self) -> str:
        return self._strategy

    @strategy.setter
    def strategy(self, value: str):
        if value not in STRATEGIES:
            raise ValueError(f"unknown strategy {value!r}; expected one of {STRATEGIES}")
        self._strategy = value

    @property
    def last_strategy(self) -> Optional[str]:
        """Solver that ran for the most recent dispatch, or None before any."""
        if not self._dispatch_history:
            return None
        return self._dispatch_history[-1]["strategy"]

    # ── Roster API ────────────────────────────────────────────────────────────

    def set_firefighters(self, count: int):
        """Replace the roster with ``count`` fresh firefighters at the fire station."""
        if count < 0:
            raise ValueError("firefighter count must be >= 0")
        self._ensure_idle()
        station = self.city.fire_station
        self.firefighters = [Firefighter(position=station) for _ in range(count)]
        log.info(f"Hired {count} firefighter(s) at {station.as_tuple()}")

    def get_firefighters(self) -> List[FirefighterSnapshot]:
        return [ff.snapshot() for ff in self.firefighters]

    def total_distance(self) -> int:
        return sum(ff.distance_traveled for ff in self.firefighters)

    # ── Pure Queries ──────────────────────────────────────────────────────────

    def exact_tour(self, buildings: Sequence[Position]) -> List[Position]:
        """Cheapest order to visit ``buildings`` starting from the fire station."""
        return exact_tour(self.city.fire_station, buildings)

    def path_cost(self, path: Sequence[Position]) -> int:
        """Cost of walking ``path`` in order, starting from the fire station."""
        return path_cost(self.city.fire_station, path)

    # ── Dispatch ──────────────────────────────────────────────────────────────

    def dispatch(self, *buildings: Position) -> List[Assignment]:
        """
        Send firefighters to every burning building in ``buildings``.

        Returns the committed assignments in the order they were made.
        An empty batch is a no-op.
        """
        if not buildings:
            return []
        strategy = self._resolve_strategy(len(buildings))
        log.info(
            f"Dispatching {len(self.firefighters)} firefighter(s) to "
            f"{len(buildings)} building(s) [{strategy}]"
        )
        if strategy == "greedy":
            return self.greedy_dispatch(buildings)
        return self.brute_force_dispatch(buildings)

    def _resolve_strategy(self, batch_size: int) -> str:
        if self.strategy != "auto":
            return self.strategy
        if len(self.firefighters) > self.exact_max_firefighters or batch_size > self.max_exact_size:
            return "greedy"
        return "brute_force"

    def greedy_dispatch(self, buildings: Sequence[Position]) -> List[Assignment]:
        """
        Greedy assignment. Each step picks one (firefighter, building) move
        with the tie-break tiers in ``greedy.select_move``, puts the fire out
        and moves the firefighter there.

        Runtime: O(firefighters * buildings^2)
        """
        buildings = list(buildings)
        if not buildings:
            return []
        self._begin(buildings)
        assignments: List[Assignment] = []
        claimed: set[int] = set()
        try:
            self.phase = DispatchPhase.BUILDING_MATRIX
            matrix = DistanceMatrix(self.firefighters, buildings, self.city)
            self._last_matrix = matrix

            for _ in range(len(buildings)):
                self.phase = DispatchPhase.SELECTING_MOVE
                moves = matrix.possible_moves()
                if not moves:
                    break
                move = select_move(matrix, moves)

                self.phase = DispatchPhase.COMMITTING
                target = buildings[move.building_idx]
                if self.city.extinguish(target).ok:
                    leg = self.firefighters[move.firefighter_idx].move_to(target)
                    assignments.append(Assignment(move.firefighter_idx, target, leg))
                    log.debug(f"Firefighter {move.firefighter_idx} → {target.as_tuple()} ({leg})")
                else:
                    log.warning(f"No fire at {target.as_tuple()}; skipping")
                claimed.add(move.building_idx)

                self.phase = DispatchPhase.BUILDING_MATRIX
                matrix.refresh_row(move.firefighter_idx)
                matrix.claim(move.building_idx)

            skipped = [buildings[j].as_tuple() for j in range(len(buildings)) if j not in claimed]
            if skipped:
                log.warning(f"Not burning, left unassigned: {skipped}")
        finally:
            self._end("greedy", assignments)
        return assignments

    def brute_force_dispatch(self, buildings: Sequence[Position]) -> List[Assignment]:
        """
        Exact tour for the first firefighter: every visiting order is costed
        from the fire station and the cheapest is walked.

        Runtime: O(n!)
        """
        buildings = list(buildings)
        if not buildings:
            return []
        if len(buildings) > MAX_EXACT_TOUR_SIZE:
            raise InvalidArgumentError(
                f"exact tour supports at most {MAX_EXACT_TOUR_SIZE} stops, got {len(buildings)}"
            )
        self._begin(buildings)
        assignments: List[Assignment] = []
        try:
            self.phase = DispatchPhase.SELECTING_MOVE
            firefighter = self.firefighters[0]
            order, cost = best_order(self.city.fire_station, buildings)
            log.debug(f"Best order {order} costs {cost}")

            self.phase = DispatchPhase.COMMITTING
            for idx in order:
                target = buildings[idx]
                if not self.city.extinguish(target).ok:
                    log.warning(f"No fire at {target.as_tuple()}; skipping")
                    continue
                leg = firefighter.move_to(target)
                assignments.append(Assignment(0, target, leg))
        finally:
            self._end("brute_force", assignments)
        return assignments

    def _ensure_idle(self):
        if self.phase is not DispatchPhase.IDLE:
            raise DispatchInProgressError(f"engine is busy ({self.phase.value})")

    def _begin(self, buildings: Sequence[Position]):
        self._ensure_idle()
        if not self.firefighters:
            raise EmptyRosterError(f"no firefighters hired for {len(buildings)} building(s)")

    def _end(self, strategy: str, assignments: List[Assignment]):
        self.phase = DispatchPhase.IDLE
        self._last_assignments = assignments
        self._dispatch_history.append({
            "timestamp": time.time(),
            "strategy": strategy,
            "assignments": [(a.firefighter_idx, a.position.as_tuple()) for a in assignments],
        })
        log.info(
            f"{strategy}: {len(assignments)} fire(s) out, "
            f"{sum(a.distance for a in assignments)} travelled"
        )

    # ── Output API ────────────────────────────────────────────────────────────

    def get_output(self) -> dict:
        """
        Returns a JSON-ready summary:

        {
          "firefighters": [{"position": [x, y], "distance_traveled": 4}, ...],
          "total_distance": 4,
          "last_assignments": [
            {"firefighter": 0, "position": [x, y], "distance": 2}
          ],
          "strategy": "auto",
          "last_strategy": "greedy",
          "dispatches": 1,
          "timestamp": ...
        }
        """
        return {
            "firefighters": [
                {
                    "position": list(ff.position.as_tuple()),
                    "distance_traveled": ff.distance_traveled,
                }
                for ff in self.firefighters
            ],
            "total_distance": self.total_distance(),
            "last_assignments": [
                {
                    "firefighter": a.firefighter_idx,
                    "position": list(a.position.as_tuple()),
                    "distance": a.distance,
                }
                for a in self._last_assignments
            ],
            "strategy": self.strategy,
            "last_strategy": self.last_strategy,
            "dispatches": len(self._dispatch_history),
            "timestamp": time.time(),
        }

    def get_distance_matrix_output(self) -> list:
        """Last greedy distance matrix (claimed cells as None), for debugging."""
        if self._last_matrix is None:
            return []
        return self._last_matrix.to_lists()
