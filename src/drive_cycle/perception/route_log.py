"""
Route log - Accumulated positions over one simulation run.

The driver records the starting state once, then every tick's updated
state. The log is only read by reporting code (summary, visualizer).
"""

from __future__ import annotations

import logging

import numpy as np

from ..exceptions import DriveCycleError
from .navigation_state import NavigationState

logger = logging.getLogger(__name__)


class RouteLog:
    """
    Records the vehicle's route during a run.

    Usage:
        route = RouteLog(initial_state)

        # Each tick:
        route.record(report.state)

        # Afterwards:
        route.distance_travelled
        route.closest_approach
    """

    def __init__(self, start: NavigationState):
        self.start = start
        self.destination = start.destination
        self._positions: list[tuple[float, float]] = [start.current]

    @property
    def hours(self) -> int:
        """Number of ticks recorded (start excluded)."""
        return len(self._positions) - 1

    @property
    def positions(self) -> np.ndarray:
        """(N, 2) array of (latitude, longitude), start first."""
        return np.array(self._positions, dtype=float)

    @property
    def latest(self) -> tuple[float, float]:
        return self._positions[-1]

    @property
    def distance_travelled(self) -> float:
        """Sum of planar step lengths between recorded positions."""
        if self.hours == 0:
            return 0.0
        steps = np.diff(self.positions, axis=0)
        return float(np.hypot(steps[:, 0], steps[:, 1]).sum())

    @property
    def closest_approach(self) -> float:
        """Smallest planar distance to the destination seen so far."""
        offsets = self.positions - np.array(self.destination, dtype=float)
        return float(np.hypot(offsets[:, 0], offsets[:, 1]).min())

    def record(self, state: NavigationState) -> None:
        """Append the position of a tick's updated state."""
        if state.destination != self.destination:
            raise DriveCycleError(
                f"RouteLog: destination changed {self.destination} -> {state.destination}"
            )
        self._positions.append(state.current)
        logger.debug(
            f"RouteLog: hour {self.hours} at "
            f"({state.current_latitude:.4f}, {state.current_longitude:.4f})"
        )
