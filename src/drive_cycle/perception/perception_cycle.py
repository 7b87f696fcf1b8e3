"""
Perception cycle - Mock perception plus dead reckoning.

Each tick the perception layer:
1. Integrates speed and heading into a new NavigationState
2. Classifies both mock sensor channels from the cycle index

The cycle index is an explicit immutable value. The controller decides
whether to hand the next tick advance() or the same cycle again.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ..config import EARTH_CIRCUMFERENCE
from ..exceptions import InvalidInputError
from .classification import CameraClassification, LidarClassification, classify
from .navigation_state import NavigationState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PerceptionCycle:
    """
    Deterministic perception keyed by a cycle counter.

    Usage:
        cycle = PerceptionCycle()

        # In control loop:
        state = cycle.integrate(state, speed, heading)
        camera, lidar = cycle.observe()
        cycle = cycle.advance()
    """

    cycle_index: int = 0

    def __post_init__(self):
        if isinstance(self.cycle_index, bool) or not isinstance(self.cycle_index, int):
            raise InvalidInputError(
                f"cycle_index must be an integer, got {self.cycle_index!r}"
            )
        if self.cycle_index < 0:
            raise InvalidInputError(
                f"cycle_index must be non-negative, got {self.cycle_index}"
            )

    @staticmethod
    def classify(
        cycle_index: int,
    ) -> tuple[CameraClassification, LidarClassification]:
        """Classify both channels for an arbitrary index (pure)."""
        return classify(cycle_index)

    def observe(self) -> tuple[CameraClassification, LidarClassification]:
        """Classify both channels for this cycle's index."""
        return classify(self.cycle_index)

    def advance(self) -> PerceptionCycle:
        """Return the cycle for the next tick."""
        return PerceptionCycle(self.cycle_index + 1)

    @staticmethod
    def integrate(
        state: NavigationState,
        speed: float,
        heading_degrees: float,
    ) -> NavigationState:
        """
        Dead-reckoning update using a flat-earth small-angle model.

        Speed is in the same units as EARTH_CIRCUMFERENCE per tick. No
        clamping: coordinates may drift past +/-90 / +/-180.

        Args:
            state: Position before the tick.
            speed: Distance covered this tick.
            heading_degrees: 0 = north, 90 = east.

        Returns:
            New NavigationState with the same destination.
        """
        heading = math.radians(heading_degrees)
        d_longitude = 180.0 * speed * math.sin(heading) / EARTH_CIRCUMFERENCE
        d_latitude = 180.0 * speed * math.cos(heading) / EARTH_CIRCUMFERENCE
        logger.debug(
            f"Dead reckoning: speed={speed} heading={heading_degrees}° "
            f"-> dlat={d_latitude:.5f} dlon={d_longitude:.5f}"
        )
        return state.moved(d_latitude, d_longitude)
