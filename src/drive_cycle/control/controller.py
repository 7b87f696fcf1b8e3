"""
Driving loop controller - Composes one simulated hour.

Each tick:
1. Integrates the fixed speed/heading into a new NavigationState
2. Classifies both mock sensor channels
3. Gets advisories from the PlanningAdvisor
4. Returns a TickReport and the cycle for the next tick
"""

from __future__ import annotations

import logging
import math
from numbers import Real

from ..config import DEFAULT_HEADING, DEFAULT_SPEED
from ..decision import PlanningAdvisor
from ..exceptions import InvalidInputError
from ..perception import NavigationState, PerceptionCycle
from .report import TickReport

logger = logging.getLogger(__name__)


class DrivingLoopController:
    """
    Runs one perception -> planning step.

    The controller owns no mutable state: position and cycle go in,
    report and next cycle come out.

    Usage:
        controller = DrivingLoopController(speed=60, heading=45)
        cycle = PerceptionCycle()

        report, cycle = controller.tick(1, state, cycle)
        state = report.state
    """

    def __init__(
        self,
        speed: float = DEFAULT_SPEED,
        heading: float = DEFAULT_HEADING,
        advisor: PlanningAdvisor | None = None,
        advance_cycle: bool = True,
    ):
        for name, value in (("speed", speed), ("heading", heading)):
            if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
                raise InvalidInputError(f"{name} must be a finite number, got {value!r}")
        self.speed = speed
        self.heading = heading
        self.advisor = advisor or PlanningAdvisor()
        self.advance_cycle = advance_cycle

    def tick(
        self,
        hour: int,
        state: NavigationState,
        cycle: PerceptionCycle,
    ) -> tuple[TickReport, PerceptionCycle]:
        """
        Compute one hour of the control loop.

        Args:
            hour: 1-based hour number for the report.
            state: NavigationState before the tick.
            cycle: Perception cycle to classify with.

        Returns:
            (report, next_cycle) tuple
        """
        # 1. Dead reckoning
        new_state = cycle.integrate(state, self.speed, self.heading)

        # 2. Mock perception
        camera, lidar = cycle.observe()

        # 3. Planning
        advisories = self.advisor.advise(camera, lidar)
        route = self.advisor.describe_route(new_state)

        report = TickReport(
            hour=hour,
            state=new_state,
            camera=camera,
            lidar=lidar,
            cycle_index=cycle.cycle_index,
            route=route,
            advisories=tuple(advisories),
        )
        logger.debug(
            f"Hour {hour}: camera={camera.name} lidar={lidar.name} "
            f"distance={new_state.distance_to_destination:.4f}"
        )

        next_cycle = cycle.advance() if self.advance_cycle else cycle
        return report, next_cycle
