"""
Simulation driver - Runs the hourly control loop to completion.

This is the main loop that:
1. Ticks the DrivingLoopController once per hour
2. Records the new position in the RouteLog
3. Hands the report to an optional callback
4. Asks the SimulationStateMachine whether to stop
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from ..decision import PlanningAdvisor, SimulationStateMachine
from ..params import Parameters
from ..perception import NavigationState, PerceptionCycle, RouteLog
from .controller import DrivingLoopController
from .report import SimulationResult, TickReport

logger = logging.getLogger(__name__)


class SimulationDriver:
    """
    Main simulation driver.

    Coordinates:
    - Control layer (DrivingLoopController)
    - Decision layer (SimulationStateMachine)
    - Route recording (RouteLog)

    Usage:
        driver = SimulationDriver(Parameters(speed=60, heading=45))
        result = driver.run(initial_state, on_tick=print_report)
    """

    def __init__(self, params: Optional[Parameters] = None, advisor: Optional[PlanningAdvisor] = None):
        self.params = params or Parameters()
        self.advisor = advisor or PlanningAdvisor()

    def run(
        self,
        initial_state: NavigationState,
        on_tick: Optional[Callable[[TickReport], None]] = None,
    ) -> SimulationResult:
        """
        Run ticks until arrival or until the hours run out.

        Args:
            initial_state: Validated starting NavigationState.
            on_tick: Called with each TickReport as soon as it exists.

        Returns:
            SimulationResult with every tick's report
        """
        params = self.params
        controller = DrivingLoopController(
            speed=params.speed,
            heading=params.heading,
            advisor=self.advisor,
            advance_cycle=params.advance_cycle,
        )
        state_machine = SimulationStateMachine(
            max_hours=params.max_hours,
            arrival_threshold=params.arrival_threshold,
        )
        cycle = PerceptionCycle(params.initial_cycle_index)
        route = RouteLog(initial_state)
        reports: list[TickReport] = []

        state = initial_state
        state_machine.start()

        while not state_machine.is_terminal:
            report, cycle = controller.tick(state_machine.hour + 1, state, cycle)
            state = report.state
            route.record(state)
            reports.append(report)

            if on_tick is not None:
                on_tick(report)

            state_machine.update(state)

        logger.info(
            f"Run finished: {state_machine.state.name} after {state_machine.hour} hours, "
            f"travelled {route.distance_travelled:.4f}"
        )
        return SimulationResult(
            outcome=state_machine.state,
            hours=state_machine.hour,
            final_state=state,
            route=route,
            reports=reports,
        )
