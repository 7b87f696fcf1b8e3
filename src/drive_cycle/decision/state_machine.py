"""
State machine for the simulation run.

Tracks the hour and decides, after every tick, whether the run keeps
going, has arrived, or has used up its hours.
"""

from __future__ import annotations

import logging
from enum import Enum, auto

from ..config import ARRIVAL_THRESHOLD, SIMULATION_HOURS
from ..perception import NavigationState

logger = logging.getLogger(__name__)


class RunState(Enum):
    """Simulation run state enumeration."""

    RUNNING = auto()
    ARRIVED = auto()
    EXHAUSTED = auto()


class SimulationStateMachine:
    """
    High-level state machine for one simulation run.

    States:
    - RUNNING: Ticks remain and destination not reached
    - ARRIVED: Within arrival threshold after a tick (terminal)
    - EXHAUSTED: All hours used without arriving (terminal)

    Usage:
        sm = SimulationStateMachine()
        sm.start()

        # After each tick:
        if sm.update(report.state) is not RunState.RUNNING:
            break
    """

    def __init__(self, max_hours: int = SIMULATION_HOURS, arrival_threshold: float = ARRIVAL_THRESHOLD):
        self.state = RunState.RUNNING
        self.hour = 0
        self.max_hours = max_hours
        self.arrival_threshold = arrival_threshold

    @property
    def is_terminal(self) -> bool:
        return self.state is not RunState.RUNNING

    def start(self):
        """Start a run at hour 0."""
        self.state = RunState.RUNNING
        self.hour = 0
        logger.info(
            f"Run started (max {self.max_hours} hours, "
            f"arrival below {self.arrival_threshold})"
        )
        if self.max_hours <= 0:
            self.state = RunState.EXHAUSTED
            logger.info("Transition: RUNNING -> EXHAUSTED (no hours to run)")

    def update(self, state: NavigationState) -> RunState:
        """
        Account for one completed tick.

        Args:
            state: NavigationState after the tick.

        Returns:
            Current run state
        """
        if self.is_terminal:
            return self.state

        self.hour += 1
        distance = state.distance_to_destination

        # Arrival takes priority over running out of hours
        if distance < self.arrival_threshold:
            self.state = RunState.ARRIVED
            logger.info(
                f"Transition: RUNNING -> ARRIVED "
                f"(hour {self.hour}, distance {distance:.4f})"
            )
        elif self.hour >= self.max_hours:
            self.state = RunState.EXHAUSTED
            logger.info(
                f"Transition: RUNNING -> EXHAUSTED "
                f"(after {self.hour} hours, distance {distance:.4f})"
            )
        return self.state
