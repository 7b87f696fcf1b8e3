"""
Decision Layer - What to do.

Contains:
- PlanningAdvisor: Route advisories from perception
- SimulationStateMachine: Run state (running / arrived / exhausted)
"""

from .planning_advisor import PlanningAdvisor
from .state_machine import RunState, SimulationStateMachine

__all__ = ["PlanningAdvisor", "RunState", "SimulationStateMachine"]
