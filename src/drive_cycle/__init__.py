"""
Drive cycle - Hourly perception/planning/control simulation of one vehicle.

Layers:
- perception: NavigationState, mock classification, dead reckoning
- decision: route advisories and run state
- control: per-tick controller and the simulation driver
"""

from .control import DrivingLoopController, SimulationDriver, SimulationResult, TickReport
from .decision import PlanningAdvisor, RunState
from .exceptions import DriveCycleError, InvalidInputError
from .params import Parameters
from .perception import (
    CameraClassification,
    LidarClassification,
    NavigationState,
    PerceptionCycle,
)

__version__ = "0.1.0"

__all__ = [
    "CameraClassification",
    "DriveCycleError",
    "DrivingLoopController",
    "InvalidInputError",
    "LidarClassification",
    "NavigationState",
    "Parameters",
    "PerceptionCycle",
    "PlanningAdvisor",
    "RunState",
    "SimulationDriver",
    "SimulationResult",
    "TickReport",
]
