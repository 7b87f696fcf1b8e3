"""
Control Layer - Execution.

Per-tick controller and the loop that drives it to completion.
"""

from .controller import DrivingLoopController
from .driver import SimulationDriver
from .report import SimulationResult, TickReport

__all__ = [
    "DrivingLoopController",
    "SimulationDriver",
    "SimulationResult",
    "TickReport",
]
