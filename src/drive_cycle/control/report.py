"""
Tick and run reports - Structured output of the control loop.

Nothing here prints. The console and web layers render these values.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..decision import RunState
from ..perception import CameraClassification, LidarClassification, NavigationState, RouteLog


@dataclass(frozen=True)
class TickReport:
    """Everything observable about one simulated hour."""

    hour: int
    state: NavigationState
    camera: CameraClassification
    lidar: LidarClassification
    cycle_index: int
    route: str
    advisories: tuple[str, ...] = ()

    @property
    def needs_adjustment(self) -> bool:
        return len(self.advisories) > 0

    def to_dict(self) -> dict:
        """Convert to dict for JSON API."""
        return {
            "hour": self.hour,
            "current": list(self.state.current),
            "destination": list(self.state.destination),
            "distance": self.state.distance_to_destination,
            "camera": self.camera.name,
            "lidar": self.lidar.name,
            "cycle_index": self.cycle_index,
            "route": self.route,
            "advisories": list(self.advisories),
        }


@dataclass
class SimulationResult:
    """Outcome of a complete run."""

    outcome: RunState
    hours: int
    final_state: NavigationState
    route: RouteLog
    reports: list[TickReport] = field(default_factory=list)

    @property
    def arrived(self) -> bool:
        return self.outcome is RunState.ARRIVED

    @property
    def arrival_hour(self) -> int | None:
        """Hour of arrival, None if the run was exhausted."""
        return self.hours if self.arrived else None

    def to_dict(self) -> dict:
        """Convert to dict for JSON API."""
        return {
            "outcome": self.outcome.name,
            "hours": self.hours,
            "arrival_hour": self.arrival_hour,
            "final": list(self.final_state.current),
            "destination": list(self.final_state.destination),
            "distance": self.final_state.distance_to_destination,
            "distance_travelled": self.route.distance_travelled,
            "closest_approach": self.route.closest_approach,
            "reports": [r.to_dict() for r in self.reports],
        }
