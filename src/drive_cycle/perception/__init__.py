"""
Perception Layer - World understanding.

Produces what the vehicle knows each tick:
- NavigationState: Current and destination coordinates
- PerceptionCycle: Mock camera/LIDAR classification + dead reckoning
- RouteLog: Positions accumulated over a run
"""

from .classification import CameraClassification, LidarClassification, classify
from .navigation_state import NavigationState
from .perception_cycle import PerceptionCycle
from .route_log import RouteLog

__all__ = [
    "CameraClassification",
    "LidarClassification",
    "classify",
    "NavigationState",
    "PerceptionCycle",
    "RouteLog",
]
