"""
Mock sensor classifications.

Two independent channels, each a closed set of classes:
- Camera: what kind of object is in view
- LIDAR: what the road surface ahead looks like
"""

from enum import Enum, auto

from ..config import CLASSIFICATION_PERIOD


class CameraClassification(Enum):
    """Camera channel classes, in cycle order."""

    NONE = auto()
    VEHICLE = auto()
    PEDESTRIAN = auto()
    BICYCLE = auto()
    STOPLIGHT = auto()
    SPEED_LIMIT = auto()

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").lower()


class LidarClassification(Enum):
    """LIDAR channel classes, in cycle order."""

    ROAD_CURVATURE = auto()
    SMALL_OBSTRUCTION = auto()
    LARGE_OBSTRUCTION = auto()

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").lower()


_CAMERA_CYCLE = tuple(CameraClassification)
_LIDAR_CYCLE = tuple(LidarClassification)


def classify(
    cycle_index: int,
) -> tuple[CameraClassification, LidarClassification]:
    """
    Classify both channels for a cycle index.

    Camera walks all 6 classes; LIDAR repeats its 3 classes twice per
    period, so residues {0,3}, {1,4}, {2,5} share a LIDAR class.

    Args:
        cycle_index: Non-negative cycle counter.

    Returns:
        (camera, lidar) tuple
    """
    residue = cycle_index % CLASSIFICATION_PERIOD
    return _CAMERA_CYCLE[residue], _LIDAR_CYCLE[residue % len(_LIDAR_CYCLE)]
