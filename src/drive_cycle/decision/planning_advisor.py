"""
Planning advisor - Turns classifications into route advice.

The only planning decision is binary per channel: adjust or don't.
"""

from __future__ import annotations

import logging

from ..perception import CameraClassification, LidarClassification, NavigationState

logger = logging.getLogger(__name__)


class PlanningAdvisor:
    """
    Maps the latest perception to textual route advisories.

    Usage:
        advisor = PlanningAdvisor()
        print(advisor.describe_route(state))
        for line in advisor.advise(camera, lidar):
            print(line)
    """

    def describe_route(self, state: NavigationState) -> str:
        """Describe the current route leg."""
        return (
            f"Driving from ({state.current_latitude:.4f}, {state.current_longitude:.4f}) "
            f"to ({state.destination_latitude:.4f}, {state.destination_longitude:.4f})"
        )

    def advise(
        self,
        camera: CameraClassification,
        lidar: LidarClassification,
    ) -> list[str]:
        """
        Route advisories for one tick's perception.

        Args:
            camera: Camera classification.
            lidar: LIDAR classification.

        Returns:
            Zero, one or two advisories; camera advisory first.
        """
        advisories = []
        if camera is not CameraClassification.NONE:
            advisories.append(f"Adjusting route for detected object: {camera.label}")
        if lidar is not LidarClassification.ROAD_CURVATURE:
            advisories.append(f"Adjusting route for road conditions: {lidar.label}")

        if advisories:
            logger.debug(f"Advisor: camera={camera.name} lidar={lidar.name} -> {len(advisories)} advisories")
        return advisories
