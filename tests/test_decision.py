"""Tests for the planning advisor and the run state machine."""

import itertools

import pytest

from drive_cycle.decision import PlanningAdvisor, RunState, SimulationStateMachine
from drive_cycle.perception import CameraClassification, LidarClassification, NavigationState


class TestPlanningAdvisor:
    """Tests for PlanningAdvisor."""

    def test_nothing_to_adjust(self) -> None:
        advisor = PlanningAdvisor()
        assert advisor.advise(
            CameraClassification.NONE, LidarClassification.ROAD_CURVATURE
        ) == []

    def test_camera_only(self) -> None:
        advisories = PlanningAdvisor().advise(
            CameraClassification.PEDESTRIAN, LidarClassification.ROAD_CURVATURE
        )
        assert advisories == ["Adjusting route for detected object: pedestrian"]

    def test_lidar_only(self) -> None:
        advisories = PlanningAdvisor().advise(
            CameraClassification.NONE, LidarClassification.SMALL_OBSTRUCTION
        )
        assert advisories == ["Adjusting route for road conditions: small obstruction"]

    def test_camera_before_lidar(self) -> None:
        advisories = PlanningAdvisor().advise(
            CameraClassification.STOPLIGHT, LidarClassification.LARGE_OBSTRUCTION
        )
        assert advisories == [
            "Adjusting route for detected object: stoplight",
            "Adjusting route for road conditions: large obstruction",
        ]

    @pytest.mark.parametrize(
        "camera,lidar",
        list(itertools.product(CameraClassification, LidarClassification)),
    )
    def test_advisory_count(self, camera, lidar) -> None:
        expected = int(camera is not CameraClassification.NONE) + int(
            lidar is not LidarClassification.ROAD_CURVATURE
        )
        assert len(PlanningAdvisor().advise(camera, lidar)) == expected

    def test_describe_route(self) -> None:
        text = PlanningAdvisor().describe_route(
            NavigationState(40.19073, -74.80927, 40.1, -74.9)
        )
        assert text == "Driving from (40.1907, -74.8093) to (40.1000, -74.9000)"


class TestSimulationStateMachine:
    """Tests for SimulationStateMachine."""

    FAR = NavigationState(0.0, 0.0, 100.0, 100.0)
    NEAR = NavigationState(0.0, 0.0, 1.0, 1.0)

    def test_start(self) -> None:
        sm = SimulationStateMachine()
        sm.start()

        assert sm.state is RunState.RUNNING
        assert sm.hour == 0
        assert not sm.is_terminal

    def test_keeps_running_when_far(self) -> None:
        sm = SimulationStateMachine(max_hours=24)
        sm.start()

        assert sm.update(self.FAR) is RunState.RUNNING
        assert sm.hour == 1

    def test_arrives_when_close(self) -> None:
        sm = SimulationStateMachine()
        sm.start()

        assert sm.update(self.NEAR) is RunState.ARRIVED
        assert sm.hour == 1
        assert sm.is_terminal

    def test_threshold_is_strict(self) -> None:
        sm = SimulationStateMachine(arrival_threshold=5.0)
        sm.start()

        assert sm.update(NavigationState(0.0, 0.0, 3.0, 4.0)) is RunState.RUNNING

    def test_exhausts_after_max_hours(self) -> None:
        sm = SimulationStateMachine(max_hours=3)
        sm.start()

        states = [sm.update(self.FAR) for _ in range(3)]

        assert states == [RunState.RUNNING, RunState.RUNNING, RunState.EXHAUSTED]
        assert sm.hour == 3

    def test_arrival_on_last_hour_wins(self) -> None:
        sm = SimulationStateMachine(max_hours=1)
        sm.start()

        assert sm.update(self.NEAR) is RunState.ARRIVED

    def test_terminal_update_is_noop(self) -> None:
        sm = SimulationStateMachine()
        sm.start()
        sm.update(self.NEAR)

        assert sm.update(self.FAR) is RunState.ARRIVED
        assert sm.hour == 1

    def test_no_hours_exhausts_immediately(self) -> None:
        sm = SimulationStateMachine(max_hours=0)
        sm.start()

        assert sm.state is RunState.EXHAUSTED
