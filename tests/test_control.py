"""Tests for the driving loop controller and the simulation driver."""

import pytest

from drive_cycle.control import DrivingLoopController, SimulationDriver, TickReport
from drive_cycle.decision import RunState
from drive_cycle.exceptions import InvalidInputError
from drive_cycle.params import Parameters
from drive_cycle.perception import (
    CameraClassification,
    LidarClassification,
    NavigationState,
    PerceptionCycle,
)

START = NavigationState(40.0, -75.0, 40.1, -74.9)
FAR = NavigationState(40.0, -75.0, 1040.0, 925.0)


class TestDrivingLoopController:
    """Tests for DrivingLoopController."""

    def test_tick_report(self) -> None:
        controller = DrivingLoopController(speed=60.0, heading=45.0)

        report, _ = controller.tick(1, START, PerceptionCycle())

        assert report.hour == 1
        assert report.state.current_latitude == pytest.approx(40.1907, abs=1e-4)
        assert report.state.current_longitude == pytest.approx(-74.8093, abs=1e-4)
        assert report.camera is CameraClassification.NONE
        assert report.lidar is LidarClassification.ROAD_CURVATURE
        assert report.cycle_index == 0
        assert report.advisories == ()
        assert not report.needs_adjustment
        assert report.route.startswith("Driving from (40.1907, -74.8093)")

    def test_tick_advances_cycle(self) -> None:
        controller = DrivingLoopController()
        cycle = PerceptionCycle()

        _, cycle = controller.tick(1, START, cycle)
        report, cycle = controller.tick(2, START, cycle)

        assert report.camera is CameraClassification.VEHICLE
        assert report.lidar is LidarClassification.SMALL_OBSTRUCTION
        assert len(report.advisories) == 2
        assert cycle.cycle_index == 2

    def test_frozen_cycle(self) -> None:
        controller = DrivingLoopController(advance_cycle=False)
        cycle = PerceptionCycle(4)

        report, next_cycle = controller.tick(1, START, cycle)

        assert next_cycle == cycle
        assert report.camera is CameraClassification.STOPLIGHT

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"heading": float("inf")},
            {"heading": float("-inf")},
            {"speed": float("nan")},
            {"speed": "60"},
            {"heading": True},
        ],
    )
    def test_rejects_invalid_speed_or_heading(self, kwargs) -> None:
        with pytest.raises(InvalidInputError):
            DrivingLoopController(**kwargs)

    def test_to_dict(self) -> None:
        report, _ = DrivingLoopController().tick(3, START, PerceptionCycle(2))
        data = report.to_dict()

        assert data["hour"] == 3
        assert data["camera"] == "PEDESTRIAN"
        assert data["lidar"] == "LARGE_OBSTRUCTION"
        assert data["destination"] == [40.1, -74.9]
        assert len(data["advisories"]) == 2


class TestSimulationDriver:
    """Tests for SimulationDriver."""

    def test_arrives_at_hour_one(self) -> None:
        result = SimulationDriver(Parameters(speed=60.0, heading=45.0)).run(START)

        assert result.outcome is RunState.ARRIVED
        assert result.arrived
        assert result.arrival_hour == 1
        assert len(result.reports) == 1
        assert result.final_state.distance_to_destination == pytest.approx(0.1284, abs=1e-3)

    def test_exhausts_after_24_hours(self) -> None:
        result = SimulationDriver(Parameters(speed=60.0, heading=45.0)).run(FAR)

        assert result.outcome is RunState.EXHAUSTED
        assert not result.arrived
        assert result.arrival_hour is None
        assert result.hours == 24
        assert [r.hour for r in result.reports] == list(range(1, 25))

    def test_cycle_advances_each_hour(self) -> None:
        result = SimulationDriver().run(FAR)

        assert [r.cycle_index for r in result.reports[:7]] == [0, 1, 2, 3, 4, 5, 6]
        assert result.reports[6].camera is CameraClassification.NONE

    def test_frozen_cycle_constant_perception(self) -> None:
        params = Parameters(advance_cycle=False, initial_cycle_index=1)
        result = SimulationDriver(params).run(FAR)

        assert {r.camera for r in result.reports} == {CameraClassification.VEHICLE}
        assert {r.lidar for r in result.reports} == {LidarClassification.SMALL_OBSTRUCTION}

    def test_positions_carried_forward(self) -> None:
        result = SimulationDriver().run(FAR)

        lats = [r.state.current_latitude for r in result.reports]
        assert lats == sorted(lats)
        assert result.reports[-1].state == result.final_state
        assert result.route.hours == 24

    def test_on_tick_called_in_order(self) -> None:
        seen: list[TickReport] = []

        result = SimulationDriver(Parameters(max_hours=5)).run(FAR, on_tick=seen.append)

        assert seen == result.reports
        assert len(seen) == 5
        assert result.outcome is RunState.EXHAUSTED

    def test_deterministic(self) -> None:
        driver = SimulationDriver()
        assert driver.run(FAR).to_dict() == driver.run(FAR).to_dict()

    def test_zero_hours(self) -> None:
        result = SimulationDriver(Parameters(max_hours=0)).run(FAR)

        assert result.outcome is RunState.EXHAUSTED
        assert result.reports == []
        assert result.final_state == FAR

    def test_non_finite_heading_rejected_before_first_tick(self) -> None:
        ticks = []
        driver = SimulationDriver(Parameters(heading=float("inf")))

        with pytest.raises(InvalidInputError):
            driver.run(START, on_tick=ticks.append)
        assert ticks == []
