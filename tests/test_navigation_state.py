"""Tests for NavigationState and RouteLog."""

import math

import numpy as np
import pytest

from drive_cycle.exceptions import DriveCycleError, InvalidInputError
from drive_cycle.perception import NavigationState, RouteLog


class TestNavigationState:
    """Tests for NavigationState."""

    def test_distance_to_destination(self) -> None:
        state = NavigationState(0.0, 0.0, 3.0, 4.0)
        assert state.distance_to_destination == 5.0

    def test_moved_keeps_destination(self) -> None:
        state = NavigationState(1.0, 2.0, 10.0, 20.0)
        moved = state.moved(0.5, -0.5)

        assert moved.current == (1.5, 1.5)
        assert moved.destination == (10.0, 20.0)
        assert state.current == (1.0, 2.0)

    def test_is_immutable(self) -> None:
        state = NavigationState(1.0, 2.0, 10.0, 20.0)
        with pytest.raises(AttributeError):
            state.destination_latitude = 0.0

    def test_integers_accepted(self) -> None:
        state = NavigationState(40, -75, 41, -74)
        assert state.distance_to_destination == pytest.approx(math.sqrt(2))

    @pytest.mark.parametrize(
        "bad",
        [float("nan"), float("inf"), float("-inf"), "40.0", None, True],
    )
    def test_invalid_coordinate_rejected(self, bad) -> None:
        with pytest.raises(InvalidInputError):
            NavigationState(bad, -75.0, 40.1, -74.9)

    def test_invalid_input_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            NavigationState(40.0, -75.0, 40.1, float("nan"))


class TestRouteLog:
    """Tests for RouteLog."""

    def test_starts_with_start_position(self) -> None:
        route = RouteLog(NavigationState(0.0, 0.0, 3.0, 4.0))

        assert route.hours == 0
        assert route.positions.shape == (1, 2)
        assert route.distance_travelled == 0.0
        assert route.closest_approach == 5.0

    def test_record_accumulates(self) -> None:
        start = NavigationState(0.0, 0.0, 3.0, 4.0)
        route = RouteLog(start)
        route.record(start.moved(3.0, 0.0))
        route.record(start.moved(3.0, 4.0))

        assert route.hours == 2
        np.testing.assert_allclose(route.positions, [[0, 0], [3, 0], [3, 4]])
        assert route.distance_travelled == pytest.approx(7.0)
        assert route.closest_approach == pytest.approx(0.0)
        assert route.latest == (3.0, 4.0)

    def test_record_rejects_other_destination(self) -> None:
        route = RouteLog(NavigationState(0.0, 0.0, 3.0, 4.0))
        with pytest.raises(DriveCycleError):
            route.record(NavigationState(1.0, 1.0, 9.0, 9.0))

        assert route.hours == 0
