"""
Console I/O - Reads start coordinates and renders reports as text.
"""

from __future__ import annotations

import math
from typing import Callable

from .control import SimulationResult, TickReport
from .exceptions import InvalidInputError
from .perception import NavigationState

COORDINATE_PROMPTS = (
    ("current_latitude", "Enter current latitude: "),
    ("current_longitude", "Enter current longitude: "),
    ("destination_latitude", "Enter destination latitude: "),
    ("destination_longitude", "Enter destination longitude: "),
)


def parse_coordinate(text: str, name: str = "coordinate") -> float:
    """Parse one coordinate, rejecting non-numeric and non-finite input."""
    try:
        value = float(text)
    except (TypeError, ValueError):
        raise InvalidInputError(f"{name} must be a number, got {text!r}") from None
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} must be finite, got {text!r}")
    return value


def prompt_coordinates(input_fn: Callable[[str], str] | None = None) -> NavigationState:
    """Read the four start coordinates in fixed order."""
    input_fn = input_fn or input
    values = {
        name: parse_coordinate(input_fn(prompt).strip(), name)
        for name, prompt in COORDINATE_PROMPTS
    }
    return NavigationState(**values)


def format_report(report: TickReport) -> list[str]:
    """Lines printed for one hour."""
    return [f"Hour {report.hour}:", report.route, *report.advisories]


def format_outcome(result: SimulationResult) -> str | None:
    """Arrival line, or None when the run just ran out of hours."""
    if result.arrived:
        return f"Arrived at destination at hour {result.arrival_hour}."
    return None
