"""
Navigation state - Where the vehicle is and where it is going.

NavigationState is an immutable value. The dead-reckoning integrator
produces a new state each tick; the destination never changes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields, replace
from numbers import Real

from ..exceptions import InvalidInputError


@dataclass(frozen=True)
class NavigationState:
    """Current and destination coordinates, in degrees."""

    current_latitude: float
    current_longitude: float
    destination_latitude: float
    destination_longitude: float

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise InvalidInputError(
                    f"{f.name} must be a real number, got {value!r}"
                )
            if not math.isfinite(value):
                raise InvalidInputError(f"{f.name} must be finite, got {value!r}")

    @property
    def current(self) -> tuple[float, float]:
        """(latitude, longitude) of the vehicle."""
        return self.current_latitude, self.current_longitude

    @property
    def destination(self) -> tuple[float, float]:
        """(latitude, longitude) of the destination."""
        return self.destination_latitude, self.destination_longitude

    @property
    def distance_to_destination(self) -> float:
        """Planar Euclidean distance, treating degrees as flat units."""
        return math.hypot(
            self.destination_latitude - self.current_latitude,
            self.destination_longitude - self.current_longitude,
        )

    def moved(self, d_latitude: float, d_longitude: float) -> NavigationState:
        """Return a copy with the current position shifted."""
        return replace(
            self,
            current_latitude=self.current_latitude + d_latitude,
            current_longitude=self.current_longitude + d_longitude,
        )
