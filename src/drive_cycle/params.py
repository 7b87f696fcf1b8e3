"""
Runtime tunable parameters with optional JSON loading.

The CLI and the web interface share one Parameters instance. Changes
made through the web API take effect on the next simulation run.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import asdict, dataclass
from pathlib import Path

from .config import (
    ARRIVAL_THRESHOLD,
    DEFAULT_HEADING,
    DEFAULT_SPEED,
    MAX_SIMULATION_HOURS,
    SIMULATION_HOURS,
)
from .exceptions import InvalidInputError

logger = logging.getLogger(__name__)

_BOOL_STRINGS = {"true": True, "1": True, "false": False, "0": False}


@dataclass
class Parameters:
    """Runtime tunable parameters."""

    # Vehicle motion, fixed for a whole run
    speed: float = DEFAULT_SPEED  # km per tick
    heading: float = DEFAULT_HEADING  # degrees

    # Loop bounds
    max_hours: int = SIMULATION_HOURS
    arrival_threshold: float = ARRIVAL_THRESHOLD

    # Mock perception
    advance_cycle: bool = True  # False = same classification every hour
    initial_cycle_index: int = 0

    def update(self, **kwargs):
        """Update parameters from dict (e.g., from web API).

        Invalid values are logged and skipped.
        """
        for key, value in kwargs.items():
            if hasattr(self, key):
                try:
                    setattr(self, key, self._coerce(key, value))
                except InvalidInputError as e:
                    logger.warning(f"Invalid value for {key}: {value} ({e})")

    def override(self, **kwargs):
        """Update parameters, raising InvalidInputError on the first bad value."""
        for key, value in kwargs.items():
            if not hasattr(self, key):
                raise InvalidInputError(f"Unknown parameter {key}")
            try:
                setattr(self, key, self._coerce(key, value))
            except InvalidInputError as e:
                raise InvalidInputError(f"{key}: {e}") from None

    def _coerce(self, key: str, value):
        """Convert value to the type of field key, or raise InvalidInputError."""
        expected_type = type(getattr(self, key))

        if expected_type is bool:
            if isinstance(value, bool):
                return value
            if isinstance(value, str) and value.strip().lower() in _BOOL_STRINGS:
                return _BOOL_STRINGS[value.strip().lower()]
            raise InvalidInputError("expected true or false")

        if isinstance(value, bool):
            raise InvalidInputError("expected a number")
        try:
            converted = expected_type(value)
        except (TypeError, ValueError, OverflowError):
            raise InvalidInputError(f"expected {expected_type.__name__}") from None

        if expected_type is float and not math.isfinite(converted):
            raise InvalidInputError("must be finite")
        if key == "max_hours" and not 0 <= converted <= MAX_SIMULATION_HOURS:
            raise InvalidInputError(f"must be between 0 and {MAX_SIMULATION_HOURS}")
        return converted

    @classmethod
    def load(cls, path: str | Path | None = None) -> Parameters:
        """Load from JSON file, or return defaults."""
        if path is None:
            return cls()
        path = Path(path)
        if path.exists():
            try:
                with open(path) as f:
                    data = json.load(f)
                params = cls()
                params.update(**data)
                logger.info(f"Parameters loaded from {path}")
                return params
            except (OSError, ValueError, TypeError, OverflowError) as e:
                logger.warning(f"Failed to load {path}: {e}, using defaults")
        else:
            logger.warning(f"Parameters file {path} not found, using defaults")
        return cls()

    def to_dict(self) -> dict:
        """Convert to dict for JSON API."""
        return asdict(self)
