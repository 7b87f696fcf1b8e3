"""Exceptions raised by the drive cycle simulation."""


class DriveCycleError(Exception):
    """Base exception for the package."""


class InvalidInputError(DriveCycleError, ValueError):
    """Raised when simulation input is malformed.

    Initial coordinates must be finite real numbers and the perception
    cycle index must be a non-negative integer.
    """
