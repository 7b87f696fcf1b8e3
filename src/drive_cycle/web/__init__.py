"""
Web Layer - Debug interface.

Provides:
- Dashboard page
- Simulation runs over REST
- Parameter tuning
- Route image of the last run
"""

from .server import create_app, run_server

__all__ = ["create_app", "run_server"]
