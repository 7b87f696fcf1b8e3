"""
Configuration constants for the drive cycle simulation.

All fixed model constants in one place. Values that can be tuned per run
live in params.Parameters.
"""

# =============================================================================
# NAVIGATION MODEL
# =============================================================================

# Flat-earth dead reckoning: degrees moved = 180 * distance / circumference
EARTH_CIRCUMFERENCE = 40040.0  # km

DEFAULT_SPEED = 60.0  # km per tick
DEFAULT_HEADING = 45.0  # degrees, 0 = north, 90 = east

# =============================================================================
# SIMULATION LOOP
# =============================================================================

SIMULATION_HOURS = 24  # One tick per hour
MAX_SIMULATION_HOURS = 10_000  # Upper bound for runtime overrides
ARRIVAL_THRESHOLD = 25.0  # Planar distance, mixes degrees with model units

# =============================================================================
# MOCK PERCEPTION
# =============================================================================

# Camera cycles through 6 classes, LIDAR through 3 (each repeated twice)
CLASSIFICATION_PERIOD = 6

# =============================================================================
# ROUTE VISUALIZER
# =============================================================================

ROUTE_IMAGE_SIZE = 500  # px, square canvas
ROUTE_IMAGE_MARGIN = 40  # px around the fitted route
ROUTE_JPEG_QUALITY = 80

# =============================================================================
# WEB INTERFACE
# =============================================================================

WEB_HOST = "0.0.0.0"
WEB_PORT = 8080
