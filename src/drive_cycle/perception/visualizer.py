"""
Route visualizer - Renders a RouteLog as an annotated OpenCV image.

Top-down view, north up:
- Travelled path (polyline through every hourly position)
- Start, current and destination markers
- Text overlay with run state, hour and remaining distance
"""

from __future__ import annotations

import cv2
import numpy as np

from ..config import ROUTE_IMAGE_MARGIN, ROUTE_IMAGE_SIZE, ROUTE_JPEG_QUALITY
from .route_log import RouteLog


# Colors (BGR)
_WHITE = (255, 255, 255)
_GRAY = (120, 120, 120)
_GRID = (30, 30, 30)
_CYAN = (255, 255, 0)
_GREEN = (0, 220, 0)
_RED = (0, 0, 255)
_YELLOW = (0, 220, 220)

# Smallest span (degrees) the view is allowed to zoom in to
_MIN_SPAN = 1e-3


class RouteVisualizer:
    """Renders RouteLog as annotated OpenCV images."""

    def __init__(self, size: int = ROUTE_IMAGE_SIZE, margin: int = ROUTE_IMAGE_MARGIN):
        self.size = size
        self.margin = margin

    # ── Public API ──────────────────────────────────────────────

    def render(self, route: RouteLog | None, state_name: str = "", hour: int = 0) -> bytes:
        """Render the route with markers and overlay.

        Args:
            route: Route of the last run (None handled gracefully).
            state_name: Run state name for overlay.
            hour: Hours simulated so far.

        Returns:
            JPEG bytes.
        """
        image = np.zeros((self.size, self.size, 3), dtype=np.uint8)
        self._draw_grid(image)

        if route is None:
            self._put_centered(image, "No route yet", self.size // 2, self.size // 2, _GRAY)
            return self._encode(image)

        positions = route.positions
        destination = np.array(route.destination, dtype=float)
        to_px = self._fit(np.vstack([positions, destination]))

        points = np.array([to_px(p) for p in positions], dtype=np.int32)
        if len(points) > 1:
            cv2.polylines(image, [points.reshape(-1, 1, 2)], False, _CYAN, 2)

        cv2.circle(image, tuple(int(v) for v in points[0]), 6, _WHITE, 1)
        cv2.drawMarker(
            image, tuple(int(v) for v in points[-1]), _GREEN,
            cv2.MARKER_TRIANGLE_UP, 14, 2,
        )
        cv2.drawMarker(
            image, to_px(destination), _RED,
            cv2.MARKER_CROSS, 16, 2,
        )

        remaining = float(np.hypot(*(destination - positions[-1])))
        self._draw_text_overlay(image, state_name, hour, remaining, route.distance_travelled)
        return self._encode(image)

    # ── Helpers ─────────────────────────────────────────────────

    def _fit(self, coords: np.ndarray):
        """Build a (lat, lon) -> (x, y) pixel mapping covering coords."""
        lat_min, lon_min = coords.min(axis=0)
        lat_max, lon_max = coords.max(axis=0)
        span = max(lat_max - lat_min, lon_max - lon_min, _MIN_SPAN)
        scale = (self.size - 2 * self.margin) / span
        lat_mid = (lat_min + lat_max) / 2
        lon_mid = (lon_min + lon_max) / 2
        center = self.size // 2

        def to_px(coord) -> tuple[int, int]:
            lat, lon = coord
            x = int(round(center + (lon - lon_mid) * scale))
            y = int(round(center - (lat - lat_mid) * scale))
            return x, y

        return to_px

    def _draw_grid(self, image: np.ndarray) -> None:
        step = max(1, (self.size - 2 * self.margin) // 4)
        for offset in range(self.margin, self.size - self.margin + 1, step):
            cv2.line(image, (offset, 0), (offset, self.size - 1), _GRID, 1)
            cv2.line(image, (0, offset), (self.size - 1, offset), _GRID, 1)

    def _draw_text_overlay(self, image: np.ndarray, state_name: str, hour: int, remaining: float, travelled: float) -> None:
        lines = []
        if state_name:
            lines.append(state_name)
        lines.append(f"Hour: {hour}")
        lines.append(f"To go: {remaining:.4f}")
        lines.append(f"Travelled: {travelled:.4f}")

        y = 18
        for line in lines:
            cv2.putText(
                image, line, (8, y),
                cv2.FONT_HERSHEY_SIMPLEX, 0.45, _YELLOW, 1,
            )
            y += 18

    # ── Utilities ───────────────────────────────────────────────

    @staticmethod
    def _put_centered(image: np.ndarray, text: str, cx: int, cy: int, color: tuple) -> None:
        (tw, th), _ = cv2.getTextSize(
            text, cv2.FONT_HERSHEY_SIMPLEX, 0.7, 1,
        )
        cv2.putText(
            image, text, (cx - tw // 2, cy + th // 2),
            cv2.FONT_HERSHEY_SIMPLEX, 0.7, color, 1,
        )

    @staticmethod
    def _encode(image: np.ndarray, quality: int = ROUTE_JPEG_QUALITY) -> bytes:
        ret, jpeg = cv2.imencode(
            ".jpg", image, [cv2.IMWRITE_JPEG_QUALITY, quality],
        )
        if not ret:
            return b""
        return jpeg.tobytes()
