"""Bounded trail and velocity history for one pointer session."""

from __future__ import annotations

import time
from collections import deque
from typing import Optional

from trail_engine.config import TrackerConfig
from trail_engine.geometry import Point

VELOCITY_HISTORY_SIZE = 20


class TrailBuffer:
    """Accepted pointer samples plus per-step velocities.

    Samples closer than `min_movement_threshold` to the last accepted one
    are dropped. Both buffers evict oldest-first, and the velocity history
    never holds more entries than the trail has steps.
    """

    def __init__(self, config: Optional[TrackerConfig] = None):
        self.config = config or TrackerConfig()
        self._points: deque[Point] = deque()
        self._velocities: deque[Point] = deque()
        self._last_position: Optional[Point] = None
        self._start_time: Optional[float] = None
        self._tracking = False

    def begin(self, position: Optional[Point] = None, timestamp: Optional[float] = None):
        """Start a session at the current pointer position."""
        self._points.clear()
        self._velocities.clear()
        self._last_position = position
        self._start_time = timestamp if timestamp is not None else time.monotonic()
        self._tracking = True

    def end(self, timestamp: Optional[float] = None) -> float:
        """Finish the session, clear both buffers and return its duration."""
        now = timestamp if timestamp is not None else time.monotonic()
        duration = now - self._start_time if self._start_time is not None else 0.0
        self._points.clear()
        self._velocities.clear()
        self._start_time = None
        self._tracking = False
        return duration

    def accept(self, position: Point) -> bool:
        """Record `position` if it moved far enough. Returns True if kept."""
        if self._points and self._last_position is not None:
            if position.distance_to(self._last_position) < self.config.min_movement_threshold:
                return False

        had_prior = bool(self._points)
        self._points.append(position)
        if had_prior and self._last_position is not None:
            self._velocities.append(position - self._last_position)

        # Evict in lockstep so velocities never outnumber trail steps
        max_points = max(0, int(self.config.max_trail_length))
        while len(self._points) > max_points:
            self._points.popleft()
        max_velocities = min(VELOCITY_HISTORY_SIZE, max(0, len(self._points) - 1))
        while len(self._velocities) > max_velocities:
            self._velocities.popleft()

        self._last_position = position
        return True

    def clear(self):
        """Empty both buffers without ending the session."""
        self._points.clear()
        self._velocities.clear()

    def snapshot(self) -> list[Point]:
        return list(self._points)

    def velocities(self) -> list[Point]:
        return list(self._velocities)

    @property
    def is_tracking(self) -> bool:
        return self._tracking

    @property
    def start_time(self) -> Optional[float]:
        return self._start_time

    @property
    def last_position(self) -> Optional[Point]:
        return self._last_position

    @property
    def velocity_count(self) -> int:
        return len(self._velocities)

    def __len__(self) -> int:
        return len(self._points)
