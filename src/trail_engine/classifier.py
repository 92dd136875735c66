"""Continuous direction classification of recent pointer movement."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from trail_engine.config import TrackerConfig
from trail_engine.geometry import Point, direction_from_angle, mean_vector
from trail_engine.motion import MotionType

SMOOTHING_WINDOW = 3


class MotionClassifier:
    """Maps a movement vector to one of eight directions.

    Vectors shorter than the configured movement threshold are NONE.
    While a trail is being drawn, the last few velocities are averaged
    before classifying so a single jittery step doesn't flip the label.
    """

    def __init__(self, config: Optional[TrackerConfig] = None):
        self.config = config or TrackerConfig()

    def classify_direction(self, vector: Point) -> MotionType:
        if vector.length() < self.config.min_movement_threshold:
            return MotionType.NONE
        return direction_from_angle(math.atan2(vector.y, vector.x))

    @staticmethod
    def average_velocity(velocities: Sequence[Point], n: int = SMOOTHING_WINDOW) -> Point:
        """Mean of the last min(n, len(velocities)) vectors."""
        if n <= 0 or not velocities:
            return Point(0.0, 0.0)
        return mean_vector(list(velocities)[-n:])

    def classify_recent(
        self, velocities: Sequence[Point]
    ) -> Optional[tuple[MotionType, Point]]:
        """Classify the smoothed recent velocity.

        Returns (motion_type, averaged_velocity), or None until enough
        history exists to smooth over.
        """
        if len(velocities) < SMOOTHING_WINDOW:
            return None
        avg = self.average_velocity(velocities, SMOOTHING_WINDOW)
        return self.classify_direction(avg), avg
