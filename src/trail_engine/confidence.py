"""Confidence scoring for completed gestures."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from trail_engine.geometry import Point, to_array
from trail_engine.motion import MotionType

BASE_CONFIDENCE = 0.5
LONG_TRAIL_BONUS = 0.2
LONG_TRAIL_POINTS = 10
SMOOTHNESS_WEIGHT = 0.3
VARIANCE_SCALE = 1000.0


def velocity_variance(velocities: Sequence[Point]) -> float:
    """Mean squared distance of each velocity from the mean velocity."""
    if not velocities:
        return 0.0
    arr = to_array(velocities)
    deviations = arr - arr.mean(axis=0)
    return float(np.mean(np.sum(deviations ** 2, axis=1)))


def smoothness(velocities: Sequence[Point]) -> float:
    """1.0 for perfectly steady motion, falling to 0.0 as variance grows."""
    if not velocities:
        return 0.0
    return float(np.clip(1.0 - velocity_variance(velocities) / VARIANCE_SCALE, 0.0, 1.0))


class ConfidenceScorer:
    """Scores a recognized gesture from trail length and steadiness."""

    def score(
        self,
        gesture_type: Optional[MotionType],
        trail_length: int,
        velocities: Sequence[Point],
    ) -> float:
        # All gesture kinds are scored alike
        confidence = BASE_CONFIDENCE
        if trail_length > LONG_TRAIL_POINTS:
            confidence += LONG_TRAIL_BONUS
        confidence += SMOOTHNESS_WEIGHT * smoothness(velocities)
        return float(np.clip(confidence, 0.0, 1.0))
