"""Whole-trail gesture recognition.

Runs once when a trail is finished. Detectors are tried in a fixed
priority order and the first non-NONE answer wins:

    circle → triangle/square → zigzag → wave → scoop → spiral → direction

Every detector degrades to NONE on short or ambiguous input instead of
raising, so a caller only has to check the trail is long enough to be
worth classifying at all.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np

from trail_engine.classifier import MotionClassifier
from trail_engine.config import TrackerConfig
from trail_engine.geometry import Point, centroid, corner_angle, normalize_angle, to_array
from trail_engine.motion import MotionType

# Circle
CIRCLE_MIN_ROTATION = 1.5 * math.pi
CIRCLE_STEP_TOLERANCE = math.pi / 4

# Polygons
CORNER_MIN_ANGLE = 60.0  # degrees of turning
RIGHT_ANGLE_TOLERANCE = 30.0
TRIANGLE_MIN_POINTS = 6
SQUARE_MIN_POINTS = 8
SQUARE_MIN_RIGHT_ANGLES = 3

# Patterns
ZIGZAG_MIN_VELOCITIES = 6
ZIGZAG_MIN_CHANGES = 3
WAVE_MIN_POINTS = 8
WAVE_MIN_REVERSALS = 3
SCOOP_MIN_POINTS = 5
SCOOP_MIN_DEPTH = 30.0
SPIRAL_MIN_POINTS = 10
SPIRAL_MONOTONIC_RATIO = 0.7


def _count_sign_changes(values: Sequence[float]) -> int:
    """Count sign flips between consecutive non-zero values."""
    changes = 0
    last_sign = 0
    for value in values:
        if value == 0:
            continue
        sign = 1 if value > 0 else -1
        if last_sign and sign != last_sign:
            changes += 1
        last_sign = sign
    return changes


class GestureRecognizer:
    """Ordered cascade of closed-form shape and pattern detectors."""

    def __init__(
        self,
        config: Optional[TrackerConfig] = None,
        classifier: Optional[MotionClassifier] = None,
    ):
        self.config = config or TrackerConfig()
        self.classifier = classifier or MotionClassifier(self.config)

    def recognize(self, points: Sequence[Point], velocities: Sequence[Point]) -> MotionType:
        """Classify a completed trail.

        Args:
            points: Accepted trail positions, oldest first.
            velocities: Per-step displacement vectors, oldest first.
        """
        result = self.detect_circle(points)
        if result != MotionType.NONE:
            return result

        result = self.detect_shape(points)
        if result != MotionType.NONE:
            return result

        result = self.detect_pattern(points, velocities)
        if result != MotionType.NONE:
            return result

        return self.detect_direction(points)

    # -- circle ------------------------------------------------------------

    def total_rotation(self, points: Sequence[Point]) -> Optional[float]:
        """Signed sweep around the centroid in radians.

        Returns None when the sweep reverses: from the third point on, a
        step larger than CIRCLE_STEP_TOLERANCE against the rotation so far
        aborts the walk.
        """
        if len(points) < 2:
            return 0.0

        center = centroid(points)
        arr = to_array(points)
        angles = np.arctan2(arr[:, 1] - center.y, arr[:, 0] - center.x)

        total = 0.0
        for i in range(1, len(angles)):
            step = normalize_angle(float(angles[i] - angles[i - 1]))
            if i >= 2 and step * total < 0 and abs(step) > CIRCLE_STEP_TOLERANCE:
                return None
            total += step
        return total

    def detect_circle(self, points: Sequence[Point]) -> MotionType:
        if len(points) < max(1, self.config.circle_segments_required):
            return MotionType.NONE

        total = self.total_rotation(points)
        if total is None or abs(total) <= CIRCLE_MIN_ROTATION:
            return MotionType.NONE
        # y grows downward, so a positive sweep is clockwise on screen
        if total > 0:
            return MotionType.CIRCLE_CLOCKWISE
        return MotionType.CIRCLE_COUNTER_CLOCKWISE

    # -- polygons ----------------------------------------------------------

    def find_corners(self, points: Sequence[Point]) -> list[Point]:
        """Interior points where the trail turns by more than CORNER_MIN_ANGLE."""
        corners = []
        for i in range(1, len(points) - 1):
            if corner_angle(points[i - 1], points[i], points[i + 1]) > CORNER_MIN_ANGLE:
                corners.append(points[i])
        return corners

    def count_right_angles(self, corners: Sequence[Point]) -> int:
        """Consecutive corner triples whose turn is close to 90 degrees."""
        count = 0
        for i in range(len(corners) - 2):
            angle = corner_angle(corners[i], corners[i + 1], corners[i + 2])
            if abs(angle - 90.0) < RIGHT_ANGLE_TOLERANCE:
                count += 1
        return count

    def detect_shape(self, points: Sequence[Point]) -> MotionType:
        corners = self.find_corners(points)
        n_corners = len(corners)

        if len(points) >= TRIANGLE_MIN_POINTS and 3 <= n_corners <= 4:
            return MotionType.TRIANGLE

        if (
            len(points) >= SQUARE_MIN_POINTS
            and 4 <= n_corners <= 5
            and self.count_right_angles(corners) >= SQUARE_MIN_RIGHT_ANGLES
        ):
            return MotionType.SQUARE

        return MotionType.NONE

    # -- patterns ----------------------------------------------------------

    def detect_pattern(self, points: Sequence[Point], velocities: Sequence[Point]) -> MotionType:
        for result in (
            self.detect_zigzag(velocities),
            self.detect_wave(points),
            self.detect_scoop(points),
            self.detect_spiral(points),
        ):
            if result != MotionType.NONE:
                return result
        return MotionType.NONE

    def detect_zigzag(self, velocities: Sequence[Point]) -> MotionType:
        """Repeated left/right reversals in the recent velocity history."""
        if len(velocities) < ZIGZAG_MIN_VELOCITIES:
            return MotionType.NONE
        if _count_sign_changes([v.x for v in velocities]) >= ZIGZAG_MIN_CHANGES:
            return MotionType.ZIGZAG
        return MotionType.NONE

    def detect_wave(self, points: Sequence[Point]) -> MotionType:
        """Repeated up/down reversals along the whole trail."""
        if len(points) < WAVE_MIN_POINTS:
            return MotionType.NONE
        steps = [points[i].y - points[i - 1].y for i in range(1, len(points))]
        if _count_sign_changes(steps) >= WAVE_MIN_REVERSALS:
            return MotionType.WAVE
        return MotionType.NONE

    def detect_scoop(self, points: Sequence[Point]) -> MotionType:
        """A dip away from the start that comes partway back."""
        if len(points) < SCOOP_MIN_POINTS:
            return MotionType.NONE

        start_y = points[0].y
        end_y = points[-1].y
        ys = [p.y for p in points]
        lowest_y, highest_y = min(ys), max(ys)

        if start_y - lowest_y > SCOOP_MIN_DEPTH and end_y < start_y:
            return MotionType.SCOOP_UP
        if highest_y - start_y > SCOOP_MIN_DEPTH and end_y > start_y:
            return MotionType.SCOOP_DOWN
        return MotionType.NONE

    def detect_spiral(self, points: Sequence[Point]) -> MotionType:
        """Distance from the centroid grows (or shrinks) almost every step."""
        if len(points) < SPIRAL_MIN_POINTS:
            return MotionType.NONE

        center = centroid(points)
        arr = to_array(points)
        distances = np.hypot(arr[:, 0] - center.x, arr[:, 1] - center.y)
        deltas = np.diff(distances)

        increasing = int(np.sum(deltas > 0)) / len(deltas)
        decreasing = int(np.sum(deltas < 0)) / len(deltas)
        if increasing > SPIRAL_MONOTONIC_RATIO or decreasing > SPIRAL_MONOTONIC_RATIO:
            return MotionType.SPIRAL
        return MotionType.NONE

    # -- fallback ----------------------------------------------------------

    def detect_direction(self, points: Sequence[Point]) -> MotionType:
        """Overall direction from the first to the last point."""
        if len(points) < 2:
            return MotionType.NONE
        return self.classifier.classify_direction(points[-1] - points[0])
