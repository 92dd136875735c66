"""Tests for whole-trail gesture recognition."""

import math

from trail_engine import shapes
from trail_engine.config import TrackerConfig
from trail_engine.geometry import Point
from trail_engine.motion import MotionType
from trail_engine.recognizer import GestureRecognizer


def _velocities(points):
    return [points[i] - points[i - 1] for i in range(1, len(points))]


def _recognize(points, **config):
    recognizer = GestureRecognizer(TrackerConfig(**config))
    return recognizer.recognize(points, _velocities(points))


def _on_circle(degrees, radius=100.0):
    return [
        Point(radius * math.cos(math.radians(d)), radius * math.sin(math.radians(d)))
        for d in degrees
    ]


class TestCircle:
    def test_positive_sweep_is_clockwise(self):
        pts = shapes.arc(radius=100, sweep_degrees=300, step_degrees=10)
        assert _recognize(pts, circle_segments_required=8) == MotionType.CIRCLE_CLOCKWISE

    def test_negative_sweep_is_counter_clockwise(self):
        pts = shapes.arc(radius=100, sweep_degrees=-300, step_degrees=10)
        assert _recognize(pts, circle_segments_required=8) == MotionType.CIRCLE_COUNTER_CLOCKWISE

    def test_half_circle_is_not_a_circle(self):
        pts = shapes.arc(radius=100, sweep_degrees=180, step_degrees=10)
        assert GestureRecognizer().detect_circle(pts) == MotionType.NONE

    def test_requires_enough_points(self):
        pts = shapes.arc(radius=100, sweep_degrees=300, step_degrees=30)  # 11 points
        recognizer = GestureRecognizer(TrackerConfig(circle_segments_required=12))
        assert recognizer.detect_circle(pts) == MotionType.NONE
        recognizer.config.circle_segments_required = 11
        assert recognizer.detect_circle(pts) == MotionType.CIRCLE_CLOCKWISE

    def test_small_backtrack_tolerated(self):
        degrees = list(range(0, 190, 10)) + [160] + list(range(170, 360, 10))
        assert GestureRecognizer().detect_circle(_on_circle(degrees)) == MotionType.CIRCLE_CLOCKWISE

    def test_large_backtrack_aborts(self):
        degrees = list(range(0, 190, 10)) + [90] + list(range(100, 360, 10))
        recognizer = GestureRecognizer()
        assert recognizer.total_rotation(_on_circle(degrees)) is None
        assert recognizer.detect_circle(_on_circle(degrees)) == MotionType.NONE

    def test_circle_wins_over_square(self):
        # A traced square sweeps more than 270 degrees around its centroid
        assert _recognize(shapes.square()) == MotionType.CIRCLE_CLOCKWISE


class TestShapes:
    def test_triangle(self):
        pts = shapes.triangle()
        assert len(GestureRecognizer().find_corners(pts)) == 3
        assert _recognize(pts) == MotionType.TRIANGLE

    def test_square_when_circle_disabled(self):
        pts = shapes.square()
        recognizer = GestureRecognizer(TrackerConfig(circle_segments_required=50))
        corners = recognizer.find_corners(pts)
        assert len(corners) == 5
        assert recognizer.count_right_angles(corners) == 3
        assert recognizer.recognize(pts, _velocities(pts)) == MotionType.SQUARE

    def test_straight_line_has_no_corners(self):
        assert GestureRecognizer().find_corners(shapes.line(n_points=10)) == []

    def test_triangle_needs_six_points(self):
        pts = [Point(0, 0), Point(100, 0), Point(50, 80), Point(0, 0), Point(50, 0)]
        assert GestureRecognizer().detect_shape(pts) == MotionType.NONE


class TestPatterns:
    def test_zigzag(self):
        pts = shapes.zigzag()
        vels = _velocities(pts)
        assert GestureRecognizer().detect_zigzag(vels) == MotionType.ZIGZAG
        assert _recognize(pts) == MotionType.ZIGZAG

    def test_zigzag_ignores_zero_horizontal_steps(self):
        vels = [Point(10, 0), Point(0, 10), Point(-10, 0), Point(0, 10),
                Point(10, 0), Point(0, 10)]
        # + - + : only two changes once the vertical steps are skipped
        assert GestureRecognizer().detect_zigzag(vels) == MotionType.NONE

    def test_zigzag_needs_six_velocities(self):
        vels = [Point(10, 0), Point(-10, 0), Point(10, 0), Point(-10, 0), Point(10, 0)]
        assert GestureRecognizer().detect_zigzag(vels) == MotionType.NONE

    def test_wave(self):
        pts = shapes.wave()
        assert GestureRecognizer().detect_wave(pts) == MotionType.WAVE
        assert _recognize(pts) == MotionType.WAVE

    def test_scoop_up(self):
        pts = [Point(0, 0), Point(10, -20), Point(20, -40), Point(30, -25), Point(40, -10)]
        assert _recognize(pts) == MotionType.SCOOP_UP
        assert shapes.scoop() == pts

    def test_scoop_down(self):
        assert _recognize(shapes.scoop(downward=True)) == MotionType.SCOOP_DOWN

    def test_shallow_dip_is_not_a_scoop(self):
        pts = shapes.scoop(depth=25, rebound=10)
        assert GestureRecognizer().detect_scoop(pts) == MotionType.NONE

    def test_spiral_when_circle_disabled(self):
        pts = shapes.spiral()
        assert _recognize(pts, circle_segments_required=100) == MotionType.SPIRAL

    def test_spiral_needs_ten_points(self):
        pts = shapes.spiral()[:9]
        assert GestureRecognizer().detect_spiral(pts) == MotionType.NONE


class TestFallback:
    def test_right(self):
        assert _recognize([Point(0, 0), Point(100, 0)]) == MotionType.RIGHT
        assert _recognize(shapes.line((0, 0), (100, 0))) == MotionType.RIGHT

    def test_left(self):
        assert _recognize([Point(100, 0), Point(0, 0)]) == MotionType.LEFT
        assert _recognize(shapes.line((100, 0), (0, 0))) == MotionType.LEFT

    def test_diagonal(self):
        assert _recognize(shapes.line((0, 0), (30, -30))) == MotionType.DIAGONAL_UP_RIGHT

    def test_long_vertical_travel_reads_as_scoop(self):
        # Scoop runs before the direction fallback and only checks depth
        assert _recognize(shapes.line((0, 0), (0, -100))) == MotionType.SCOOP_UP
        assert _recognize(shapes.line((0, 0), (80, 80))) == MotionType.SCOOP_DOWN

    def test_short_vertical_swipes(self):
        assert _recognize(shapes.line((0, 30), (0, 0))) == MotionType.UP
        assert _recognize(shapes.line((0, 0), (0, 30))) == MotionType.DOWN

    def test_single_point_is_none(self):
        assert _recognize([Point(5, 5)]) == MotionType.NONE

    def test_tiny_displacement_is_none(self):
        pts = [Point(0, 0), Point(2, 0), Point(1, 1), Point(2, 1), Point(1, 0)]
        assert _recognize(pts) == MotionType.NONE

    def test_empty_trail_is_none(self):
        assert GestureRecognizer().recognize([], []) == MotionType.NONE
