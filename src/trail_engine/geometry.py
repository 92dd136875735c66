"""Planar geometry helpers for pointer trails.

Coordinates follow the screen convention: x grows to the right, y grows
downward. All angles are radians unless a name says otherwise.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence, Union

import numpy as np

from trail_engine.motion import MotionType

_EIGHTH = math.pi / 8


@dataclass(frozen=True)
class Point:
    """A 2D position or displacement vector."""
    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def scaled(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


PointLike = Union[Point, Sequence[float], np.ndarray]

ORIGIN = Point(0.0, 0.0)


def as_point(value: PointLike) -> Point:
    """Coerce a tuple, list or array of two numbers into a Point."""
    if isinstance(value, Point):
        return value
    x, y = value[0], value[1]
    return Point(float(x), float(y))


def as_points(values: Iterable[PointLike]) -> list[Point]:
    return [as_point(v) for v in values]


def to_array(points: Sequence[Point]) -> np.ndarray:
    """Stack points into an (N, 2) float64 array."""
    if not points:
        return np.zeros((0, 2), dtype=np.float64)
    return np.array([(p.x, p.y) for p in points], dtype=np.float64)


def centroid(points: Sequence[Point]) -> Point:
    """Mean position. Callers must pass at least one point."""
    mean = to_array(points).mean(axis=0)
    return Point(float(mean[0]), float(mean[1]))


def mean_vector(vectors: Sequence[Point]) -> Point:
    """Mean of a set of vectors; the zero vector when empty."""
    if not vectors:
        return ORIGIN
    return centroid(vectors)


def normalize_angle(angle: float) -> float:
    """Wrap an angle into (-pi, pi]."""
    while angle > math.pi:
        angle -= 2 * math.pi
    while angle <= -math.pi:
        angle += 2 * math.pi
    return angle


def corner_angle(prev: Point, point: Point, nxt: Point) -> float:
    """Turning angle at `point` in degrees, 0 (straight) to 180 (reversal).

    Measured between the incoming segment prev→point and the outgoing
    segment point→nxt. A zero-length segment counts as straight.
    """
    incoming = np.array([point.x - prev.x, point.y - prev.y])
    outgoing = np.array([nxt.x - point.x, nxt.y - point.y])
    n_in = float(np.linalg.norm(incoming))
    n_out = float(np.linalg.norm(outgoing))
    if n_in < 1e-12 or n_out < 1e-12:
        return 0.0
    cos_angle = float(np.dot(incoming, outgoing)) / (n_in * n_out)
    return math.degrees(math.acos(float(np.clip(cos_angle, -1.0, 1.0))))


def direction_from_angle(angle: float) -> MotionType:
    """Bucket an atan2 angle into one of eight directions.

    Ranges are open; an angle exactly on a boundary maps to NONE.
    """
    if abs(angle) < _EIGHTH:
        return MotionType.RIGHT
    if abs(angle) > 7 * _EIGHTH:
        return MotionType.LEFT
    if 3 * _EIGHTH < angle < 5 * _EIGHTH:
        return MotionType.DOWN
    if -5 * _EIGHTH < angle < -3 * _EIGHTH:
        return MotionType.UP
    if _EIGHTH < angle < 3 * _EIGHTH:
        return MotionType.DIAGONAL_DOWN_RIGHT
    if 5 * _EIGHTH < angle < 7 * _EIGHTH:
        return MotionType.DIAGONAL_DOWN_LEFT
    if -3 * _EIGHTH < angle < -_EIGHTH:
        return MotionType.DIAGONAL_UP_RIGHT
    if -7 * _EIGHTH < angle < -5 * _EIGHTH:
        return MotionType.DIAGONAL_UP_LEFT
    return MotionType.NONE
