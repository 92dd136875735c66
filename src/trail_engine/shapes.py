"""Synthetic pointer trails for demos, benchmarks and tests.

All generators return screen-space points (y grows downward) spaced far
enough apart to pass the default movement threshold, except the spiral
whose overrides live in SAMPLE_CONFIG.
"""

from __future__ import annotations

import math
from typing import Callable

import numpy as np

from trail_engine.geometry import Point


def _to_points(xs: np.ndarray, ys: np.ndarray) -> list[Point]:
    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]


def line(start: tuple[float, float] = (0.0, 0.0),
         end: tuple[float, float] = (100.0, 0.0),
         n_points: int = 5) -> list[Point]:
    """Evenly spaced points from start to end, inclusive."""
    t = np.linspace(0.0, 1.0, n_points)
    xs = start[0] + t * (end[0] - start[0])
    ys = start[1] + t * (end[1] - start[1])
    return _to_points(xs, ys)


def arc(radius: float = 100.0, sweep_degrees: float = 300.0,
        step_degrees: float = 10.0, center: tuple[float, float] = (0.0, 0.0),
        start_degrees: float = 0.0) -> list[Point]:
    """Points on a circle at a uniform angular step.

    A positive sweep runs clockwise on screen, a negative one
    counter-clockwise.
    """
    steps = int(round(abs(sweep_degrees) / step_degrees))
    direction = 1.0 if sweep_degrees >= 0 else -1.0
    angles = np.radians(start_degrees + direction * step_degrees * np.arange(steps + 1))
    xs = center[0] + radius * np.cos(angles)
    ys = center[1] + radius * np.sin(angles)
    return _to_points(xs, ys)


def zigzag(width: float = 20.0, step: float = 10.0, n_points: int = 8) -> list[Point]:
    """Alternate left/right while moving down."""
    xs = np.array([0.0 if i % 2 == 0 else width for i in range(n_points)])
    ys = step * np.arange(n_points, dtype=np.float64)
    return _to_points(xs, ys)


def wave(amplitude: float = 30.0, wavelength: float = 80.0,
         length: float = 200.0, step: float = 5.0) -> list[Point]:
    """Sine wave travelling to the right."""
    xs = np.arange(0.0, length + step / 2, step)
    ys = amplitude * np.sin(2 * math.pi * xs / wavelength)
    return _to_points(xs, ys)


def scoop(depth: float = 40.0, rebound: float = 30.0, width: float = 40.0,
          downward: bool = False) -> list[Point]:
    """Dip away from the start, then come back by `rebound`.

    Upward by default: y falls to -depth and ends at -(depth - rebound).
    """
    end = depth - rebound
    ys = np.array([0.0, depth / 2, depth, (depth + end) / 2, end])
    if not downward:
        ys = -ys
    xs = np.linspace(0.0, width, len(ys))
    return _to_points(xs, ys)


def spiral(sweep_degrees: float = 350.0, step_degrees: float = 10.0,
           inner_radius: float = 1.0, outer_radius: float = 25.0) -> list[Point]:
    """Outward Archimedean spiral starting near the origin."""
    steps = int(round(sweep_degrees / step_degrees))
    k = np.arange(steps + 1)
    angles = np.radians(step_degrees * k)
    radii = inner_radius + (outer_radius - inner_radius) * k / steps
    return _to_points(radii * np.cos(angles), radii * np.sin(angles))


def triangle(size: float = 100.0) -> list[Point]:
    """Triangle traced once, continuing past the first vertex."""
    s = size / 100.0
    coords = [(0, 0), (50, 0), (100, 0), (50, 80), (0, 0), (50, 0)]
    return [Point(x * s, y * s) for x, y in coords]


def square(size: float = 100.0) -> list[Point]:
    """Square traced once and on to the next corner, so all corners turn."""
    h = size / 2.0
    coords = [
        (0, 0), (h, 0), (size, 0), (size, h), (size, size), (h, size),
        (0, size), (0, h), (0, 0), (h, 0), (size, 0), (size, h),
    ]
    return [Point(float(x), float(y)) for x, y in coords]


# Vertical swipes stay within the scoop depth, otherwise they read as scoops
SAMPLES: dict[str, Callable[[], list[Point]]] = {
    "swipe_right": lambda: line((0.0, 0.0), (100.0, 0.0)),
    "swipe_left": lambda: line((100.0, 0.0), (0.0, 0.0)),
    "swipe_up": lambda: line((0.0, 30.0), (0.0, 0.0)),
    "swipe_down": lambda: line((0.0, 0.0), (0.0, 30.0)),
    "circle_clockwise": lambda: arc(sweep_degrees=300.0),
    "circle_counter_clockwise": lambda: arc(sweep_degrees=-300.0),
    "zigzag": zigzag,
    "wave": wave,
    "scoop_up": scoop,
    "scoop_down": lambda: scoop(downward=True),
    "spiral": spiral,
    "triangle": triangle,
    "square": square,
}

# Config overrides a sample needs to reach its own detector. The circle check
# runs first and claims both of these under the default config; the spiral
# also takes steps shorter than the default movement threshold.
SAMPLE_CONFIG: dict[str, dict] = {
    "spiral": {"circle_segments_required": 100, "min_movement_threshold": 0.5},
    "square": {"circle_segments_required": 50},
}


def sample_label(name: str) -> str:
    """Gesture label a sample is expected to produce."""
    return name[len("swipe_"):] if name.startswith("swipe_") else name
