"""Motion and gesture labels shared by every classifier."""

from __future__ import annotations

from enum import Enum


class MotionType(Enum):
    """Closed set of motion/gesture kinds.

    The enum value is the public display label carried by emitted events.
    """
    NONE = "none"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    DIAGONAL_UP_LEFT = "diagonal_up_left"
    DIAGONAL_UP_RIGHT = "diagonal_up_right"
    DIAGONAL_DOWN_LEFT = "diagonal_down_left"
    DIAGONAL_DOWN_RIGHT = "diagonal_down_right"
    CIRCLE_CLOCKWISE = "circle_clockwise"
    CIRCLE_COUNTER_CLOCKWISE = "circle_counter_clockwise"
    ZIGZAG = "zigzag"
    WAVE = "wave"
    SPIRAL = "spiral"
    SCOOP_UP = "scoop_up"
    SCOOP_DOWN = "scoop_down"
    TRIANGLE = "triangle"
    SQUARE = "square"

    @property
    def label(self) -> str:
        return self.value

    @property
    def is_direction(self) -> bool:
        """True for the eight straight-line directions."""
        return self in DIRECTIONS

    @classmethod
    def from_label(cls, label: str) -> MotionType:
        return cls(label.strip().lower())


DIRECTIONS = frozenset({
    MotionType.UP,
    MotionType.DOWN,
    MotionType.LEFT,
    MotionType.RIGHT,
    MotionType.DIAGONAL_UP_LEFT,
    MotionType.DIAGONAL_UP_RIGHT,
    MotionType.DIAGONAL_DOWN_LEFT,
    MotionType.DIAGONAL_DOWN_RIGHT,
})
