"""Pointer-event facade: trail capture → motion events → gesture on release."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from trail_engine.classifier import MotionClassifier
from trail_engine.confidence import ConfidenceScorer
from trail_engine.config import TrackerConfig
from trail_engine.geometry import Point, PointLike, as_point
from trail_engine.motion import MotionType
from trail_engine.plugins import PluginEvent, PluginManager
from trail_engine.recognizer import GestureRecognizer
from trail_engine.trail import TrailBuffer

logger = logging.getLogger("trail_engine.engine")

PRIMARY_BUTTON = 1


@dataclass
class MotionEvent:
    """Smoothed direction of the latest movement while a trail is drawn."""
    motion_type: MotionType
    velocity: Point  # averaged over the last few steps
    position: Point
    trail_length: int
    timestamp: float

    @property
    def label(self) -> str:
        return self.motion_type.label

    def to_dict(self) -> dict:
        return {
            "velocity": self.velocity.to_tuple(),
            "position": self.position.to_tuple(),
            "trail_length": self.trail_length,
        }


@dataclass
class GestureResult:
    """Classification of a completed trail."""
    gesture_type: MotionType
    confidence: float  # 0 to 1
    trail_length: int
    duration: float  # seconds from press to release
    timestamp: float

    @property
    def label(self) -> str:
        return self.gesture_type.label

    def to_dict(self) -> dict:
        return {
            "gesture": self.label,
            "confidence": self.confidence,
            "trail_length": self.trail_length,
            "duration": self.duration,
        }


@dataclass
class EngineStats:
    """Counters since construction or the last reset()."""
    sessions: int
    motion_events: int
    gestures: int
    gesture_counts: dict


class TrailEngine:
    """Drives trail capture and recognition from raw pointer events.

    One engine serves one pointer stream. Hosts construct it and pass it
    to whatever needs it; there is no shared global instance.

    States are Idle and Tracking. A primary-button press starts a
    session, moves append to the trail and emit motion events, and the
    release classifies the trail and emits one gesture result. All
    callbacks run synchronously before the triggering call returns.

    Usage:
        engine = TrailEngine()
        engine.on_gesture(lambda g: print(g.label, g.confidence))
        engine.handle_pointer_button(PRIMARY_BUTTON, True, (0, 0))
        for pos in path:
            engine.handle_pointer_move(pos)
        engine.handle_pointer_button(PRIMARY_BUTTON, False)
    """

    def __init__(
        self,
        config: Optional[TrackerConfig] = None,
        classifier: Optional[MotionClassifier] = None,
        recognizer: Optional[GestureRecognizer] = None,
        scorer: Optional[ConfidenceScorer] = None,
        plugins: Optional[PluginManager] = None,
    ):
        self.config = config or TrackerConfig()
        self.classifier = classifier or MotionClassifier(self.config)
        self.recognizer = recognizer or GestureRecognizer(self.config, self.classifier)
        self.scorer = scorer or ConfidenceScorer()
        self.plugins = plugins

        self._trail = TrailBuffer(self.config)
        self._pointer_position: Optional[Point] = None
        self._motion_callbacks: list[Callable[[MotionEvent], None]] = []
        self._gesture_callbacks: list[Callable[[GestureResult], None]] = []

        self._sessions = 0
        self._motion_events = 0
        self._gesture_counts: dict[str, int] = {}

    # -- subscriptions -----------------------------------------------------

    def on_motion(self, callback: Callable[[MotionEvent], None]):
        """Register a callback for motion events."""
        self._motion_callbacks.append(callback)

    def on_gesture(self, callback: Callable[[GestureResult], None]):
        """Register a callback for completed gestures."""
        self._gesture_callbacks.append(callback)

    # -- public operations -------------------------------------------------

    def start_tracking(self, position: Optional[PointLike] = None):
        """Begin a session at `position`, or the last known pointer position."""
        if position is not None:
            self._pointer_position = as_point(position)
        self._trail.begin(self._pointer_position)
        self._sessions += 1
        logger.debug("Tracking started at %s", self._pointer_position)

    def stop_tracking(self) -> Optional[GestureResult]:
        """End the session; classify the trail if it is long enough.

        Returns the emitted GestureResult, or None when not tracking or
        when too few samples were accepted.
        """
        if not self._trail.is_tracking:
            return None

        points = self._trail.snapshot()
        velocities = self._trail.velocities()
        result = None

        if len(points) >= self.config.min_gesture_points:
            gesture = self.recognizer.recognize(points, velocities)
            confidence = self.scorer.score(gesture, len(points), velocities)
            now = time.monotonic()
            start = self._trail.start_time
            result = GestureResult(
                gesture_type=gesture,
                confidence=confidence,
                trail_length=len(points),
                duration=now - start if start is not None else 0.0,
                timestamp=now,
            )
            logger.debug(
                "Gesture %s (confidence=%.2f, points=%d)",
                gesture.label, confidence, len(points),
            )
            self._emit_gesture(result)
        else:
            logger.debug(
                "Trail too short for a gesture (%d < %d points)",
                len(points), self.config.min_gesture_points,
            )

        self._trail.end()
        return result

    def get_current_trail(self) -> list[Point]:
        """Copy of the accepted trail, oldest first."""
        return self._trail.snapshot()

    def get_velocity_history(self) -> list[Point]:
        return self._trail.velocities()

    def clear_trail(self):
        """Empty the trail and velocity history without ending the session."""
        self._trail.clear()

    def set_sensitivity(self, threshold: float):
        """Set the minimum movement between accepted samples."""
        self.config.min_movement_threshold = float(threshold)

    def is_currently_tracking(self) -> bool:
        return self._trail.is_tracking

    # -- pointer events ----------------------------------------------------

    def handle_pointer_move(self, position: PointLike) -> Optional[MotionEvent]:
        """Feed a pointer position. Returns the emitted motion event, if any."""
        if not self.config.tracking_enabled:
            return None

        point = as_point(position)
        self._pointer_position = point
        if not self._trail.is_tracking:
            return None
        if not self._trail.accept(point):
            return None

        recent = self.classifier.classify_recent(self._trail.velocities())
        if recent is None:
            return None

        motion_type, velocity = recent
        event = MotionEvent(
            motion_type=motion_type,
            velocity=velocity,
            position=point,
            trail_length=len(self._trail),
            timestamp=time.monotonic(),
        )
        self._emit_motion(event)
        return event

    def handle_pointer_button(
        self,
        button: int,
        pressed: bool,
        position: Optional[PointLike] = None,
    ) -> Optional[GestureResult]:
        """Primary press starts a session; release ends it.

        Returns the gesture emitted on release, if any.
        """
        if not self.config.tracking_enabled:
            return None
        if position is not None:
            self._pointer_position = as_point(position)
        if button != PRIMARY_BUTTON:
            return None

        if pressed:
            if not self._trail.is_tracking:
                self.start_tracking()
            return None
        return self.stop_tracking()

    # -- emission ----------------------------------------------------------

    def _emit_motion(self, event: MotionEvent):
        self._motion_events += 1
        for cb in self._motion_callbacks:
            cb(event)
        if self.plugins:
            self.plugins.dispatch("motion", PluginEvent(
                type="motion",
                name=event.label,
                data=event.to_dict(),
                timestamp=event.timestamp,
            ))

    def _emit_gesture(self, result: GestureResult):
        self._gesture_counts[result.label] = self._gesture_counts.get(result.label, 0) + 1
        for cb in self._gesture_callbacks:
            cb(result)
        if self.plugins:
            self.plugins.dispatch("gesture", PluginEvent(
                type="gesture",
                name=result.label,
                data={"confidence": result.confidence, "trail_length": result.trail_length},
                timestamp=result.timestamp,
            ))

    # -- housekeeping ------------------------------------------------------

    @property
    def stats(self) -> EngineStats:
        return EngineStats(
            sessions=self._sessions,
            motion_events=self._motion_events,
            gestures=sum(self._gesture_counts.values()),
            gesture_counts=dict(self._gesture_counts),
        )

    def reset(self):
        """Drop any session in progress without emitting, and zero counters."""
        self._trail.end()
        self._sessions = 0
        self._motion_events = 0
        self._gesture_counts.clear()
