"""Example TrailEngine plugin: gesture logger.

Logs each completed gesture with its confidence and keeps running counts
per label. Motion samples are only counted. Load it with:

    manager = PluginManager()
    manager.load_directory("plugins/")
"""

from __future__ import annotations

import logging
from collections import Counter

from trail_engine.plugins import PluginEvent, TrailPlugin

logger = logging.getLogger("trail_engine.plugins.example_logger")


class GestureLoggerPlugin(TrailPlugin):
    """Logs gestures and tallies motion/gesture labels."""

    name = "gesture_logger"
    version = "1.0.0"
    description = "Logs completed gestures and counts every event label"

    def __init__(self):
        super().__init__()
        self._gestures: Counter = Counter()
        self._motions: Counter = Counter()

        @self.handler("circle_clockwise")
        def on_clockwise(event: PluginEvent):
            logger.info("Clockwise circle (total: %d)", self._gestures["circle_clockwise"])

        @self.handler("circle_counter_clockwise")
        def on_counter_clockwise(event: PluginEvent):
            logger.info("Counter-clockwise circle (total: %d)",
                        self._gestures["circle_counter_clockwise"])

    def on_startup(self, context: dict):
        self._gestures.clear()
        self._motions.clear()
        logger.info("GestureLogger: started with %s", ", ".join(sorted(context)) or "no context")

    def on_shutdown(self):
        if self._gestures:
            logger.info("GestureLogger summary: %s", dict(self._gestures))

    def on_motion(self, event: PluginEvent):
        self._motions[event.name] += 1

    def on_gesture(self, event: PluginEvent):
        self._gestures[event.name] += 1
        logger.info(
            "Gesture %s (confidence=%.2f, points=%d)",
            event.name, event.data.get("confidence", 0.0), event.data.get("trail_length", 0),
        )
        super().on_gesture(event)

    @property
    def counts(self) -> dict[str, int]:
        return dict(self._gestures)

    @property
    def motion_counts(self) -> dict[str, int]:
        return dict(self._motions)
