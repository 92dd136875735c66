"""Tracker configuration.

One mutable TrackerConfig is shared by the engine and every classifier.
Nothing is snapshotted: a change takes effect on the next pointer sample.

YAML layout:
    tracking_enabled: true
    min_movement_threshold: 5.0
    circle_segments_required: 8
    max_trail_length: 100
    min_gesture_points: 5
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger("trail_engine.config")


@dataclass
class TrackerConfig:
    """Tunable thresholds for trail capture and recognition.

    Values are not range-checked. A non-positive movement threshold makes
    the trail accept every sample, and a max_trail_length of 0 keeps it
    empty.
    """
    tracking_enabled: bool = True
    min_movement_threshold: float = 5.0
    gesture_timeout: float = 2.0  # seconds; not consulted by any detector
    circle_segments_required: int = 8
    smoothing_factor: float = 0.3  # not consulted by any detector
    max_trail_length: int = 100
    min_gesture_points: int = 5

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TrackerConfig:
        known = {f.name for f in fields(cls)}
        unknown = sorted(k for k in data if k not in known)
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
        return cls(**{k: v for k, v in data.items() if k in known})

    @classmethod
    def from_yaml(cls, path: str | Path) -> TrackerConfig:
        """Load a config file. Missing keys keep their defaults."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls.from_dict(data)

    def to_yaml(self, path: str | Path):
        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def update(self, **kwargs) -> TrackerConfig:
        """Set known fields in place and return self."""
        for key, value in kwargs.items():
            if not hasattr(self, key):
                raise AttributeError(f"Unknown config field: {key}")
            setattr(self, key, value)
        return self
