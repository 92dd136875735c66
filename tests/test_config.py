"""Tests for tracker configuration."""

import logging

import pytest
import yaml

from trail_engine.config import TrackerConfig


class TestDefaults:
    def test_values(self):
        config = TrackerConfig()
        assert config.tracking_enabled is True
        assert config.min_movement_threshold == 5.0
        assert config.gesture_timeout == 2.0
        assert config.circle_segments_required == 8
        assert config.smoothing_factor == 0.3
        assert config.max_trail_length == 100
        assert config.min_gesture_points == 5

    def test_instances_are_independent(self):
        a, b = TrackerConfig(), TrackerConfig()
        a.min_movement_threshold = 12.0
        assert b.min_movement_threshold == 5.0


class TestYaml:
    def test_roundtrip(self, tmp_path):
        path = tmp_path / "tracker.yaml"
        original = TrackerConfig(min_movement_threshold=8.0, max_trail_length=40)
        original.to_yaml(path)
        assert TrackerConfig.from_yaml(path) == original

    def test_partial_file_keeps_defaults(self, tmp_path):
        path = tmp_path / "tracker.yaml"
        path.write_text("circle_segments_required: 12\n")
        config = TrackerConfig.from_yaml(path)
        assert config.circle_segments_required == 12
        assert config.min_movement_threshold == 5.0

    def test_empty_file(self, tmp_path):
        path = tmp_path / "tracker.yaml"
        path.write_text("")
        assert TrackerConfig.from_yaml(path) == TrackerConfig()

    def test_written_file_is_plain_mapping(self, tmp_path):
        path = tmp_path / "tracker.yaml"
        TrackerConfig().to_yaml(path)
        data = yaml.safe_load(path.read_text())
        assert data["max_trail_length"] == 100
        assert set(data) == set(TrackerConfig().to_dict())

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            TrackerConfig.from_yaml(tmp_path / "nope.yaml")


class TestFromDict:
    def test_unknown_keys_ignored_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="trail_engine.config"):
            config = TrackerConfig.from_dict({"max_trail_length": 10, "colour": "red"})
        assert config.max_trail_length == 10
        assert "colour" in caplog.text


class TestUpdate:
    def test_sets_fields(self):
        config = TrackerConfig()
        assert config.update(min_gesture_points=8, tracking_enabled=False) is config
        assert config.min_gesture_points == 8
        assert config.tracking_enabled is False

    def test_unknown_field(self):
        with pytest.raises(AttributeError):
            TrackerConfig().update(sensitivity=3)
