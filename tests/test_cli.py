"""Tests for the trail-engine CLI."""

import json

import pytest
import yaml
from typer.testing import CliRunner

from trail_engine.cli import app
from trail_engine.motion import MotionType
from trail_engine.shapes import SAMPLES, sample_label

runner = CliRunner()

SCOOP = [[0, 0], [10, -20], [20, -40], [30, -25], [40, -10]]


class TestLabels:
    def test_lists_every_label(self):
        result = runner.invoke(app, ["labels"])
        assert result.exit_code == 0
        for motion in MotionType:
            assert motion.label in result.output


class TestClassify:
    def test_json_list(self, tmp_path):
        path = tmp_path / "trail.json"
        path.write_text(json.dumps(SCOOP))
        result = runner.invoke(app, ["classify", str(path)])
        assert result.exit_code == 0
        assert "scoop_up" in result.output

    def test_yaml_mapping(self, tmp_path):
        path = tmp_path / "trail.yaml"
        path.write_text(yaml.safe_dump({"points": [[0, 0], [25, 0], [50, 0], [75, 0], [100, 0]]}))
        result = runner.invoke(app, ["classify", str(path), "--motions"])
        assert result.exit_code == 0
        assert "motion right" in result.output
        assert "Gesture: right" in result.output

    def test_short_trail(self, tmp_path):
        path = tmp_path / "trail.json"
        path.write_text(json.dumps([[0, 0], [50, 0]]))
        result = runner.invoke(app, ["classify", str(path)])
        assert result.exit_code == 0
        assert "no gesture" in result.output

    def test_config_file(self, tmp_path):
        config_path = tmp_path / "tracker.yaml"
        config_path.write_text("min_gesture_points: 10\n")
        path = tmp_path / "trail.json"
        path.write_text(json.dumps(SCOOP))
        result = runner.invoke(app, ["classify", str(path), "--config", str(config_path)])
        assert result.exit_code == 0
        assert "no gesture" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["classify", str(tmp_path / "missing.json")])
        assert result.exit_code == 1

    def test_malformed_points(self, tmp_path):
        path = tmp_path / "trail.json"
        path.write_text(json.dumps({"points": "not a list"}))
        result = runner.invoke(app, ["classify", str(path)])
        assert result.exit_code == 1


class TestDemo:
    @pytest.mark.parametrize("name", list(SAMPLES))
    def test_single_sample(self, name):
        result = runner.invoke(app, ["demo", name])
        assert result.exit_code == 0
        assert f"→ {sample_label(name)} (" in result.output

    def test_all_samples(self):
        result = runner.invoke(app, ["demo"])
        assert result.exit_code == 0
        assert "swipe_left" in result.output

    def test_unknown_sample(self):
        result = runner.invoke(app, ["demo", "hexagon"])
        assert result.exit_code == 1


class TestBenchmark:
    def test_runs(self):
        result = runner.invoke(app, ["benchmark", "--iterations", "3"])
        assert result.exit_code == 0
        assert "avg=" in result.output
