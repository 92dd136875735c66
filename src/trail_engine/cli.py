"""TrailEngine CLI.

Usage:
    trail-engine classify PATH   - Replay a recorded point list through one session
    trail-engine demo [SHAPE]    - Classify built-in synthetic trails
    trail-engine labels          - List motion and gesture labels
    trail-engine benchmark       - Time gesture recognition
"""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Optional

import typer
import yaml

from trail_engine.config import TrackerConfig
from trail_engine.engine import PRIMARY_BUTTON, GestureResult, MotionEvent, TrailEngine
from trail_engine.geometry import Point, as_points
from trail_engine.motion import MotionType

app = typer.Typer(
    name="trail-engine",
    help="Classify pointer trails into motions and gestures.",
    add_completion=False,
)


def _load_config(path: Optional[str]) -> TrackerConfig:
    if not path:
        return TrackerConfig()
    try:
        return TrackerConfig.from_yaml(path)
    except (OSError, yaml.YAMLError) as e:
        typer.echo(f"Could not load config {path}: {e}", err=True)
        raise typer.Exit(1)


def _load_points(path: Path) -> list[Point]:
    """Read `[[x, y], ...]` or `{"points": [[x, y], ...]}` from JSON or YAML."""
    with open(path) as f:
        if path.suffix.lower() == ".json":
            data = json.load(f)
        else:
            data = yaml.safe_load(f)

    if isinstance(data, dict):
        data = data.get("points", [])
    if not isinstance(data, list):
        raise ValueError("expected a list of [x, y] points")
    return as_points(data)


def _run_session(
    engine: TrailEngine, points: list[Point], show_motions: bool
) -> Optional[GestureResult]:
    """Press at the first point, move through all of them, release."""
    if show_motions:
        def print_motion(event: MotionEvent):
            typer.echo(
                f"   motion {event.label:20s} at ({event.position.x:.1f}, {event.position.y:.1f})"
                f"  trail={event.trail_length}"
            )
        engine.on_motion(print_motion)

    if not points:
        return None
    engine.handle_pointer_button(PRIMARY_BUTTON, True, points[0])
    for p in points:
        engine.handle_pointer_move(p)
    return engine.handle_pointer_button(PRIMARY_BUTTON, False)


def _describe(result: Optional[GestureResult]) -> str:
    if result is None:
        return "no gesture (trail too short)"
    return f"{result.label} (confidence {result.confidence:.2f}, {result.trail_length} points)"


@app.callback()
def main_options(
    log_level: str = typer.Option("warning", help="Log level"),
):
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


@app.command()
def classify(
    path: str = typer.Argument(..., help="JSON or YAML file with a list of [x, y] points"),
    config: Optional[str] = typer.Option(None, "--config", help="Path to tracker config YAML"),
    motions: bool = typer.Option(False, "--motions/--no-motions", help="Print motion events"),
):
    """Replay a point list as one press-drag-release session."""
    file_path = Path(path)
    if not file_path.exists():
        typer.echo(f"Trail file not found: {path}", err=True)
        raise typer.Exit(1)

    try:
        points = _load_points(file_path)
    except (ValueError, TypeError, IndexError, json.JSONDecodeError, yaml.YAMLError) as e:
        typer.echo(f"Could not read points from {path}: {e}", err=True)
        raise typer.Exit(1)

    engine = TrailEngine(config=_load_config(config))
    typer.echo(f"Replaying {len(points)} points from {file_path.name}")
    result = _run_session(engine, points, motions)
    typer.echo(f"Gesture: {_describe(result)}")


@app.command()
def demo(
    shape: Optional[str] = typer.Argument(None, help="Sample name (default: all)"),
    config: Optional[str] = typer.Option(None, "--config", help="Path to tracker config YAML"),
    motions: bool = typer.Option(False, "--motions/--no-motions", help="Print motion events"),
):
    """Classify built-in synthetic trails through a fresh engine each.

    Samples listed in SAMPLE_CONFIG get their overrides on top of --config.
    """
    from trail_engine.shapes import SAMPLE_CONFIG, SAMPLES

    if shape is not None and shape not in SAMPLES:
        typer.echo(f"Unknown sample '{shape}'. Choose from: {', '.join(SAMPLES)}", err=True)
        raise typer.Exit(1)

    names = [shape] if shape else list(SAMPLES)
    tracker_config = _load_config(config)
    for name in names:
        overrides = SAMPLE_CONFIG.get(name, {})
        engine = TrailEngine(config=TrackerConfig.from_dict({**tracker_config.to_dict(), **overrides}))
        if motions:
            typer.echo(f"{name}:")
        result = _run_session(engine, SAMPLES[name](), motions)
        typer.echo(f"{name:26s} → {_describe(result)}")


@app.command()
def labels():
    """List every motion/gesture label."""
    for motion in MotionType:
        kind = "direction" if motion.is_direction else "gesture"
        if motion == MotionType.NONE:
            kind = "none"
        typer.echo(f"{motion.label:26s} {kind}")


@app.command()
def benchmark(
    iterations: int = typer.Option(1000, min=1, help="Recognitions per sample"),
):
    """Time whole-trail recognition on each synthetic sample."""
    from trail_engine.recognizer import GestureRecognizer
    from trail_engine.trail import VELOCITY_HISTORY_SIZE
    from trail_engine.shapes import SAMPLES

    recognizer = GestureRecognizer()
    typer.echo(f"Running benchmark: {iterations} iterations per sample")

    for name, make in SAMPLES.items():
        points = make()
        velocities = [points[i] - points[i - 1] for i in range(1, len(points))][-VELOCITY_HISTORY_SIZE:]
        times = []
        for _ in range(iterations):
            t0 = time.perf_counter()
            recognizer.recognize(points, velocities)
            times.append(time.perf_counter() - t0)

        avg_ms = sum(times) / len(times) * 1000
        p95_ms = sorted(times)[int(len(times) * 0.95)] * 1000
        typer.echo(f"   {name:26s} avg={avg_ms:.3f}ms  p95={p95_ms:.3f}ms  points={len(points)}")


def main():
    app()


if __name__ == "__main__":
    main()
