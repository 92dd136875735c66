#!/usr/bin/env python3
"""TrailEngine benchmark: per-event latency and whole-trail recognition time.

Drives the engine with synthetic pointer paths from trail_engine.shapes
plus a random walk. No input device required.

Usage:
    python examples/benchmark.py
    python examples/benchmark.py --iterations 5000 --trail-length 200
"""

from __future__ import annotations

import argparse
import gc
import os
import sys
import time
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from trail_engine.config import TrackerConfig
from trail_engine.engine import PRIMARY_BUTTON, TrailEngine
from trail_engine.geometry import Point
from trail_engine.recognizer import GestureRecognizer
from trail_engine.shapes import SAMPLES


def get_memory_mb() -> float:
    """Peak process RSS in MB, 0 where unavailable."""
    try:
        import resource
        return resource.getrusage(resource.RUSAGE_SELF).ru_maxrss / 1024
    except ImportError:
        return 0.0


def random_walk(n: int, step: float = 12.0, seed: int = 0) -> list[Point]:
    rng = np.random.default_rng(seed)
    steps = rng.normal(0.0, step, size=(n, 2))
    coords = np.cumsum(steps, axis=0)
    return [Point(float(x), float(y)) for x, y in coords]


def summarize(times: list[float]) -> dict:
    times_ms = np.array(times) * 1000
    return {
        "mean_ms": float(np.mean(times_ms)),
        "median_ms": float(np.median(times_ms)),
        "p95_ms": float(np.percentile(times_ms, 95)),
        "p99_ms": float(np.percentile(times_ms, 99)),
        "max_ms": float(np.max(times_ms)),
        "throughput": 1000.0 / float(np.mean(times_ms)),
    }


def benchmark_moves(engine: TrailEngine, path: list[Point]) -> dict:
    """Time handle_pointer_move over one long press."""
    engine.handle_pointer_button(PRIMARY_BUTTON, True, path[0])
    for p in path[:50]:
        engine.handle_pointer_move(p)
    engine.clear_trail()

    gc.collect()
    times = []
    for p in path:
        t0 = time.perf_counter()
        engine.handle_pointer_move(p)
        times.append(time.perf_counter() - t0)
    engine.handle_pointer_button(PRIMARY_BUTTON, False)
    return summarize(times)


def benchmark_recognition(recognizer: GestureRecognizer, n: int) -> dict:
    """Time recognize() over every synthetic sample, round-robin."""
    samples = []
    for make in SAMPLES.values():
        points = make()
        velocities = [points[i] - points[i - 1] for i in range(1, len(points))]
        samples.append((points, velocities))

    gc.collect()
    times = []
    for i in range(n):
        points, velocities = samples[i % len(samples)]
        t0 = time.perf_counter()
        recognizer.recognize(points, velocities)
        times.append(time.perf_counter() - t0)
    return summarize(times)


def benchmark_release(config: TrackerConfig, path: list[Point], rounds: int) -> dict:
    """Time the release that classifies a full-length trail."""
    engine = TrailEngine(config=config)
    times = []
    for _ in range(rounds):
        engine.handle_pointer_button(PRIMARY_BUTTON, True, path[0])
        for p in path:
            engine.handle_pointer_move(p)
        t0 = time.perf_counter()
        engine.handle_pointer_button(PRIMARY_BUTTON, False)
        times.append(time.perf_counter() - t0)
    return summarize(times)


def print_table(title: str, rows: list[tuple[str, str]]):
    max_key = max(len(r[0]) for r in rows)
    max_val = max(len(r[1]) for r in rows)
    width = max_key + max_val + 7

    print()
    print(f"  ╭{'─' * width}╮")
    print(f"  │ {title:<{width-2}} │")
    print(f"  ├{'─' * width}┤")
    for key, val in rows:
        print(f"  │ {key:<{max_key}}   {val:>{max_val}} │")
    print(f"  ╰{'─' * width}╯")


def latency_rows(results: dict, unit: str) -> list[tuple[str, str]]:
    return [
        ("Mean latency", f"{results['mean_ms']:.4f} ms"),
        ("Median latency", f"{results['median_ms']:.4f} ms"),
        ("P95 latency", f"{results['p95_ms']:.4f} ms"),
        ("P99 latency", f"{results['p99_ms']:.4f} ms"),
        ("Max latency", f"{results['max_ms']:.4f} ms"),
        ("Throughput", f"{results['throughput']:.0f} {unit}/sec"),
    ]


def main():
    parser = argparse.ArgumentParser(description="TrailEngine Benchmark")
    parser.add_argument("-n", "--iterations", type=int, default=2000, help="Number of iterations")
    parser.add_argument("--trail-length", type=int, default=100, help="max_trail_length to test with")
    args = parser.parse_args()

    n = args.iterations
    config = TrackerConfig(max_trail_length=args.trail_length)

    print()
    print("  TrailEngine Benchmark Suite")
    print()

    mem_before = get_memory_mb()
    print(f"  Generating a {n}-step random walk...")
    path = random_walk(n)
    mem_after = get_memory_mb()

    print("  Running pointer-move benchmark...")
    move_results = benchmark_moves(TrailEngine(config=config), path)

    print("  Running recognition benchmark...")
    recog_results = benchmark_recognition(GestureRecognizer(config), n)

    print("  Running release benchmark...")
    release_results = benchmark_release(config, path[: args.trail_length * 2], max(1, n // 100))

    print_table("handle_pointer_move", latency_rows(move_results, "events"))
    print_table("GestureRecognizer.recognize", latency_rows(recog_results, "trails"))
    print_table("Release (recognize + score + emit)", latency_rows(release_results, "releases"))

    print_table("System", [
        ("Iterations", f"{n:,}"),
        ("Max trail length", f"{config.max_trail_length}"),
        ("Synthetic samples", f"{len(SAMPLES)}"),
        ("Memory (data)", f"{mem_after - mem_before:.1f} MB"),
        ("Memory (total RSS)", f"{get_memory_mb():.1f} MB"),
        ("Platform", f"{sys.platform} / {os.uname().machine}"),
        ("Python", f"{sys.version.split()[0]}"),
        ("NumPy", f"{np.__version__}"),
    ])

    # 125 Hz is a common pointer report rate
    budget_ms = 1000.0 / 125.0
    print()
    print(f"  Move handling uses {move_results['p99_ms'] / budget_ms:.2%} of an 8 ms report interval (p99)")
    print()


if __name__ == "__main__":
    main()
