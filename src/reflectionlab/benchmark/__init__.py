"""
reflectionlab Benchmark Module

Provides the stopwatch, result types and the dispatch benchmark runner.
"""
from reflectionlab.benchmark.harness import (
    DEFAULT_TIMES,
    BenchmarkConfig,
    BenchmarkReport,
    SegmentKind,
    SegmentResult,
    Strategy,
)
from reflectionlab.benchmark.runner import (
    SEGMENT_LABELS,
    BenchmarkRunner,
    run_benchmarks,
)
from reflectionlab.benchmark.stopwatch import Stopwatch

__all__ = [
    # Harness
    "DEFAULT_TIMES",
    "BenchmarkConfig",
    "BenchmarkReport",
    "SegmentKind",
    "SegmentResult",
    "Strategy",
    # Runner
    "SEGMENT_LABELS",
    "BenchmarkRunner",
    "run_benchmarks",
    # Timing
    "Stopwatch",
]
