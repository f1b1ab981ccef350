"""
Benchmark Harness

Configuration and result types shared by the benchmark runner.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

DEFAULT_TIMES = 1_000_000


class Strategy(str, Enum):
    """Dispatch strategy a segment measures."""

    DIRECT = "direct"
    REFLECTION = "reflection"
    DELEGATE = "delegate"
    GENERIC_DELEGATE = "generic_delegate"
    EXPRESSION = "expression"


class SegmentKind(str, Enum):
    """Whether a segment invokes a method or reads a property."""

    CALL = "call"
    READ = "read"


@dataclass
class BenchmarkConfig:
    """Configuration for benchmark runs.

    Attributes:
        times: Iterations per timed segment.
        warmup_calls: Untimed calls made before the first segment.
    """

    times: int = DEFAULT_TIMES
    warmup_calls: int = 1


@dataclass(slots=True)
class SegmentResult:
    """Result of one timed segment.

    Attributes:
        label: Label printed in front of the elapsed time.
        strategy: Dispatch strategy measured.
        kind: Method call or property read.
        iterations: Number of iterations run.
        elapsed_ns: Elapsed time in nanoseconds.
    """

    label: str
    strategy: Strategy
    kind: SegmentKind
    iterations: int
    elapsed_ns: int

    @property
    def elapsed_ms(self) -> int:
        """Elapsed whole milliseconds."""
        return max(self.elapsed_ns, 0) // 1_000_000

    @property
    def per_call_ns(self) -> float:
        """Mean nanoseconds per iteration."""
        if self.iterations <= 0:
            return 0.0
        return self.elapsed_ns / self.iterations

    def format_line(self) -> str:
        return f"{self.label}: {self.elapsed_ms}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "strategy": self.strategy.value,
            "kind": self.kind.value,
            "iterations": self.iterations,
            "elapsed_ns": self.elapsed_ns,
            "elapsed_ms": self.elapsed_ms,
            "per_call_ns": self.per_call_ns,
        }


@dataclass
class BenchmarkReport:
    """All segments of a run, in execution order.

    Attributes:
        times: Iterations per segment.
        segments: Timed segments.
        values: Integrity-check values read by the generic delegate segments.
    """

    times: int
    segments: list[SegmentResult] = field(default_factory=list)
    values: list[Any] = field(default_factory=list)

    @property
    def labels(self) -> list[str]:
        return [s.label for s in self.segments]

    def get(self, label: str) -> SegmentResult:
        """Return the segment with the given label.

        Raises:
            KeyError: If no segment has that label.
        """
        for segment in self.segments:
            if segment.label == label:
                return segment
        raise KeyError(label)

    def baseline_ns(self, kind: SegmentKind) -> int:
        """Elapsed time of the direct segment of the given kind, or 0."""
        for segment in self.segments:
            if segment.strategy is Strategy.DIRECT and segment.kind is kind:
                return segment.elapsed_ns
        return 0

    def overhead_vs_direct(self, label: str) -> float:
        """Overhead factor of a segment compared to the direct baseline."""
        segment = self.get(label)
        baseline = self.baseline_ns(segment.kind)
        if baseline <= 0:
            return 0.0
        return segment.elapsed_ns / baseline

    def to_dict(self) -> dict[str, Any]:
        segments = []
        for segment in self.segments:
            entry = segment.to_dict()
            entry["overhead_vs_direct"] = self.overhead_vs_direct(segment.label)
            segments.append(entry)
        return {
            "times": self.times,
            "segments": segments,
            "values": list(self.values),
        }
