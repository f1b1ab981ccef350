"""Tests for the dispatch benchmark runner and result types."""
from __future__ import annotations

import io

import pytest

from reflectionlab.benchmark import (
    SEGMENT_LABELS,
    BenchmarkConfig,
    BenchmarkReport,
    BenchmarkRunner,
    SegmentKind,
    SegmentResult,
    Strategy,
    run_benchmarks,
)
from reflectionlab.benchmark import runner as runner_module
from reflectionlab.exceptions import MemberNotFoundError
from reflectionlab.model import TargetObject


def _parse_lines(text: str) -> list[tuple[str, str]]:
    pairs = []
    for line in text.splitlines():
        label, _, value = line.rpartition(": ")
        pairs.append((label, value))
    return pairs


class TestBenchmarkRunner:
    """Test each dispatch strategy."""

    @pytest.fixture
    def out(self) -> io.StringIO:
        return io.StringIO()

    @pytest.fixture
    def runner(self, small_config: BenchmarkConfig, out: io.StringIO) -> BenchmarkRunner:
        return BenchmarkRunner(small_config, out=out)

    def test_direct_use(self, runner: BenchmarkRunner, target: TargetObject, out: io.StringIO) -> None:
        """Direct loop reports two segments and leaves number at 1."""
        runner.direct_use(target, object())

        assert runner.report.labels == ["Direct method call", "Direct property read"]
        assert target.number == 1
        assert len(out.getvalue().splitlines()) == 2

    def test_reflection_use(self, runner: BenchmarkRunner, target: TargetObject) -> None:
        runner.reflection_use(target, object())

        assert runner.report.labels == ["Reflection method call", "Reflection property read"]
        assert target.number == 1

    def test_delegate_use(self, runner: BenchmarkRunner, target: TargetObject) -> None:
        runner.delegate_use(target, object())

        assert runner.report.labels == ["Delegate method call", "Delegate property read"]
        assert target.number == 1

    def test_generic_delegate_values(self, runner: BenchmarkRunner, out: io.StringIO) -> None:
        """Generic wrapper reads 999 and "test"."""
        runner.generic_delegate_use()

        assert runner.report.values == [999, "test"]
        lines = out.getvalue().splitlines()
        assert lines[0] == "Property value: 999"
        assert lines[1].startswith("Generic delegate property read (int): ")
        assert lines[2] == "Property value: test"
        assert lines[3].startswith("Generic delegate property read (str): ")

    def test_expression_use(self, runner: BenchmarkRunner, target: TargetObject) -> None:
        runner.expression_use(target, object())

        assert runner.report.labels == ["Expression method call", "Expression property read"]
        assert target.number == 1

    def test_warmup_calls(self, target: TargetObject, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = []
        monkeypatch.setattr(target, "call", lambda arg: calls.append(arg))

        BenchmarkRunner(BenchmarkConfig(times=1, warmup_calls=3)).warmup(target)

        assert calls == [None, None, None]

    def test_iterations_recorded(self, runner: BenchmarkRunner, target: TargetObject) -> None:
        runner.direct_use(target, object())

        assert all(s.iterations == 200 for s in runner.report.segments)


class TestRunAll:
    """Test the full sequence."""

    def test_fixed_order(self, small_config: BenchmarkConfig) -> None:
        out = io.StringIO()
        report = BenchmarkRunner(small_config, out=out).run_all()

        assert tuple(report.labels) == SEGMENT_LABELS

        printed = [label for label, _ in _parse_lines(out.getvalue())]
        assert printed == [
            "Direct method call",
            "Direct property read",
            "Reflection method call",
            "Reflection property read",
            "Delegate method call",
            "Delegate property read",
            "Property value",
            "Generic delegate property read (int)",
            "Property value",
            "Generic delegate property read (str)",
            "Expression method call",
            "Expression property read",
        ]

    def test_durations_non_negative(self, small_config: BenchmarkConfig) -> None:
        out = io.StringIO()
        report = BenchmarkRunner(small_config, out=out).run_all()

        for segment in report.segments:
            assert segment.elapsed_ns >= 0
            assert segment.elapsed_ms >= 0

        for label, value in _parse_lines(out.getvalue()):
            if label != "Property value":
                assert int(value) >= 0

    def test_deterministic_line_set(self, small_config: BenchmarkConfig) -> None:
        first, second = io.StringIO(), io.StringIO()
        BenchmarkRunner(small_config, out=first).run_all()
        BenchmarkRunner(small_config, out=second).run_all()

        assert [l for l, _ in _parse_lines(first.getvalue())] == [
            l for l, _ in _parse_lines(second.getvalue())
        ]

    def test_run_all_resets_report(self, small_config: BenchmarkConfig) -> None:
        runner = BenchmarkRunner(small_config, out=io.StringIO())
        runner.run_all()
        report = runner.run_all()

        assert len(report.segments) == len(SEGMENT_LABELS)

    def test_run_benchmarks_prints_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        report = run_benchmarks(times=50)

        captured = capsys.readouterr()
        assert "Direct method call: " in captured.out
        assert report.values == [999, "test"]

    def test_mistyped_member_aborts(self, small_config: BenchmarkConfig, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(runner_module, "METHOD_NAME", "cal")
        out = io.StringIO()

        with pytest.raises(MemberNotFoundError) as exc_info:
            BenchmarkRunner(small_config, out=out).run_all()

        assert exc_info.value.member == "cal"
        # Direct segments ran before the lookup failed
        assert out.getvalue().splitlines()[0].startswith("Direct method call: ")


class TestBenchmarkReport:
    """Test result aggregation."""

    @pytest.fixture
    def report(self) -> BenchmarkReport:
        return BenchmarkReport(
            times=10,
            segments=[
                SegmentResult("Direct method call", Strategy.DIRECT, SegmentKind.CALL, 10, 2_000_000),
                SegmentResult("Direct property read", Strategy.DIRECT, SegmentKind.READ, 10, 1_000_000),
                SegmentResult("Reflection method call", Strategy.REFLECTION, SegmentKind.CALL, 10, 6_500_000),
            ],
            values=[999],
        )

    def test_elapsed_ms_floors(self, report: BenchmarkReport) -> None:
        assert report.get("Reflection method call").elapsed_ms == 6

    def test_format_line(self, report: BenchmarkReport) -> None:
        assert report.get("Direct method call").format_line() == "Direct method call: 2"

    def test_per_call_ns(self, report: BenchmarkReport) -> None:
        assert report.get("Direct property read").per_call_ns == 100_000.0

    def test_overhead_vs_direct(self, report: BenchmarkReport) -> None:
        assert report.overhead_vs_direct("Reflection method call") == pytest.approx(3.25)
        assert report.overhead_vs_direct("Direct method call") == pytest.approx(1.0)

    def test_overhead_without_baseline(self) -> None:
        report = BenchmarkReport(
            times=1,
            segments=[SegmentResult("x", Strategy.EXPRESSION, SegmentKind.READ, 1, 5)],
        )

        assert report.overhead_vs_direct("x") == 0.0

    def test_get_unknown_label(self, report: BenchmarkReport) -> None:
        with pytest.raises(KeyError):
            report.get("nope")

    def test_to_dict(self, report: BenchmarkReport) -> None:
        data = report.to_dict()

        assert data["times"] == 10
        assert data["values"] == [999]
        assert len(data["segments"]) == 3
        assert data["segments"][0]["strategy"] == "direct"
        assert data["segments"][2]["kind"] == "call"
        assert data["segments"][2]["overhead_vs_direct"] == pytest.approx(3.25)
