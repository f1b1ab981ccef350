"""
Dispatch Benchmark Runner

Times five ways of invoking a method and reading a property on the same
object:

1. direct: plain attribute access
2. reflection: resolve by name once, invoke through the handle
3. delegate: bound callable built from the resolved member
4. generic delegate: ``GetterWrapper[T]`` around a bound getter
5. expression: ``ast`` expression tree compiled once

Member lookup and callable construction happen before the stopwatch
starts; only the loops are timed.
"""
from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

from reflectionlab.benchmark.harness import (
    BenchmarkConfig,
    BenchmarkReport,
    SegmentKind,
    SegmentResult,
    Strategy,
)
from reflectionlab.benchmark.stopwatch import Stopwatch
from reflectionlab.dispatch import (
    GetterWrapper,
    compile_call_expression,
    compile_property_expression,
    create_delegate,
    create_getter_delegate,
    resolve_method,
    resolve_property,
)
from reflectionlab.model import TargetObject

logger = logging.getLogger(__name__)

METHOD_NAME = "call"
NUMBER_PROPERTY = "number"
TEXT_PROPERTY = "text"

GENERIC_NUMBER = 999
GENERIC_TEXT = "test"

DIRECT_CALL = "Direct method call"
DIRECT_READ = "Direct property read"
REFLECTION_CALL = "Reflection method call"
REFLECTION_READ = "Reflection property read"
DELEGATE_CALL = "Delegate method call"
DELEGATE_READ = "Delegate property read"
GENERIC_READ_INT = "Generic delegate property read (int)"
GENERIC_READ_STR = "Generic delegate property read (str)"
EXPRESSION_CALL = "Expression method call"
EXPRESSION_READ = "Expression property read"
PROPERTY_VALUE = "Property value"

SEGMENT_LABELS = (
    DIRECT_CALL,
    DIRECT_READ,
    REFLECTION_CALL,
    REFLECTION_READ,
    DELEGATE_CALL,
    DELEGATE_READ,
    GENERIC_READ_INT,
    GENERIC_READ_STR,
    EXPRESSION_CALL,
    EXPRESSION_READ,
)


class BenchmarkRunner:
    """Runs the dispatch benchmarks and prints one line per segment.

    Every operation prints its results to ``out`` and records them in
    ``report``.

    Example:
        ```python
        runner = BenchmarkRunner(BenchmarkConfig(times=1000))
        report = runner.run_all()
        print(report.overhead_vs_direct("Reflection method call"))
        ```
    """

    def __init__(
        self,
        config: BenchmarkConfig | None = None,
        out: TextIO | None = None,
    ) -> None:
        """Initialize benchmark runner.

        Args:
            config: Benchmark configuration (uses defaults if None).
            out: Stream for result lines (stdout if None).
        """
        self.config = config if config is not None else BenchmarkConfig()
        self._out = out
        self.report = BenchmarkReport(times=self.config.times)

    def _print(self, line: str) -> None:
        print(line, file=self._out if self._out is not None else sys.stdout)

    def _record(
        self,
        label: str,
        strategy: Strategy,
        kind: SegmentKind,
        sw: Stopwatch,
    ) -> None:
        result = SegmentResult(
            label=label,
            strategy=strategy,
            kind=kind,
            iterations=self.config.times,
            elapsed_ns=sw.elapsed_ns,
        )
        self.report.segments.append(result)
        self._print(result.format_line())
        logger.debug("%s: %.1f ns/call", label, result.per_call_ns)

    def _record_value(self, value: Any) -> None:
        self.report.values.append(value)
        self._print(f"{PROPERTY_VALUE}: {value}")

    def warmup(self, o: TargetObject) -> None:
        """Make the untimed warm-up calls."""
        for _ in range(self.config.warmup_calls):
            o.call(None)

    def direct_use(self, o: TargetObject, parameter: Any) -> None:
        """Time direct method calls and property reads."""
        times = self.config.times

        sw = Stopwatch.start_new()
        for _ in range(times):
            o.call(parameter)
        sw.stop()
        self._record(DIRECT_CALL, Strategy.DIRECT, SegmentKind.CALL, sw)

        sw.restart()
        for _ in range(times):
            a = o.number
        sw.stop()
        self._record(DIRECT_READ, Strategy.DIRECT, SegmentKind.READ, sw)

    def reflection_use(self, o: TargetObject, parameter: Any) -> None:
        """Time calls and reads through handles resolved by name."""
        times = self.config.times
        parameters = (parameter,)
        method = resolve_method(type(o), METHOD_NAME)
        prop = resolve_property(type(o), NUMBER_PROPERTY)

        sw = Stopwatch.start_new()
        for _ in range(times):
            method.invoke(o, parameters)
        sw.stop()
        self._record(REFLECTION_CALL, Strategy.REFLECTION, SegmentKind.CALL, sw)

        sw.restart()
        for _ in range(times):
            a = prop.get_value(o)
        sw.stop()
        self._record(REFLECTION_READ, Strategy.REFLECTION, SegmentKind.READ, sw)

    def delegate_use(self, o: TargetObject, parameter: Any) -> None:
        """Time calls and reads through callables bound to o."""
        times = self.config.times
        call = create_delegate(o, resolve_method(type(o), METHOD_NAME))
        read = create_getter_delegate(o, resolve_property(type(o), NUMBER_PROPERTY))

        sw = Stopwatch.start_new()
        for _ in range(times):
            call(parameter)
        sw.stop()
        self._record(DELEGATE_CALL, Strategy.DELEGATE, SegmentKind.CALL, sw)

        sw.restart()
        for _ in range(times):
            a = read()
        sw.stop()
        self._record(DELEGATE_READ, Strategy.DELEGATE, SegmentKind.READ, sw)

    def generic_delegate_use(self) -> None:
        """Time reads through ``GetterWrapper`` for an int and a str property.

        Uses its own target so the values read are fixed: 999 and "test".
        """
        times = self.config.times
        o = TargetObject(GENERIC_NUMBER)

        number_getter = GetterWrapper[int](o, resolve_property(TargetObject, NUMBER_PROPERTY))
        a: Any = 0
        sw = Stopwatch.start_new()
        for _ in range(times):
            a = number_getter.get_value()
        sw.stop()
        self._record_value(a)
        self._record(GENERIC_READ_INT, Strategy.GENERIC_DELEGATE, SegmentKind.READ, sw)

        o.text = GENERIC_TEXT
        text_getter = GetterWrapper[str](o, resolve_property(TargetObject, TEXT_PROPERTY))
        b = ""
        sw.restart()
        for _ in range(times):
            b = text_getter.get_value()
        sw.stop()
        self._record_value(b)
        self._record(GENERIC_READ_STR, Strategy.GENERIC_DELEGATE, SegmentKind.READ, sw)

    def expression_use(self, o: TargetObject, parameter: Any) -> None:
        """Time compiled call and property-read expressions."""
        times = self.config.times
        call = compile_call_expression(type(o), METHOD_NAME)
        read = compile_property_expression(type(o), NUMBER_PROPERTY)

        sw = Stopwatch.start_new()
        for _ in range(times):
            call(o, parameter)
        sw.stop()
        self._record(EXPRESSION_CALL, Strategy.EXPRESSION, SegmentKind.CALL, sw)

        sw.restart()
        for _ in range(times):
            a = read(o)
        sw.stop()
        self._record(EXPRESSION_READ, Strategy.EXPRESSION, SegmentKind.READ, sw)

    def run_all(self) -> BenchmarkReport:
        """Run every strategy in fixed order.

        Returns:
            BenchmarkReport with all segments.

        Raises:
            MemberNotFoundError: If a member name fails to resolve.
        """
        self.report = BenchmarkReport(times=self.config.times)
        o = TargetObject(1)
        self.warmup(o)

        logger.info("Running dispatch benchmarks with %d iterations", self.config.times)
        self.direct_use(o, object())
        self.reflection_use(o, object())
        self.delegate_use(o, object())
        self.generic_delegate_use()
        self.expression_use(o, object())
        return self.report


def run_benchmarks(
    times: int = BenchmarkConfig.times,
    warmup_calls: int = BenchmarkConfig.warmup_calls,
    out: TextIO | None = None,
) -> BenchmarkReport:
    """Convenience function for running all benchmarks.

    Args:
        times: Iterations per segment.
        warmup_calls: Untimed warm-up calls.
        out: Stream for result lines.

    Returns:
        BenchmarkReport with all segments.
    """
    config = BenchmarkConfig(times=times, warmup_calls=warmup_calls)
    return BenchmarkRunner(config, out=out).run_all()
