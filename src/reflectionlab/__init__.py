"""
reflectionlab - Dispatch Overhead Micro-Benchmarks

Measures the cost of invoking a method and reading a property through
five dispatch strategies: direct access, lookup by name, bound delegates,
a generic getter wrapper, and compiled expression trees.

Main APIs:
- run_benchmarks(): Run every strategy and print one line per segment
- BenchmarkRunner: Run strategies individually
- resolve_method() / resolve_property(): Lookup by name
- GetterWrapper: Generic wrapper around a bound getter
"""

__version__ = "0.1.0"

from reflectionlab.benchmark import (
    BenchmarkConfig,
    BenchmarkReport,
    BenchmarkRunner,
    SegmentResult,
    Stopwatch,
    run_benchmarks,
)
from reflectionlab.config import LabConfig, load_config
from reflectionlab.dispatch import (
    GetterWrapper,
    MethodHandle,
    PropertyHandle,
    compile_call_expression,
    compile_property_expression,
    create_delegate,
    create_getter_delegate,
    resolve_method,
    resolve_property,
)
from reflectionlab.exceptions import (
    ConfigError,
    MemberNotFoundError,
    ReflectionLabError,
)
from reflectionlab.model import TargetObject

__all__ = [
    "__version__",
    # Benchmark
    "BenchmarkConfig",
    "BenchmarkReport",
    "BenchmarkRunner",
    "SegmentResult",
    "Stopwatch",
    "run_benchmarks",
    # Config
    "LabConfig",
    "load_config",
    # Dispatch
    "GetterWrapper",
    "MethodHandle",
    "PropertyHandle",
    "compile_call_expression",
    "compile_property_expression",
    "create_delegate",
    "create_getter_delegate",
    "resolve_method",
    "resolve_property",
    # Errors
    "ConfigError",
    "MemberNotFoundError",
    "ReflectionLabError",
    # Model
    "TargetObject",
]
