#!/usr/bin/env python3
"""
reflectionlab Command Line

Runs the dispatch benchmarks and prints ``<label>: <milliseconds>`` lines.

Usage:
    # Run all benchmarks with defaults (1,000,000 iterations)
    python -m reflectionlab

    # Fewer iterations
    python -m reflectionlab --iterations 10000

    # Save results to JSON
    python -m reflectionlab --output results.json
"""
from __future__ import annotations

import argparse
import json
import logging
import os
import platform
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Sequence

from reflectionlab.benchmark import BenchmarkReport, BenchmarkRunner
from reflectionlab.config import LabConfig, load_config
from reflectionlab.exceptions import ReflectionLabError

logger = logging.getLogger(__name__)


def get_system_info() -> dict[str, Any]:
    """Collect system information for reproducibility.

    Returns:
        Dictionary with system information.
    """
    return {
        "platform": platform.platform(),
        "python_version": platform.python_version(),
        "python_implementation": platform.python_implementation(),
        "processor": platform.processor(),
        "machine": platform.machine(),
        "cpu_count": os.cpu_count(),
        "timestamp": datetime.now().isoformat(),
    }


def save_results(report: BenchmarkReport, config: LabConfig, output_path: Path) -> None:
    """Save the report to a JSON file.

    Args:
        report: Completed benchmark report.
        config: Configuration the run used.
        output_path: Path to save JSON.
    """
    results = {
        "benchmark_run": {
            "timestamp": datetime.now().isoformat(),
            "config": {
                "times": config.times,
                "warmup_calls": config.warmup_calls,
            },
            "system_info": get_system_info(),
        },
        "report": report.to_dict(),
    }

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(results, f, indent=2)

    logger.info("Results saved to: %s", output_path)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reflectionlab",
        description="Compare the overhead of direct, reflective, delegate and "
        "compiled-expression dispatch",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=None,
        help="Iterations per segment (default: 1000000)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML config file",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output JSON file path for results",
    )
    parser.add_argument(
        "--pause",
        action="store_true",
        default=None,
        help="Wait for Enter before exiting",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, 1 for setup errors).
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        config = load_config(
            args.config,
            overrides={
                "times": args.iterations,
                "pause": args.pause,
                "output_json": args.output,
            },
        )
        report = BenchmarkRunner(config.benchmark_config()).run_all()
    except ReflectionLabError as e:
        logger.error("Benchmark aborted: %s", e)
        return 1

    if config.output_json:
        save_results(report, config, Path(config.output_json))

    if config.pause and sys.stdin.isatty():
        input("Press Enter to exit...")

    return 0


if __name__ == "__main__":
    sys.exit(main())
