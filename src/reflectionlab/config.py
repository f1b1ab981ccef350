"""reflectionlab Configuration.

Loads ``LabConfig`` from, highest priority first:

1. Explicit overrides (command-line flags)
2. Environment variables (``REFLECTIONLAB_*``)
3. YAML file
4. Defaults

YAML format::

    times: 1000000
    warmup_calls: 1
    pause: false
    output_json: results.json
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from reflectionlab.benchmark.harness import DEFAULT_TIMES, BenchmarkConfig
from reflectionlab.exceptions import ConfigError

logger = logging.getLogger(__name__)

ENV_PREFIX = "REFLECTIONLAB_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass
class LabConfig:
    """reflectionlab configuration.

    Attributes:
        times: Iterations per timed segment.
        warmup_calls: Untimed warm-up calls before the first segment.
        pause: If True, wait for Enter before exiting.
        output_json: Path to write the JSON report to, if any.
    """
    times: int = DEFAULT_TIMES
    warmup_calls: int = 1
    pause: bool = False
    output_json: Optional[str] = None

    def validate(self) -> "LabConfig":
        """Check value ranges.

        Returns:
            self, for chaining.

        Raises:
            ConfigError: If a value is out of range.
        """
        if self.times < 1:
            raise ConfigError(f"times must be at least 1, got {self.times}", field="times")
        if self.warmup_calls < 0:
            raise ConfigError(
                f"warmup_calls must not be negative, got {self.warmup_calls}",
                field="warmup_calls",
            )
        return self

    def benchmark_config(self) -> BenchmarkConfig:
        return BenchmarkConfig(times=self.times, warmup_calls=self.warmup_calls)


def _coerce(name: str, value: Any) -> Any:
    if name in ("times", "warmup_calls"):
        if isinstance(value, bool):
            raise ConfigError(f"Invalid integer for {name}: {value!r}", field=name)
        try:
            return int(value)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid integer for {name}: {value!r}", field=name) from e
    if name == "pause":
        if isinstance(value, bool):
            return value
        text = str(value).strip().lower()
        if text in _TRUE_VALUES:
            return True
        if text in _FALSE_VALUES:
            return False
        raise ConfigError(f"Invalid boolean for {name}: {value!r}", field=name)
    if name == "output_json":
        return None if value in (None, "") else str(value)
    return value


def _apply(config: LabConfig, values: Mapping[str, Any]) -> LabConfig:
    known = {f.name for f in fields(LabConfig)}
    updates: dict[str, Any] = {}
    for key, value in values.items():
        if key not in known:
            logger.warning("Ignoring unknown config key: %s", key)
            continue
        if value is None and key != "output_json":
            continue
        updates[key] = _coerce(key, value)
    return replace(config, **updates)


def load_yaml(path: str | Path) -> dict[str, Any]:
    """Load and parse a YAML config file.

    Args:
        path: Path to YAML file.

    Returns:
        Parsed YAML as dict (empty for an empty file).

    Raises:
        ConfigError: If the file doesn't exist or isn't a mapping.
        yaml.YAMLError: If YAML is invalid.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config file format: {path}")

    logger.debug("Loaded config from %s", path)
    return data


def load_env(prefix: str = ENV_PREFIX) -> dict[str, Any]:
    """Collect config values from environment variables.

    ``REFLECTIONLAB_TIMES=1000`` maps to ``times``; ``REFLECTIONLAB_OUTPUT``
    maps to ``output_json``.
    """
    result: dict[str, Any] = {}
    for key, value in os.environ.items():
        if not key.startswith(prefix):
            continue
        name = key[len(prefix):].lower()
        if name == "output":
            name = "output_json"
        result[name] = value
    return result


def load_config(
    path: str | Path | None = None,
    overrides: Optional[Mapping[str, Any]] = None,
    env_prefix: str = ENV_PREFIX,
) -> LabConfig:
    """Build a LabConfig from all sources.

    Args:
        path: YAML config file (optional).
        overrides: Highest-priority values, None entries are ignored.
        env_prefix: Environment variable prefix.

    Returns:
        Validated LabConfig.

    Raises:
        ConfigError: If any source is invalid.
    """
    config = LabConfig()
    if path is not None:
        config = _apply(config, load_yaml(path))
    config = _apply(config, load_env(env_prefix))
    if overrides:
        config = _apply(config, {k: v for k, v in overrides.items() if v is not None})
    return config.validate()
