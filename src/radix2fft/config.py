"""
Benchmark configuration.

Loaded from a YAML file of the form

    benchmark:
      n_exponent: 15
      start: 0.0
      stop: 5.0
      ...
    logging:
      file: logs/benchmark.log
      level: INFO

Missing keys fall back to the BenchmarkConfig defaults.
"""

from dataclasses import dataclass, asdict, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .fft import max_parallel_depth

INT_FIELDS = ('n_exponent', 'parallel_depth', 'top_k', 'verify_max_n')
FLOAT_FIELDS = ('start', 'stop', 'frequency')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigError(ValueError):
    """Invalid or unreadable benchmark configuration."""


@dataclass
class BenchmarkConfig:
    """Parameters for a single benchmark run."""
    n_exponent: int = 15          # 2**15 samples
    start: float = 0.0
    stop: float = 5.0
    frequency: float = 1.0        # Hz of the sampled sine
    parallel_depth: int = 0
    top_k: int = 8                # Bins shown in the result table
    verify_max_n: int = 4096      # Skip the O(n^2) check above this size
    log_file: Optional[str] = None
    log_level: str = 'INFO'

    @property
    def n_samples(self) -> int:
        return 2 ** self.n_exponent

    @property
    def spacing(self) -> float:
        return (self.stop - self.start) / self.n_samples

    def validate(self) -> "BenchmarkConfig":
        for name in INT_FIELDS:
            value = getattr(self, name)
            # bool is an int subclass; YAML `true` must not pass as 1
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
        for name in FLOAT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{name} must be a number, got {value!r}")

        if self.n_exponent < 0:
            raise ConfigError(f"n_exponent must be >= 0, got {self.n_exponent}")
        if self.stop <= self.start:
            raise ConfigError(f"stop ({self.stop}) must be greater than start ({self.start})")
        if not 0 <= self.parallel_depth <= max_parallel_depth():
            raise ConfigError(
                f"parallel_depth must be in [0, {max_parallel_depth()}] on this machine, "
                f"got {self.parallel_depth}"
            )
        if self.top_k < 1:
            raise ConfigError(f"top_k must be >= 1, got {self.top_k}")
        if self.verify_max_n < 0:
            raise ConfigError(f"verify_max_n must be >= 0, got {self.verify_max_n}")
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}")
        return self

    def to_dict(self) -> Dict:
        return asdict(self)


def load_config(config_path: str) -> Dict:
    """Load a YAML configuration file into a dict."""
    path = Path(config_path)
    if not path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")
    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Malformed YAML in {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Top level of {config_path} must be a mapping")
    return data


def config_from_dict(data: Dict[str, Any]) -> BenchmarkConfig:
    """Build a validated BenchmarkConfig from a parsed YAML mapping."""
    bench = data.get('benchmark', {}) or {}
    if not isinstance(bench, dict):
        raise ConfigError("'benchmark' section must be a mapping")

    known = {f.name for f in fields(BenchmarkConfig)}
    unknown = set(bench) - known
    if unknown:
        raise ConfigError(f"Unknown benchmark keys: {', '.join(sorted(unknown))}")

    params = dict(bench)
    log_cfg = data.get('logging', {}) or {}
    if not isinstance(log_cfg, dict):
        raise ConfigError("'logging' section must be a mapping")
    if log_cfg.get('file') is not None:
        params.setdefault('log_file', str(log_cfg['file']))
    if log_cfg.get('level') is not None:
        params.setdefault('log_level', str(log_cfg['level']).upper())

    config = BenchmarkConfig(**params).validate()
    # YAML `stop: 2` arrives as int
    return replace(config, **{name: float(getattr(config, name)) for name in FLOAT_FIELDS})


def apply_overrides(config: BenchmarkConfig, overrides: Dict[str, Any]) -> BenchmarkConfig:
    """Return a copy of config with non-None overrides applied."""
    changes = {k: v for k, v in overrides.items() if v is not None}
    return replace(config, **changes).validate()
