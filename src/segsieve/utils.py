"""
Utility functions for logging, configuration, timing and memory reporting.
"""

import logging
import os
import time
import tomllib
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np
import polars as pl
import psutil

from .errors import InvalidArgumentError

DEFAULT_SEGMENT_SIZE = 1_000_000
DEFAULT_LOG_FILE = 'nthprime.log'


class TimingCollector:
    """Collect and store timing data for performance profiling."""

    def __init__(self, verbose: bool = False):
        self.timings: List[Dict] = []
        self.verbose = verbose

    def record(self, operation: str, duration: float):
        """Record one finished operation (duration in seconds)."""
        self.timings.append({'operation': operation, 'duration_ms': duration * 1000})

        if self.verbose:
            logging.debug(f"Completed: {operation} in {duration*1000:.2f}ms")

    def time_operation(self, operation: str):
        """Context manager for timing operations."""
        return TimingContext(self, operation)

    def get_stats(self) -> Dict:
        """Get timing statistics per operation."""
        if not self.timings:
            return {}

        df = pl.DataFrame(self.timings)
        stats = {}

        for operation in df['operation'].unique(maintain_order=True):
            op_data = df.filter(pl.col('operation') == operation)['duration_ms']
            stats[operation] = {
                'count': len(op_data),
                'total_ms': op_data.sum(),
                'mean_ms': op_data.mean(),
                'median_ms': op_data.median(),
                'min_ms': op_data.min(),
                'max_ms': op_data.max(),
            }
        return stats

    def print_summary(self):
        """Print timing summary to console."""
        stats = self.get_stats()
        if not stats:
            print("No timing data collected")
            return

        print("\n=== TIMING SUMMARY ===")
        for operation, data in stats.items():
            print(f"{operation:15s}: {data['mean_ms']:8.2f}ms avg ({data['count']:4d} calls, {data['total_ms']:.2f}ms total)")


class TimingContext:
    """Context manager for timing operations."""

    def __init__(self, collector: TimingCollector, operation: str):
        self.collector = collector
        self.operation = operation
        self.start_time = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.collector.record(self.operation, time.perf_counter() - self.start_time)


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    """Set up logging configuration."""
    if log_file is None:
        log_file = get_config().get('log_file', DEFAULT_LOG_FILE)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler()
        ],
        force=True
    )


def get_config_file() -> Path:
    """Get the application configuration file path."""
    if config_file := os.getenv('SEGSIEVE_CONFIG'):
        return Path(config_file)
    return Path('pixi.toml')


def get_config() -> Dict:
    """Get application configuration from the [tool.segsieve] table."""
    config_file = get_config_file()
    try:
        with open(config_file, "rb") as f:
            config = tomllib.load(f)
    except FileNotFoundError:
        logging.debug(f"No config file at {config_file}, using defaults")
        return {}
    except tomllib.TOMLDecodeError as e:
        logging.warning(f"Could not parse {config_file} ({e}), using defaults")
        return {}

    return config.get("tool", {}).get("segsieve", {})


def get_segment_size(config: Optional[Dict] = None) -> int:
    """
    Resolve the segment size following the configuration hierarchy.

    1. SEGSIEVE_SEGMENT_SIZE environment variable
    2. segment_size in the config file
    3. DEFAULT_SEGMENT_SIZE
    """
    if env_size := os.getenv('SEGSIEVE_SEGMENT_SIZE'):
        try:
            segment_size = int(env_size)
        except ValueError:
            raise InvalidArgumentError(f"SEGSIEVE_SEGMENT_SIZE must be an integer, got {env_size!r}")
    else:
        if config is None:
            config = get_config()
        segment_size = config.get('segment_size', DEFAULT_SEGMENT_SIZE)

    return validate_segment_size(segment_size)


def validate_segment_size(segment_size) -> int:
    if isinstance(segment_size, bool) or not isinstance(segment_size, (int, np.integer)):
        raise InvalidArgumentError(f"segment size must be an integer, got {segment_size!r}")
    if segment_size < 1:
        raise InvalidArgumentError(f"segment size must be positive, got {segment_size}")
    return int(segment_size)


def memory_usage_mb() -> float:
    """Resident set size of the current process in MiB."""
    return psutil.Process(os.getpid()).memory_info().rss / (1024 * 1024)
