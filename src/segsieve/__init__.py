"""
Segsieve: n-th prime search with a memory-bounded segmented sieve.

Indices are zero-based: nth_prime(0) == 2.
"""

__version__ = "0.1.0"

from .core import NthPrimeFinder, SegmentedSieve, nth_prime
from .errors import SieveError, InvalidArgumentError, InsufficientBoundError
from .sieve import simple_sieve
from .utils import setup_logging, get_config, get_segment_size, TimingCollector

__all__ = ['NthPrimeFinder', 'SegmentedSieve', 'nth_prime', 'simple_sieve', 'SieveError', 'InvalidArgumentError', 'InsufficientBoundError', 'setup_logging', 'get_config', 'get_segment_size', 'TimingCollector']
