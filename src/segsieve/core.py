"""
Segmented sieve of Eratosthenes for the n-th prime.

- Estimate an upper limit that holds at least n primes
- Sieve the base primes up to sqrt(limit) once
- Walk [2, limit] in fixed-size segments, crossing off multiples of the
  base primes, and stop at the segment holding the n-th prime
"""

import contextlib
import logging
from abc import ABC, abstractmethod

import numpy as np
from tqdm import tqdm

from .bounds import estimate_limit, sqrt_bound
from .errors import InsufficientBoundError, InvalidArgumentError
from .sieve import simple_sieve
from .utils import TimingCollector, get_segment_size, validate_segment_size


class NthPrimeFinder(ABC):
    """Anything that can return the prime at a zero-based index."""

    @abstractmethod
    def nth_prime(self, index: int) -> int:
        """Return the prime at `index` (index 0 is 2)."""


class SegmentedSieve(NthPrimeFinder):
    """Memory-bounded n-th prime search using a segmented sieve."""

    def __init__(self, segment_size: int = None, show_progress: bool = False,
                 timer: TimingCollector = None):
        """
        Args:
            segment_size: Integers per segment (default: from config, 1,000,000)
            show_progress: Show a tqdm bar over segments
            timer: Optional TimingCollector for per-segment timings
        """
        if segment_size is None:
            segment_size = get_segment_size()
        self.segment_size = validate_segment_size(segment_size)
        self.show_progress = show_progress
        self.timer = timer

    def _timed(self, operation: str):
        if self.timer is None:
            return contextlib.nullcontext()
        return self.timer.time_operation(operation)

    def nth_prime(self, index: int) -> int:
        """
        Return the prime at a zero-based index.

        Args:
            index: Non-negative integer, 0 -> 2, 1 -> 3, 2 -> 5, ...

        Returns:
            The prime as a Python int
        """
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            raise InvalidArgumentError(f"index must be an integer, got {index!r}")
        if index < 0:
            raise InvalidArgumentError(f"index must be non-negative, got {index}")

        # Zero-based index -> one-based count target
        n = int(index) + 1

        limit = estimate_limit(n)
        with self._timed('base_primes'):
            base_primes = simple_sieve(sqrt_bound(limit))
        logging.debug(f"Target {n:,}: limit {limit:,}, {len(base_primes):,} base primes")

        return self.find(n, limit, base_primes)

    def find(self, n: int, limit: int, base_primes: np.ndarray) -> int:
        """
        Scan [2, limit] segment by segment until the n-th prime is reached.

        Args:
            n: One-based count target
            limit: Inclusive upper end of the search range
            base_primes: Ascending primes up to at least sqrt(limit)

        Returns:
            The n-th prime

        Raises:
            InsufficientBoundError: [2, limit] holds fewer than n primes
        """
        count = 0
        num_segments = max(0, -(-(limit - 1) // self.segment_size))

        with tqdm(total=num_segments, desc="Sieving", unit="segment",
                  disable=not self.show_progress) as pbar:
            for low in range(2, limit + 1, self.segment_size):
                high = min(low + self.segment_size - 1, limit)

                with self._timed('segment'):
                    primes = self.count_segment(low, high, base_primes)
                pbar.update(1)

                if count + len(primes) >= n:
                    prime = int(primes[n - count - 1])
                    logging.debug(f"Found prime #{n:,} = {prime:,} in segment [{low:,}, {high:,}]")
                    return prime
                count += len(primes)

        raise InsufficientBoundError(n, limit, count)

    def count_segment(self, low: int, high: int, base_primes: np.ndarray) -> np.ndarray:
        """
        Sieve one segment [low, high] (low >= 2) with the base primes.

        Returns:
            Ascending NumPy array of the primes in the segment
        """
        is_prime = np.ones(high - low + 1, dtype=bool)

        for p in base_primes:
            p = int(p)
            p_squared = p * p
            if p_squared > high:
                break
            # First multiple of p in the segment, never below p^2
            start = max(p_squared, ((low + p - 1) // p) * p)
            is_prime[start - low::p] = False

        return np.flatnonzero(is_prime).astype(np.int64) + low


def nth_prime(index: int, segment_size: int = None) -> int:
    """Return the prime at a zero-based index using a fresh SegmentedSieve."""
    return SegmentedSieve(segment_size=segment_size).nth_prime(index)
