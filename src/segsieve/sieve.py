"""
Unsegmented sieve of Eratosthenes for the base primes.
"""

import math

import numpy as np


def simple_sieve(limit: int) -> np.ndarray:
    """
    Return all primes p with 2 <= p <= limit, ascending.

    Example:
        >>> simple_sieve(10).tolist()
        [2, 3, 5, 7]
    """
    if limit < 2:
        return np.array([], dtype=np.int64)

    flags = np.ones(limit + 1, dtype=bool)
    flags[:2] = False
    for p in range(2, math.isqrt(limit) + 1):
        if flags[p]:
            # Smaller multiples were crossed off by smaller primes
            flags[p * p::p] = False

    return np.flatnonzero(flags).astype(np.int64)
