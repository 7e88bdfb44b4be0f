"""
Upper bound estimation for the n-th prime.

Uses p_n < n * (ln n + ln ln n), which holds for n >= 6.
"""

import math

from .errors import InvalidArgumentError

# Small targets where ln(ln(n)) is undefined or the formula undershoots
SMALL_TARGET_LIMIT = 15
MAX_LIMIT = 2**63 - 1


def estimate_limit(n: int) -> int:
    """
    Estimate an integer limit such that [2, limit] holds at least n primes.

    Args:
        n: One-based count target (n >= 1)

    Returns:
        The search limit
    """
    if n < 1:
        raise InvalidArgumentError(f"count target must be positive, got {n}")
    if n < 6:
        return SMALL_TARGET_LIMIT

    nn = float(n)
    limit = int(nn * (math.log(nn) + math.log(math.log(nn))))
    if limit > MAX_LIMIT:
        raise InvalidArgumentError(f"limit {limit} for target {n} exceeds 64-bit range")
    return limit


def sqrt_bound(limit: int) -> int:
    """Bound for base primes: floor(sqrt(limit)) + 1."""
    return math.isqrt(limit) + 1
