"""Tests for the upper bound estimator."""

import pytest

from segsieve.bounds import estimate_limit, sqrt_bound, SMALL_TARGET_LIMIT
from segsieve.errors import InvalidArgumentError


def test_small_targets_use_constant():
    for n in range(1, 6):
        assert estimate_limit(n) == SMALL_TARGET_LIMIT == 15


def test_formula_from_six():
    # 6 * (ln 6 + ln ln 6) = 14.25...
    assert estimate_limit(6) == 14
    assert estimate_limit(7) == 18


def test_limit_covers_nth_prime(small_primes):
    """[2, limit] always holds at least n primes."""
    for n in range(1, len(small_primes) + 1):
        limit = estimate_limit(n)
        if limit < small_primes[-1]:
            assert small_primes[n - 1] <= limit


def test_non_positive_target_rejected():
    with pytest.raises(InvalidArgumentError):
        estimate_limit(0)


def test_limit_beyond_int64_rejected():
    with pytest.raises(InvalidArgumentError):
        estimate_limit(10**18)


def test_sqrt_bound():
    assert sqrt_bound(15) == 4
    assert sqrt_bound(16) == 5
    assert sqrt_bound(1_000_000) == 1001
