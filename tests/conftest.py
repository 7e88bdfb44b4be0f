import math

import pytest


def _is_prime(k):
    if k < 2:
        return False
    for d in range(2, math.isqrt(k) + 1):
        if k % d == 0:
            return False
    return True


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run every test in a scratch directory with no config file."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv('SEGSIEVE_CONFIG', str(tmp_path / 'missing.toml'))
    monkeypatch.delenv('SEGSIEVE_SEGMENT_SIZE', raising=False)


@pytest.fixture
def is_prime():
    return _is_prime


@pytest.fixture(scope='session')
def small_primes():
    """Primes below 10,000 by trial division."""
    return [k for k in range(10_000) if _is_prime(k)]
