"""
Exceptions raised by the segmented sieve.
"""


class SieveError(Exception):
    """Base class for sieve failures."""


class InvalidArgumentError(SieveError, ValueError):
    """Requested index (or a tuning option) is outside the valid domain."""


class InsufficientBoundError(SieveError, RuntimeError):
    """The estimated limit did not contain enough primes."""

    def __init__(self, target: int, limit: int, found: int):
        self.target = target
        self.limit = limit
        self.found = found
        super().__init__(
            f"Upper bound too small: found {found} of {target} primes in [2, {limit}]"
        )
