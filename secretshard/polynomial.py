"""
Polynomial Engine
Random polynomials over GF(2^8) and their evaluation.

One polynomial is built per secret byte: the byte is the constant term and
the remaining threshold-1 coefficients are uniformly random. Any threshold
points on it pin it down; any fewer leave the constant term uniformly
distributed.

Randomness is passed in as a RandomSource instead of being read from a
global, so tests can drive coefficient generation deterministically while
production always goes through the OS CSPRNG.
"""

import secrets
from abc import ABC, abstractmethod
from typing import Sequence

from secretshard import gf256
from secretshard.errors import ConfigurationError, DomainError


class RandomSource(ABC):
    """Capability that supplies randomness to the sharding engine."""

    @abstractmethod
    def token_bytes(self, n: int) -> bytes:
        """Return n uniformly random bytes."""

    @abstractmethod
    def sample(self, population: Sequence[int], k: int) -> list[int]:
        """Return k distinct elements of population in random order."""


class SystemRandomSource(RandomSource):
    """
    Production randomness backed by the secrets module.

    secrets reads from the OS CSPRNG and is safe to share between threads.
    """

    def __init__(self):
        self._system = secrets.SystemRandom()

    def token_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)

    def sample(self, population: Sequence[int], k: int) -> list[int]:
        return self._system.sample(population, k)


def default_random_source() -> RandomSource:
    """The randomness used when a caller does not supply one."""
    return SystemRandomSource()


def make_polynomial(secret_byte: int, threshold: int, rng: RandomSource | None = None) -> list[int]:
    """
    Build a random polynomial of degree at most threshold-1.

    Args:
        secret_byte: The constant term, f(0).
        threshold: Number of coefficients (K). Must be at least 1.
        rng: Randomness capability. Defaults to the system CSPRNG.

    Returns:
        Coefficients lowest degree first: [secret_byte, r1, ..., r(K-1)].
        The top coefficient may be 0.

    Raises:
        ConfigurationError: If threshold < 1.
        DomainError: If secret_byte is not a byte.
    """
    if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold < 1:
        raise ConfigurationError("threshold", f"Threshold must be at least 1, got {threshold!r}")
    if not gf256.is_element(secret_byte):
        raise DomainError(f"Secret byte must be in 0..255, got {secret_byte!r}")

    rng = rng or default_random_source()
    return [secret_byte] + list(rng.token_bytes(threshold - 1))


def evaluate(coefficients: Sequence[int], x: int) -> int:
    """Evaluate the polynomial at x with Horner's method in GF(2^8)."""
    result = 0
    for coeff in reversed(coefficients):
        result = gf256.add(gf256.mul(result, x), coeff)
    return result
