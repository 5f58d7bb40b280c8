"""Shared fixtures: deterministic randomness for reproducible shares."""

import random
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from secretshard.polynomial import RandomSource


class SeededRandomSource(RandomSource):
    """Deterministic RandomSource. For tests only, never for real secrets."""

    def __init__(self, seed: int = 0):
        self._random = random.Random(seed)
        self.calls = 0

    def token_bytes(self, n: int) -> bytes:
        self.calls += 1
        return bytes(self._random.getrandbits(8) for _ in range(n))

    def sample(self, population, k: int) -> list[int]:
        self.calls += 1
        return self._random.sample(population, k)


class ExplodingRandomSource(RandomSource):
    """Fails the test if any randomness is requested."""

    def token_bytes(self, n: int) -> bytes:
        raise AssertionError("randomness consumed")

    def sample(self, population, k: int) -> list[int]:
        raise AssertionError("randomness consumed")


@pytest.fixture
def seeded_rng():
    return SeededRandomSource(seed=1234)


@pytest.fixture
def exploding_rng():
    return ExplodingRandomSource()
