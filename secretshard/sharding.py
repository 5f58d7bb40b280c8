"""
Sharding Engine
Split a secret into N shares where any K can reconstruct it.

Every secret byte gets its own random polynomial of degree K-1 with the byte
as the constant term. Every polynomial is evaluated at the same N
distinct, nonzero x-coordinates, and share i collects the value at x_i for
every byte position.

Which x-coordinates are used does not affect correctness, only that they are
distinct and nonzero. They are drawn as a random subset of 1..255, so share
files do not reveal how many siblings they have.
"""

import logging
from dataclasses import dataclass

from secretshard.codec import Share, encode
from secretshard.errors import ConfigurationError, EmptyInputError
from secretshard.polynomial import RandomSource, default_random_source, evaluate, make_polynomial

logger = logging.getLogger(__name__)

# x-coordinates are nonzero bytes, so at most 255 distinct shares exist
MAX_SHARES = 255
DEFAULT_PARTS = 5
DEFAULT_THRESHOLD = 3


def _require_int(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(name, f"{name} must be an integer, got {value!r}")


@dataclass(frozen=True)
class ShardConfig:
    """How many shares to produce (N) and how many reconstruct (K)."""
    parts: int = DEFAULT_PARTS
    threshold: int = DEFAULT_THRESHOLD

    def validate(self) -> "ShardConfig":
        """
        Check 1 <= threshold <= parts <= 255.

        Raises:
            ConfigurationError: Naming the offending parameter.
        """
        _require_int("parts", self.parts)
        _require_int("threshold", self.threshold)
        if self.parts < 1:
            raise ConfigurationError("parts", f"Parts must be at least 1, got {self.parts}")
        if self.parts > MAX_SHARES:
            raise ConfigurationError(
                "parts", f"Parts cannot exceed {MAX_SHARES}, got {self.parts}"
            )
        if self.threshold < 1:
            raise ConfigurationError(
                "threshold", f"Threshold must be at least 1, got {self.threshold}"
            )
        if self.threshold > self.parts:
            raise ConfigurationError(
                "threshold",
                f"Threshold ({self.threshold}) cannot exceed parts ({self.parts})",
            )
        return self


def split_secret(
    secret: bytes,
    parts: int = DEFAULT_PARTS,
    threshold: int = DEFAULT_THRESHOLD,
    rng: RandomSource | None = None,
) -> list[Share]:
    """
    Split a secret into shares using Shamir's Secret Sharing over GF(256).

    Args:
        secret: The secret bytes to split. Any length of at least 1.
        parts: Total shares to generate (N), 1-255.
        threshold: Minimum shares needed to reconstruct (K), 1-N.
        rng: Randomness capability. Defaults to the system CSPRNG.

    Returns:
        List of N Share objects with distinct x-coordinates.
        Any K of them reconstruct the secret.

    Raises:
        ConfigurationError: If parts or threshold are invalid.
        EmptyInputError: If the secret is empty.
    """
    # Validate everything before touching the random source
    config = ShardConfig(parts=parts, threshold=threshold).validate()
    secret = bytes(secret)
    if not secret:
        raise EmptyInputError("Cannot split an empty secret")

    rng = rng or default_random_source()
    x_coordinates = rng.sample(range(1, MAX_SHARES + 1), config.parts)

    # One row of y-values per share, filled a byte position at a time
    rows = [bytearray(len(secret)) for _ in x_coordinates]
    for position, byte in enumerate(secret):
        coefficients = make_polynomial(byte, config.threshold, rng)
        for row, x in zip(rows, x_coordinates):
            row[position] = evaluate(coefficients, x)

    logger.debug(
        "Split %d-byte secret into %d shares (threshold %d)",
        len(secret), config.parts, config.threshold,
    )
    return [
        Share(x=x, threshold=config.threshold, values=bytes(row))
        for x, row in zip(x_coordinates, rows)
    ]


def shard(
    secret: bytes,
    parts: int = DEFAULT_PARTS,
    threshold: int = DEFAULT_THRESHOLD,
    rng: RandomSource | None = None,
) -> list[bytes]:
    """Split a secret and encode each share as an opaque blob."""
    return [encode(share) for share in split_secret(secret, parts, threshold, rng)]
