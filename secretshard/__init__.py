"""
secretshard: Shamir's Secret Sharing for arbitrary byte strings.

Split a secret into N shares where any K reconstruct it exactly and any K-1
or fewer reveal nothing about it. Arithmetic is done byte by byte in
GF(2^8), so secrets of any length work without padding or chunking.

Shares are not authenticated: K well-formed shares from different secrets
combine into a wrong answer without an error.

Usage:
    from secretshard import shard, combine
    blobs = shard(b"my secret", parts=5, threshold=3)
    assert combine(blobs[:3]) == b"my secret"
"""

__version__ = "0.1.0"

from secretshard.codec import Share, encode, decode
from secretshard.combining import combine, combine_shares
from secretshard.errors import (
    SecretShardError,
    ConfigurationError,
    EmptyInputError,
    FormatError,
    ReconstructionError,
    ReconstructionFailure,
    DomainError,
)
from secretshard.polynomial import RandomSource, SystemRandomSource
from secretshard.sharding import shard, split_secret, ShardConfig

__all__ = [
    "shard",
    "combine",
    "split_secret",
    "combine_shares",
    "Share",
    "encode",
    "decode",
    "ShardConfig",
    "RandomSource",
    "SystemRandomSource",
    "SecretShardError",
    "ConfigurationError",
    "EmptyInputError",
    "FormatError",
    "ReconstructionError",
    "ReconstructionFailure",
    "DomainError",
]
