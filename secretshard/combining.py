"""
Combining Engine
Reconstruct a secret from K or more shares using Lagrange interpolation.

All cross-share checks happen here, before any interpolation, so a bad set
of shares fails with a ReconstructionError saying what is wrong with it
rather than producing garbage.

There is no integrity check. K structurally valid shares from different
sharding runs (or tampered y-values) combine "successfully" into a wrong
secret. Detecting that would need verifiable secret sharing, which this
package does not do.
"""

import logging
from typing import Iterable

from secretshard import gf256
from secretshard.codec import Share, decode
from secretshard.errors import ReconstructionError, ReconstructionFailure
from secretshard.interpolation import lagrange_weights

logger = logging.getLogger(__name__)


def check_shares(shares: list[Share]) -> int:
    """
    Verify a set of shares can be combined.

    Returns:
        The common threshold K.

    Raises:
        ReconstructionError: With the reason set to the first broken
            invariant: mismatched threshold, duplicate x-coordinate,
            mismatched length, or insufficient shares.
    """
    if not shares:
        raise ReconstructionError(
            ReconstructionFailure.INSUFFICIENT_SHARES, "No shares supplied"
        )

    threshold = shares[0].threshold
    thresholds = sorted({s.threshold for s in shares})
    if len(thresholds) > 1:
        raise ReconstructionError(
            ReconstructionFailure.MISMATCHED_THRESHOLD,
            f"Shares disagree on threshold: {thresholds}",
        )

    seen = set()
    for share in shares:
        if share.x in seen:
            raise ReconstructionError(
                ReconstructionFailure.DUPLICATE_COORDINATE,
                f"Duplicate share detected: x-coordinate {share.x} appears more than once",
            )
        seen.add(share.x)

    lengths = sorted({len(s.values) for s in shares})
    if len(lengths) > 1:
        raise ReconstructionError(
            ReconstructionFailure.MISMATCHED_LENGTH,
            f"Shares disagree on secret length: {lengths}",
        )

    if len(shares) < threshold:
        raise ReconstructionError(
            ReconstructionFailure.INSUFFICIENT_SHARES,
            f"Need at least {threshold} shares, got {len(shares)}",
        )

    return threshold


def combine_shares(shares: Iterable[Share]) -> bytes:
    """
    Reconstruct a secret from decoded shares.

    Args:
        shares: At least K shares (where K is the threshold), in any order.

    Returns:
        The reconstructed secret bytes.

    Raises:
        ReconstructionError: If the shares cannot be combined.
    """
    shares = list(shares)
    threshold = check_shares(shares)

    # Use only threshold number of shares (any K will do)
    chosen = shares[:threshold]
    length = len(chosen[0].values)

    weights = lagrange_weights([s.x for s in chosen])

    # f(0) = sum over j of w_j * y_j, at every byte position at once.
    # Multiplying a y-vector by w_j is one bytes.translate() through a
    # 256-entry table; summing vectors is XOR of them as big integers.
    accumulator = 0
    for share, weight in zip(chosen, weights):
        table = bytes(gf256.mul(y, weight) for y in range(256))
        accumulator ^= int.from_bytes(share.values.translate(table), "big")
    secret = accumulator.to_bytes(length, "big")

    logger.debug(
        "Combined %d of %d shares into %d-byte secret",
        len(chosen), len(shares), length,
    )
    return secret


def combine(blobs: Iterable[bytes]) -> bytes:
    """
    Decode share blobs and reconstruct the secret.

    Raises:
        FormatError: If any blob is malformed.
        ReconstructionError: If the decoded shares cannot be combined.
    """
    return combine_shares(decode(blob) for blob in blobs)
