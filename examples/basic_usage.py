"""
secretshard: Basic Usage Example

Demonstrates splitting a secret into shares, recombining any threshold of
them, and what happens when too few or mismatched shares are supplied.
"""

import itertools
import os
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from secretshard import Share, ReconstructionError, combine, shard


def main():
    secret = b"correct horse battery staple"

    print("=" * 50)
    print("  secretshard: 3-of-5 Shamir split")
    print("=" * 50)

    blobs = shard(secret, parts=5, threshold=3)
    for blob in blobs:
        share = Share.from_bytes(blob)
        print(f"  share x={share.x:3d}  {share.to_hex()[:40]}...")

    # Any 3 of the 5 reconstruct the secret
    for combo in itertools.combinations(blobs, 3):
        assert combine(list(combo)) == secret
    print("\nEvery 3-share combination recovered the secret.")

    # 2 shares are refused outright
    try:
        combine(blobs[:2])
        print("  ERROR: Should have failed!")
    except ReconstructionError as e:
        print(f"Two shares refused: {e} ({e.reason.value})")

    # Shares from another split combine without error, into garbage
    other = shard(os.urandom(len(secret)), parts=5, threshold=3)
    mixed = [blobs[0], other[1], blobs[2]]
    try:
        wrong = combine(mixed)
        print(f"Mixed shares recombined to {wrong!r} (no integrity check)")
    except ReconstructionError as e:
        # Only happens if the two splits drew the same x-coordinate
        print(f"Mixed shares refused: {e}")


if __name__ == "__main__":
    main()
