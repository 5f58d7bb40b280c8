"""
Share Files
Read secrets and write shares on the local filesystem.

Each share is written to its own file so it can be handed to a different
custodian. A directory of share files is all combine needs; file names and
order do not matter because every blob carries its own header.
"""

import logging
from pathlib import Path

from secretshard.combining import combine
from secretshard.polynomial import RandomSource
from secretshard.sharding import DEFAULT_PARTS, DEFAULT_THRESHOLD, shard

logger = logging.getLogger(__name__)

SHARD_PREFIX = "shard_"


def shard_file(
    secret_path: str | Path,
    shards_dir: str | Path,
    parts: int = DEFAULT_PARTS,
    threshold: int = DEFAULT_THRESHOLD,
    rng: RandomSource | None = None,
) -> list[Path]:
    """
    Split a secret file into share files.

    Args:
        secret_path: File holding the secret.
        shards_dir: Directory for the share files. Created if missing; must
            not already hold share files from another split.
        parts: Total shares to generate (N).
        threshold: Minimum shares needed to reconstruct (K).
        rng: Randomness capability. Defaults to the system CSPRNG.

    Returns:
        Paths of the written share files, shard_0 .. shard_<N-1>.

    Raises:
        FileExistsError: If shards_dir already contains share files.
    """
    secret_path = Path(secret_path)
    shards_dir = Path(shards_dir)

    # Shares from two splits in one directory would combine into garbage
    existing = _share_files(shards_dir) if shards_dir.is_dir() else []
    if existing:
        raise FileExistsError(
            f"{shards_dir} already contains {len(existing)} share files; "
            "use an empty directory for each split"
        )

    secret = secret_path.read_bytes()
    blobs = shard(secret, parts, threshold, rng)

    shards_dir.mkdir(parents=True, exist_ok=True)
    paths = []
    for index, blob in enumerate(blobs):
        path = shards_dir / f"{SHARD_PREFIX}{index}"
        with path.open("xb") as f:
            f.write(blob)
        paths.append(path)

    logger.info(
        "Wrote %d shares of %s to %s (threshold %d)",
        len(paths), secret_path, shards_dir, threshold,
    )
    return paths


def _share_files(shards_dir: Path) -> list[Path]:
    return sorted(p for p in shards_dir.glob(f"{SHARD_PREFIX}*") if p.is_file())


def read_shares(shards_dir: str | Path) -> list[bytes]:
    """Read every shard_* file in shards_dir as a share blob."""
    shards_dir = Path(shards_dir)
    if not shards_dir.is_dir():
        raise FileNotFoundError(f"Shards directory not found: {shards_dir}")

    blobs = []
    for path in _share_files(shards_dir):
        logger.debug("Reading share %s", path)
        blobs.append(path.read_bytes())
    return blobs


def combine_dir(shards_dir: str | Path, output_path: str | Path) -> Path:
    """
    Combine the share files in shards_dir and write the secret.

    Returns:
        The path the recovered secret was written to.
    """
    output_path = Path(output_path)
    blobs = read_shares(shards_dir)
    secret = combine(blobs)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(secret)
    logger.info("Recovered %d-byte secret from %d shares into %s", len(secret), len(blobs), output_path)
    return output_path
