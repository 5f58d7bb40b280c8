"""
Tests for the share file layer.
"""

import os

import pytest

from secretshard.errors import ReconstructionError
from secretshard.files import combine_dir, read_shares, shard_file


def test_shard_and_combine_files(tmp_path):
    secret = os.urandom(200)
    secret_path = tmp_path / "secret.bin"
    secret_path.write_bytes(secret)
    shards_dir = tmp_path / "nested" / "shards"

    paths = shard_file(secret_path, shards_dir, parts=5, threshold=3)

    assert shards_dir.is_dir()
    assert [p.name for p in paths] == [f"shard_{i}" for i in range(5)]
    assert all(p.exists() for p in paths)

    # Lose two custodians
    paths[0].unlink()
    paths[3].unlink()

    output = tmp_path / "out" / "recovered.bin"
    assert combine_dir(shards_dir, output) == output
    assert output.read_bytes() == secret


def test_combine_ignores_subdirectories(tmp_path):
    secret_path = tmp_path / "secret.txt"
    secret_path.write_bytes(b"hello")
    shards_dir = tmp_path / "shards"
    shard_file(secret_path, shards_dir, parts=3, threshold=2)
    (shards_dir / "archive").mkdir()

    assert len(read_shares(shards_dir)) == 3
    combine_dir(shards_dir, tmp_path / "recovered.txt")
    assert (tmp_path / "recovered.txt").read_bytes() == b"hello"


def test_too_few_share_files(tmp_path):
    secret_path = tmp_path / "secret.txt"
    secret_path.write_bytes(b"hello")
    shards_dir = tmp_path / "shards"
    paths = shard_file(secret_path, shards_dir, parts=3, threshold=3)
    paths[1].unlink()

    with pytest.raises(ReconstructionError):
        combine_dir(shards_dir, tmp_path / "recovered.txt")
    assert not (tmp_path / "recovered.txt").exists()


def test_missing_paths(tmp_path):
    with pytest.raises(FileNotFoundError):
        shard_file(tmp_path / "nope", tmp_path / "shards")
    with pytest.raises(FileNotFoundError):
        combine_dir(tmp_path / "nope", tmp_path / "out")


def test_resharding_into_used_directory_refused(tmp_path):
    """A second split must not land beside the first one's share files."""
    secret_path = tmp_path / "secret.bin"
    secret_path.write_bytes(os.urandom(16))
    shards_dir = tmp_path / "shards"

    shard_file(secret_path, shards_dir, parts=12, threshold=3)
    before = {p.name: p.read_bytes() for p in shards_dir.iterdir()}

    with pytest.raises(FileExistsError):
        shard_file(secret_path, shards_dir, parts=3, threshold=3)

    # The first split is untouched and still combines
    assert {p.name: p.read_bytes() for p in shards_dir.iterdir()} == before
    combine_dir(shards_dir, tmp_path / "recovered.bin")
    assert (tmp_path / "recovered.bin").read_bytes() == secret_path.read_bytes()


def test_read_shares_only_reads_share_files(tmp_path):
    secret_path = tmp_path / "secret.txt"
    secret_path.write_bytes(b"hello")
    shards_dir = tmp_path / "shards"
    shard_file(secret_path, shards_dir, parts=3, threshold=2)
    (shards_dir / "README.txt").write_text("three custodians")
    (shards_dir / ".DS_Store").write_bytes(b"\x00\x01")

    assert len(read_shares(shards_dir)) == 3
    combine_dir(shards_dir, tmp_path / "recovered.txt")
    assert (tmp_path / "recovered.txt").read_bytes() == b"hello"
