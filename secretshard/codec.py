"""
Share Codec
The on-disk form of a share.

A share blob is a 7-byte header followed by the y-values:

    offset  size  field
    0       1     format version (0x01)
    1       1     threshold K (1-255)
    2       1     x-coordinate (1-255, never 0)
    3       4     secret length L, big-endian
    7       L     y-values, one per secret byte

The header makes every blob self-describing: combine needs nothing but the
blobs themselves. This layout is the only wire format in the package, so
shares written today must stay decodable; bump FORMAT_VERSION for any change.

Decoding checks one share's structure only. Whether a set of shares belongs
together is decided by the combining engine.
"""

from dataclasses import dataclass

from secretshard.errors import FormatError

FORMAT_VERSION = 1
HEADER_SIZE = 7
MAX_COORDINATE = 255
MAX_SECRET_LENGTH = 0xFFFFFFFF


@dataclass(frozen=True)
class Share:
    """A single share of a split secret."""
    x: int          # The x-coordinate (1-255, never 0)
    threshold: int  # K, how many shares needed to reconstruct
    values: bytes   # One y-value per secret byte

    def __len__(self) -> int:
        return len(self.values)

    def point(self, position: int) -> tuple[int, int]:
        """The (x, y) point this share holds for one secret byte."""
        return self.x, self.values[position]

    def to_bytes(self) -> bytes:
        """Serialize to the binary blob layout."""
        return encode(self)

    @classmethod
    def from_bytes(cls, blob: bytes) -> "Share":
        """Deserialize from the binary blob layout."""
        return decode(blob)

    def to_hex(self) -> str:
        """Serialize to a portable hex string."""
        return encode(self).hex()

    @classmethod
    def from_hex(cls, hex_str: str) -> "Share":
        """Deserialize from hex string."""
        try:
            blob = bytes.fromhex(hex_str.strip())
        except ValueError as e:
            raise FormatError(f"Share is not valid hex: {e}") from e
        return decode(blob)


def _check_structure(x: int, threshold: int, length: int) -> None:
    if threshold == 0:
        raise FormatError("Share threshold must not be 0")
    if not 0 < threshold <= MAX_COORDINATE:
        raise FormatError(f"Share threshold out of range: {threshold}")
    if x == 0:
        raise FormatError("Share x-coordinate must not be 0")
    if not 0 < x <= MAX_COORDINATE:
        raise FormatError(f"Share x-coordinate out of range: {x}")
    if length == 0:
        raise FormatError("Share carries no y-values")
    if length > MAX_SECRET_LENGTH:
        raise FormatError(f"Share too long to encode: {length} bytes")


def encode(share: Share) -> bytes:
    """
    Encode a share as an opaque blob.

    Raises:
        FormatError: If the share itself is not structurally valid.
    """
    values = bytes(share.values)
    _check_structure(share.x, share.threshold, len(values))

    header = (
        FORMAT_VERSION.to_bytes(1, "big")
        + share.threshold.to_bytes(1, "big")
        + share.x.to_bytes(1, "big")
        + len(values).to_bytes(4, "big")
    )
    return header + values


def decode(blob: bytes) -> Share:
    """
    Decode a blob produced by encode().

    Raises:
        FormatError: On a truncated or over-long blob, an unknown version,
            a zero threshold or a zero x-coordinate.
    """
    blob = bytes(blob)
    if len(blob) < HEADER_SIZE:
        raise FormatError(
            f"Share truncated: {len(blob)} bytes, header needs {HEADER_SIZE}"
        )

    version = blob[0]
    if version != FORMAT_VERSION:
        raise FormatError(f"Unsupported share format version: {version}")

    threshold = blob[1]
    x = blob[2]
    length = int.from_bytes(blob[3:HEADER_SIZE], "big")
    _check_structure(x, threshold, length)

    values = blob[HEADER_SIZE:]
    if len(values) < length:
        raise FormatError(
            f"Share truncated: header declares {length} y-values, found {len(values)}"
        )
    if len(values) > length:
        raise FormatError(
            f"Share has {len(values) - length} unexpected trailing bytes"
        )

    return Share(x=x, threshold=threshold, values=values)
