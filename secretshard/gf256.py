"""
GF(2^8) Arithmetic
The 256-element field every secret byte lives in.

Each field element is exactly one byte, so a secret needs no conversion:
byte i of the secret is the constant term of polynomial i. Addition is XOR
(and therefore also subtraction); multiplication is carry-less and reduced
modulo the AES polynomial x^8 + x^4 + x^3 + x + 1.
"""

from secretshard.errors import DomainError

# x^8 + x^4 + x^3 + x + 1, the AES (Rijndael) reduction polynomial
REDUCING_POLYNOMIAL = 0x11B
ORDER = 256


def is_element(a) -> bool:
    """True if a is an int in 0..255 (bool excluded)."""
    return isinstance(a, int) and not isinstance(a, bool) and 0 <= a < ORDER


def add(a: int, b: int) -> int:
    """Add two field elements. Identical to subtraction in GF(2^8)."""
    return a ^ b


# Subtraction is addition in characteristic 2
sub = add


# Precomputed exp/log tables over generator 3. _EXP is doubled in length so
# _LOG[a] + _LOG[b] never needs a modulo.
_EXP = [0] * 510
_LOG = [0] * ORDER


def _mul_slow(a: int, b: int) -> int:
    """Multiply two field elements without tables (Russian peasant, mod 0x11B)."""
    result = 0
    while b:
        if b & 1:
            result ^= a
        a <<= 1
        if a & 0x100:
            a ^= REDUCING_POLYNOMIAL
        b >>= 1
    return result


def _init_tables() -> None:
    x = 1
    for i in range(255):
        _EXP[i] = x
        _LOG[x] = i
        x = _mul_slow(x, 3)
    for i in range(255, 510):
        _EXP[i] = _EXP[i - 255]


_init_tables()


def mul(a: int, b: int) -> int:
    """Multiply two field elements using the log/exp tables."""
    if a == 0 or b == 0:
        return 0
    return _EXP[_LOG[a] + _LOG[b]]


def power(a: int, n: int) -> int:
    """Raise a to the non-negative integer power n."""
    if n == 0:
        return 1
    if a == 0:
        return 0
    return _EXP[(_LOG[a] * n) % 255]


def inverse(a: int) -> int:
    """
    Multiplicative inverse of a.

    The multiplicative group has order 255, so a^255 = 1 and
    a^-1 = a^254 = 3^(255 - log a).

    Raises:
        DomainError: If a is 0.
    """
    if a == 0:
        raise DomainError("0 has no multiplicative inverse in GF(256)")
    return _EXP[255 - _LOG[a]]


def div(a: int, b: int) -> int:
    """Divide a by b. Raises DomainError if b is 0."""
    if b == 0:
        raise DomainError("Division by zero in GF(256)")
    if a == 0:
        return 0
    return _EXP[_LOG[a] + 255 - _LOG[b]]
