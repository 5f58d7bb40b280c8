"""
Errors
Every failure the package can raise, grouped by kind.

All of them derive from ValueError: a bad secret, bad parameters and bad
shares are all bad input. The CLI maps each kind to its own exit code.
"""

from enum import Enum


class SecretShardError(ValueError):
    """Base class for all secretshard errors."""


class ConfigurationError(SecretShardError):
    """Invalid parts/threshold parameters."""

    def __init__(self, parameter: str, message: str):
        super().__init__(message)
        self.parameter = parameter


class EmptyInputError(SecretShardError):
    """The secret to split has no bytes."""


class FormatError(SecretShardError):
    """A share blob is truncated or malformed."""


class ReconstructionFailure(Enum):
    """Which cross-share invariant was broken during combine."""
    MISMATCHED_THRESHOLD = "mismatched-threshold"
    DUPLICATE_COORDINATE = "duplicate-coordinate"
    INSUFFICIENT_SHARES = "insufficient-shares"
    MISMATCHED_LENGTH = "mismatched-length"


class ReconstructionError(SecretShardError):
    """The supplied shares cannot be combined."""

    def __init__(self, reason: ReconstructionFailure, message: str):
        super().__init__(message)
        self.reason = reason


class DomainError(SecretShardError):
    """
    Arithmetic outside the field's domain (inverse of 0, duplicate x in
    interpolation). Combine checks its inputs first, so reaching this from
    combine means an internal invariant broke.
    """
