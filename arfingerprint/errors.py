"""Exception types raised while fingerprinting archives."""

from __future__ import annotations


class FingerprintError(RuntimeError):
    """Base class for every error raised by arfingerprint."""


class NotAnArchiveError(FingerprintError):
    """Raised when the input bytes are not an ``ar`` container."""


class ConfigError(FingerprintError):
    """Raised when a configuration value is malformed."""


class InvariantViolation(FingerprintError):
    """An object falls outside the model the fingerprint assumes.

    These abort the whole run; they are never isolated to one member.
    """


class UnknownSectionKindError(InvariantViolation):
    """An allow-listed section is neither content-bearing nor zero-fill."""


class RelocationAddendError(InvariantViolation):
    """A relocation carries a nonzero addend."""


class MisalignedPayloadError(InvariantViolation):
    """A raw-dump byte payload is not a multiple of four bytes long."""


__all__ = [
    "ConfigError",
    "FingerprintError",
    "InvariantViolation",
    "MisalignedPayloadError",
    "NotAnArchiveError",
    "RelocationAddendError",
    "UnknownSectionKindError",
]
