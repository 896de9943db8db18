"""Content-derived fingerprints for the object files inside static archives."""

from .compose import DEFAULT_SECTIONS, compose
from .digest import HashAccumulator, RawAccumulator, make_accumulator
from .errors import FingerprintError, InvariantViolation, NotAnArchiveError
from .pipeline import FingerprintRun, MemberFingerprint, fingerprint_archive

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_SECTIONS",
    "FingerprintError",
    "FingerprintRun",
    "HashAccumulator",
    "InvariantViolation",
    "MemberFingerprint",
    "NotAnArchiveError",
    "RawAccumulator",
    "compose",
    "fingerprint_archive",
    "make_accumulator",
]
