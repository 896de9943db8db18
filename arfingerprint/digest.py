"""Digest accumulators that fold a token stream into a fingerprint string."""

from __future__ import annotations

import hashlib
from typing import List

from .errors import ConfigError, MisalignedPayloadError

DEFAULT_ALGORITHM = "sha1"

_GROUP_BYTES = 4
_GROUPS_PER_LINE = 8


class DigestAccumulator:
    """Sink for an ordered stream of byte and text units."""

    def reset(self) -> None:
        raise NotImplementedError

    def append_bytes(self, blob: bytes) -> None:
        raise NotImplementedError

    def append_text(self, text: str) -> None:
        raise NotImplementedError

    def finalize(self) -> str:
        raise NotImplementedError


class HashAccumulator(DigestAccumulator):
    """Feed every unit into a running ``hashlib`` object."""

    def __init__(self, algorithm: str = DEFAULT_ALGORITHM) -> None:
        self.algorithm = check_algorithm(algorithm)
        self._hash = hashlib.new(self.algorithm)

    def reset(self) -> None:
        self._hash = hashlib.new(self.algorithm)

    def append_bytes(self, blob: bytes) -> None:
        self._hash.update(blob)

    def append_text(self, text: str) -> None:
        self._hash.update(text.encode("utf-8"))

    def finalize(self) -> str:
        return self._hash.hexdigest()


class RawAccumulator(DigestAccumulator):
    """Keep every unit verbatim so two runs can be diffed line by line."""

    def __init__(self) -> None:
        self.entries: List[str] = []

    def reset(self) -> None:
        self.entries.clear()

    def append_bytes(self, blob: bytes) -> None:
        if len(blob) % _GROUP_BYTES:
            raise MisalignedPayloadError(
                f"raw dump needs {_GROUP_BYTES}-byte aligned payloads, got {len(blob)} bytes"
            )
        groups = [blob[i:i + _GROUP_BYTES].hex().upper() for i in range(0, len(blob), _GROUP_BYTES)]
        lines = [
            " ".join(groups[i:i + _GROUPS_PER_LINE])
            for i in range(0, len(groups), _GROUPS_PER_LINE)
        ]
        self.entries.append("\n".join(lines))

    def append_text(self, text: str) -> None:
        self.entries.append(text)

    def finalize(self) -> str:
        return "\n".join(self.entries)


def check_algorithm(algorithm: str) -> str:
    """Return the normalised algorithm name or raise ``ConfigError``."""
    if not isinstance(algorithm, str):
        raise ConfigError(f"Hash algorithm must be a name, got {algorithm!r}")
    name = algorithm.lower()
    if name not in hashlib.algorithms_available:
        raise ConfigError(f"Unknown hash algorithm: {algorithm}")
    if name.startswith("shake_"):
        # variable-length output has no fixed-width rendering
        raise ConfigError(f"Hash algorithm must have a fixed digest size: {algorithm}")
    return name


def make_accumulator(raw: bool = False, algorithm: str = DEFAULT_ALGORITHM) -> DigestAccumulator:
    """Build a fresh accumulator for the selected backend."""
    if raw:
        return RawAccumulator()
    return HashAccumulator(algorithm)


__all__ = [
    "DEFAULT_ALGORITHM",
    "DigestAccumulator",
    "HashAccumulator",
    "RawAccumulator",
    "check_algorithm",
    "make_accumulator",
]
