"""Enumerate the members of an ``ar`` archive in a layout-independent order."""

from __future__ import annotations

import io
import logging
from typing import Dict, List

import arpy

from .errors import NotAnArchiveError
from .model import Member

log = logging.getLogger(__name__)

_READ_CHUNK = 32768


def _member_name(raw: bytes) -> str:
    # GNU ar terminates short names with "/", arpy may leave it in place
    return raw.strip().rstrip(b"/").decode("utf-8", errors="surrogateescape")


def _read_payload(arfile: arpy.ArchiveFileData) -> bytes:
    chunks: List[bytes] = []
    while True:
        buf = arfile.read(_READ_CHUNK)
        if not buf:
            break
        chunks.append(buf)
    return b"".join(chunks)


def read_members(data: bytes) -> List[Member]:
    """Return every regular member of the archive in ``data``, sorted by name.

    Symbol indexes and long-name tables are bookkeeping, not members. A name
    that occurs twice keeps its last payload. Raises ``NotAnArchiveError``
    when ``data`` is not a well-formed archive.
    """
    payloads: Dict[str, bytes] = {}
    try:
        archive = arpy.Archive(fileobj=io.BytesIO(data))
        for arfile in archive:
            name = _member_name(arfile.header.name)
            payloads[name] = _read_payload(arfile)
            log.debug("extracted %s (%d bytes)", name, len(payloads[name]))
    except (arpy.ArchiveFormatError, arpy.ArchiveAccessError, ValueError) as exc:
        raise NotAnArchiveError(f"Expected archive file: {exc}") from exc
    return [Member(name=name, data=payloads[name]) for name in sorted(payloads)]


__all__ = ["read_members"]
