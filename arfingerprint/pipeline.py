"""Fingerprint every object member of an archive."""

from __future__ import annotations

import hashlib
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .audit import AuditLogger
from .archive import read_members
from .compose import DEFAULT_SECTIONS, compose
from .digest import DEFAULT_ALGORITHM, make_accumulator
from .elf_adapter import parse_object
from .errors import NotAnArchiveError
from .model import Member

NOT_AN_ARCHIVE_MESSAGE = "Expected archive file."


@dataclass
class MemberFingerprint:
    name: str
    digest: str

    def render(self) -> str:
        return f"{self.name}\n{self.digest}"

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "digest": self.digest}


@dataclass
class FingerprintRun:
    """Outcome of fingerprinting one archive."""

    is_archive: bool
    fingerprints: List[MemberFingerprint] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    raw: bool = False
    algorithm: str = DEFAULT_ALGORITHM
    sections: Tuple[str, ...] = DEFAULT_SECTIONS
    archive_sha256: Optional[str] = None

    @property
    def backend(self) -> str:
        return "raw" if self.raw else "hash"

    @property
    def digests(self) -> Dict[str, str]:
        return {fp.name: fp.digest for fp in self.fingerprints}

    def render(self) -> str:
        """Text written to stdout for this run."""
        if not self.is_archive:
            return NOT_AN_ARCHIVE_MESSAGE
        return "\n".join(fp.render() for fp in self.fingerprints)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_archive": self.is_archive,
            "backend": self.backend,
            "algorithm": None if self.raw else self.algorithm,
            "sections": list(self.sections),
            "archive_sha256": self.archive_sha256,
            "members": [fp.to_dict() for fp in self.fingerprints],
            "skipped": list(self.skipped),
        }


def fingerprint_member(
    member: Member,
    *,
    raw: bool = False,
    algorithm: str = DEFAULT_ALGORITHM,
    sections: Iterable[str] = DEFAULT_SECTIONS,
) -> Optional[MemberFingerprint]:
    """Fingerprint one member, or return ``None`` when it is not an object."""

    obj = parse_object(member.data)
    if obj is None:
        return None
    accumulator = make_accumulator(raw, algorithm)
    return MemberFingerprint(name=member.name, digest=compose(obj, accumulator, sections))


def _fingerprint_all(
    members: List[Member],
    workers: int,
    **options: Any,
) -> List[Optional[MemberFingerprint]]:
    task = partial(fingerprint_member, **options)
    if workers <= 1 or len(members) <= 1:
        return [task(member) for member in members]
    # map() keeps input order and re-raises the first task failure
    with ProcessPoolExecutor(max_workers=min(workers, len(members))) as ex:
        return list(ex.map(task, members))


def fingerprint_archive(
    data: bytes,
    *,
    raw: bool = False,
    algorithm: str = DEFAULT_ALGORITHM,
    sections: Iterable[str] = DEFAULT_SECTIONS,
    workers: int = 1,
    audit: Optional[AuditLogger] = None,
) -> FingerprintRun:
    """Fingerprint every object member of the archive held in ``data``.

    Members are visited in name order. Invariant violations raised while
    composing a member propagate and abort the whole run.
    """

    audit = audit or AuditLogger()
    sections = tuple(sections)
    run = FingerprintRun(
        is_archive=True,
        raw=raw,
        algorithm=algorithm,
        sections=sections,
        archive_sha256=hashlib.sha256(data).hexdigest(),
    )

    try:
        members = read_members(data)
    except NotAnArchiveError as exc:
        audit.log(level="WARN", event="not_an_archive", message=str(exc))
        run.is_archive = False
        return run
    audit.log(event="archive_opened", members=len(members))

    results = _fingerprint_all(members, workers, raw=raw, algorithm=algorithm, sections=sections)
    for member, result in zip(members, results):
        if result is None:
            run.skipped.append(member.name)
            audit.log(event="member_skipped", member=member.name)
            continue
        run.fingerprints.append(result)
        # raw dumps can be large, only hash digests go to the audit trail
        audit.log(
            event="member_fingerprinted",
            member=member.name,
            digest=None if raw else result.digest,
        )
    return run


__all__ = [
    "NOT_AN_ARCHIVE_MESSAGE",
    "FingerprintRun",
    "MemberFingerprint",
    "fingerprint_archive",
    "fingerprint_member",
]
