"""Neutral tables describing one archive member and its parsed object."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class SectionKind(Enum):
    CONTENT = "content"
    ZERO_FILL = "zero-fill"
    OTHER = "other"


@dataclass(frozen=True)
class Member:
    """A named sub-file packed inside an archive."""

    name: str
    data: bytes = field(repr=False)


@dataclass(frozen=True)
class Section:
    """A section header: its kind and the byte range it covers."""

    name: str
    kind: SectionKind
    offset: int
    declared_size: int
    type_name: Optional[str] = None

    @property
    def end(self) -> int:
        return self.offset + self.declared_size


@dataclass(frozen=True)
class Symbol:
    name: str
    value: int
    size: int
    is_imported: bool = False


@dataclass(frozen=True)
class Relocation:
    """A relocation entry; ``addend`` is ``None`` for REL-style tables."""

    offset: int
    symbol_index: int
    type_code: int
    addend: Optional[int] = None


@dataclass(frozen=True)
class RelocationGroup:
    """The relocations that patch one section, in table order."""

    section: str
    relocations: Tuple[Relocation, ...] = ()


@dataclass(frozen=True)
class ParsedObject:
    """Read-only view of one object file.

    ``symbols`` keeps symbol-table order so that ``Relocation.symbol_index``
    addresses it directly. ``data`` holds the member bytes that section
    byte ranges point into.
    """

    sections: Tuple[Section, ...]
    symbols: Tuple[Symbol, ...]
    relocations: Tuple[RelocationGroup, ...]
    data: bytes = field(repr=False)
    machine: str = "EM_NONE"

    def section_bytes(self, section: Section) -> bytes:
        return self.data[section.offset:section.end]


__all__ = [
    "Member",
    "ParsedObject",
    "Relocation",
    "RelocationGroup",
    "Section",
    "SectionKind",
    "Symbol",
]
