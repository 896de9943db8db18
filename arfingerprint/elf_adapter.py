"""Turn the bytes of one archive member into a ``ParsedObject``.

Built on pyelftools. Only the tables the fingerprint needs are read: the
section headers, the relocation sections and ``.symtab``.
"""

from __future__ import annotations

import io
import logging
from typing import List, Optional

from elftools.common.exceptions import ELFError
from elftools.construct.core import ConstructError
from elftools.elf.elffile import ELFFile
from elftools.elf.relocation import RelocationSection
from elftools.elf.sections import SymbolTableSection

from .model import ParsedObject, Relocation, RelocationGroup, Section, SectionKind, Symbol

log = logging.getLogger(__name__)

ELF_MAGIC = b"\x7fELF"

_SECTION_KINDS = {
    "SHT_PROGBITS": SectionKind.CONTENT,
    "SHT_NOBITS": SectionKind.ZERO_FILL,
}

_EXTERNAL_BINDINGS = {"STB_GLOBAL", "STB_WEAK"}


def _sections(elf: ELFFile) -> List[Section]:
    sections: List[Section] = []
    for sec in elf.iter_sections():
        sh_type = sec["sh_type"]
        sections.append(
            Section(
                name=sec.name,
                kind=_SECTION_KINDS.get(sh_type, SectionKind.OTHER),
                offset=sec["sh_offset"],
                declared_size=sec["sh_size"],
                type_name=str(sh_type),
            )
        )
    return sections


def _symbols(elf: ELFFile) -> List[Symbol]:
    symtab = elf.get_section_by_name(".symtab")
    if not isinstance(symtab, SymbolTableSection):
        return []
    symbols: List[Symbol] = []
    for sym in symtab.iter_symbols():
        imported = (
            sym["st_shndx"] == "SHN_UNDEF"
            and sym["st_info"]["bind"] in _EXTERNAL_BINDINGS
        )
        symbols.append(
            Symbol(name=sym.name, value=sym["st_value"], size=sym["st_size"], is_imported=imported)
        )
    return symbols


def _relocations(elf: ELFFile) -> List[RelocationGroup]:
    groups: List[RelocationGroup] = []
    for sec in elf.iter_sections():
        if not isinstance(sec, RelocationSection):
            continue
        target = elf.get_section(sec["sh_info"]).name if sec["sh_info"] else ""
        relocs = tuple(
            Relocation(
                offset=rel["r_offset"],
                symbol_index=rel["r_info_sym"],
                type_code=rel["r_info_type"],
                addend=rel["r_addend"] if rel.is_RELA() else None,
            )
            for rel in sec.iter_relocations()
        )
        groups.append(RelocationGroup(section=target, relocations=relocs))
    return groups


def parse_object(data: bytes) -> Optional[ParsedObject]:
    """Parse ``data`` as an ELF object, or return ``None`` if it is not one."""

    if not data.startswith(ELF_MAGIC):
        return None
    try:
        elf = ELFFile(io.BytesIO(data))
        return ParsedObject(
            sections=tuple(_sections(elf)),
            symbols=tuple(_symbols(elf)),
            relocations=tuple(_relocations(elf)),
            data=data,
            machine=str(elf["e_machine"]),
        )
    except (ELFError, ConstructError) as exc:
        log.debug("not a usable ELF object: %s", exc)
        return None


__all__ = ["ELF_MAGIC", "parse_object"]
