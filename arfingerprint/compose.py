"""Canonical token stream for one parsed object.

The fingerprint of an object is built from three passes, always in this
order:

1. allow-listed sections in header order: the section name followed by its
   raw bytes, or ``BSS: <size>`` for zero-fill sections;
2. relocations, one group per relocation section in header order, each
   group sorted by target offset;
3. every defined symbol, sorted by name.

Sorting relocations and symbols removes sensitivity to table layout, and the
section allow-list drops metadata (debug info, build ids, comments) that does
not change program behaviour.
"""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple

from .digest import DigestAccumulator
from .errors import RelocationAddendError, UnknownSectionKindError
from .model import ParsedObject, Relocation, SectionKind, Symbol
from .reloc_types import relocation_type_name

DEFAULT_SECTIONS: Tuple[str, ...] = (".text", ".data", ".bss", ".rodata")


def section_pass(
    obj: ParsedObject,
    accumulator: DigestAccumulator,
    sections: Iterable[str] = DEFAULT_SECTIONS,
) -> None:
    allowed = frozenset(sections)
    for section in obj.sections:
        if section.name not in allowed:
            continue
        if section.kind is SectionKind.CONTENT:
            accumulator.append_text(section.name)
            accumulator.append_bytes(obj.section_bytes(section))
        elif section.kind is SectionKind.ZERO_FILL:
            accumulator.append_text(f"BSS: {section.declared_size}")
        else:
            raise UnknownSectionKindError(
                f"Section {section.name} has unsupported type {section.type_name or section.kind.value}"
            )


def _symbol_name(obj: ParsedObject, reloc: Relocation) -> str:
    try:
        return obj.symbols[reloc.symbol_index].name
    except IndexError:
        raise IndexError(
            f"Relocation at {reloc.offset} references symbol {reloc.symbol_index}, "
            f"table has {len(obj.symbols)}"
        ) from None


def relocation_pass(obj: ParsedObject, accumulator: DigestAccumulator) -> None:
    for group in obj.relocations:
        for reloc in sorted(group.relocations, key=lambda r: r.offset):
            if reloc.addend:
                raise RelocationAddendError(
                    f"Relocation at {reloc.offset} in {group.section} has addend {reloc.addend}"
                )
            type_name = relocation_type_name(obj.machine, reloc.type_code)
            accumulator.append_text(f"{type_name} at {reloc.offset}->{_symbol_name(obj, reloc)}")


def sorted_symbols(symbols: Sequence[Symbol]) -> list[Symbol]:
    """Order symbols by name, breaking ties on value then size."""
    return sorted(symbols, key=lambda s: (s.name, s.value, s.size))


def symbol_pass(obj: ParsedObject, accumulator: DigestAccumulator) -> None:
    for sym in sorted_symbols(obj.symbols):
        if sym.is_imported:
            continue
        accumulator.append_text(f"{sym.name}: off {sym.value} size {sym.size}")


def compose(
    obj: ParsedObject,
    accumulator: DigestAccumulator,
    sections: Iterable[str] = DEFAULT_SECTIONS,
) -> str:
    """Feed the canonical token stream of ``obj`` and return the digest."""

    section_pass(obj, accumulator, sections)
    relocation_pass(obj, accumulator)
    symbol_pass(obj, accumulator)
    return accumulator.finalize()


__all__ = [
    "DEFAULT_SECTIONS",
    "compose",
    "relocation_pass",
    "section_pass",
    "sorted_symbols",
    "symbol_pass",
]
