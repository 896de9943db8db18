"""Relocation type names keyed by ELF machine."""

from __future__ import annotations

from functools import lru_cache
from typing import Dict

from elftools.elf import enums

# machine tag -> name of the pyelftools enum holding its relocation types
_MACHINE_TABLES: Dict[str, str] = {
    "EM_386": "ENUM_RELOC_TYPE_i386",
    "EM_X86_64": "ENUM_RELOC_TYPE_x64",
    "EM_MIPS": "ENUM_RELOC_TYPE_MIPS",
    "EM_ARM": "ENUM_RELOC_TYPE_ARM",
    "EM_AARCH64": "ENUM_RELOC_TYPE_AARCH64",
    "EM_PPC64": "ENUM_RELOC_TYPE_PPC64",
    "EM_BPF": "ENUM_RELOC_TYPE_BPF",
    "EM_LOONGARCH": "ENUM_RELOC_TYPE_LOONGARCH",
}


@lru_cache(maxsize=None)
def _names_for(machine: str) -> Dict[int, str]:
    table = getattr(enums, _MACHINE_TABLES.get(machine, ""), None) or {}
    names: Dict[int, str] = {}
    for name, code in table.items():
        if name.startswith("_"):
            continue
        names.setdefault(code, name)  # first spelling wins over aliases
    return names


def relocation_type_name(machine: str, type_code: int) -> str:
    """Return the symbolic name of ``type_code`` for ``machine``.

    Unknown codes render as ``R_<machine>_<code>`` so that the token stays
    deterministic.
    """
    machine = str(machine)
    name = _names_for(machine).get(type_code)
    if name is not None:
        return name
    arch = machine[3:] if machine.startswith("EM_") else machine
    return f"R_{arch}_{type_code}"


__all__ = ["relocation_type_name"]
