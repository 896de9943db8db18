from arfingerprint.reloc_types import relocation_type_name


def test_known_machine_names() -> None:
    assert relocation_type_name("EM_X86_64", 2) == "R_X86_64_PC32"


def test_unknown_codes_and_machines_fall_back() -> None:
    assert relocation_type_name("EM_X86_64", 9999) == "R_X86_64_9999"
    assert relocation_type_name("EM_VAX", 3) == "R_VAX_3"
    assert relocation_type_name(30583, 2) == "R_30583_2"
