"""Primitives - Field codec and binary container reading."""

from r1cs.primitives.bin_reader import (
    CONSTRAINTS_SECTION,
    HEADER_SECTION,
    R1CS_MAGIC,
    R1CS_VERSION,
    WIRE2LABEL_SECTION,
    BinFileReader,
    SectionDescriptor,
    find_section,
    scan_sections,
)
from r1cs.primitives.field import (
    BLS12_381_R,
    BN254_R,
    DEFAULT_FIELD,
    FR_BLS12_381,
    FR_BN254,
    KNOWN_FIELDS,
    decode_field_element,
    minimal_le_bytes,
    prime_from_bytes,
    resolve_field,
)

__all__ = [
    # Field
    "FR_BLS12_381",
    "FR_BN254",
    "BLS12_381_R",
    "BN254_R",
    "DEFAULT_FIELD",
    "KNOWN_FIELDS",
    "decode_field_element",
    "minimal_le_bytes",
    "prime_from_bytes",
    "resolve_field",
    # Container
    "BinFileReader",
    "SectionDescriptor",
    "scan_sections",
    "find_section",
    "R1CS_MAGIC",
    "R1CS_VERSION",
    "HEADER_SECTION",
    "CONSTRAINTS_SECTION",
    "WIRE2LABEL_SECTION",
]
