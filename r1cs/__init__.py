"""
R1CS binary reader

Decodes Rank-1 Constraint System containers (.r1cs) as produced by circom and
compatible toolchains into a read-only document.

This package provides:
- Section table scanning (sections may appear in any order)
- Header and constraint decoding
- Coefficient normalization into prime fields (via galois)
- Progress observers and a text dump

Usage:
    from r1cs import read_r1cs

    circuit = read_r1cs("circuit.r1cs")
    for constraint in circuit.constraints():
        print(constraint)
"""

from r1cs.config import ParserConfig
from r1cs.constraints import (
    LinearCombination,
    R1CSConstraint,
    Term,
    decode_constraint,
    decode_constraints,
    decode_linear_combination,
)
from r1cs.document import R1CS, format_info
from r1cs.errors import (
    BadMagicError,
    FieldDecodeError,
    MissingConstraintsSectionError,
    MissingHeaderSectionError,
    R1CSIOError,
    R1CSParseError,
    SectionSizeError,
    TruncatedFileError,
    TruncatedSectionError,
    UnsupportedVersionError,
    WireIndexError,
)
from r1cs.header import R1CSHeader, decode_header
from r1cs.observer import ParseObserver, PrintObserver, RecordingObserver
from r1cs.parser import parse_r1cs, read_r1cs
from r1cs.primitives import (
    FR_BLS12_381,
    FR_BN254,
    BinFileReader,
    SectionDescriptor,
    decode_field_element,
    resolve_field,
    scan_sections,
)

__version__ = "0.1.0"
__all__ = [
    # Parsing
    "read_r1cs",
    "parse_r1cs",
    "ParserConfig",
    # Document
    "R1CS",
    "R1CSHeader",
    "R1CSConstraint",
    "LinearCombination",
    "Term",
    "format_info",
    # Decoders
    "scan_sections",
    "decode_header",
    "decode_linear_combination",
    "decode_constraint",
    "decode_constraints",
    "decode_field_element",
    "resolve_field",
    "BinFileReader",
    "SectionDescriptor",
    # Fields
    "FR_BLS12_381",
    "FR_BN254",
    # Observers
    "ParseObserver",
    "PrintObserver",
    "RecordingObserver",
    # Errors
    "R1CSParseError",
    "R1CSIOError",
    "BadMagicError",
    "UnsupportedVersionError",
    "MissingHeaderSectionError",
    "MissingConstraintsSectionError",
    "FieldDecodeError",
    "TruncatedFileError",
    "TruncatedSectionError",
    "SectionSizeError",
    "WireIndexError",
]
