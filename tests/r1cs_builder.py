"""Build R1CS byte images in memory for tests.

Coefficients may be given as ints (encoded little-endian to field_size bytes)
or as raw bytes (written verbatim, for padding and malformed cases).
"""

import struct
from typing import Union

from r1cs.primitives.field import BLS12_381_R

FIELD_SIZE = 32
ONE = (1).to_bytes(FIELD_SIZE, 'little')

Coefficient = Union[int, bytes]


def u32(v: int) -> bytes:
    return struct.pack('<I', v)


def u64(v: int) -> bytes:
    return struct.pack('<Q', v)


def encode_coefficient(value: Coefficient, field_size: int = FIELD_SIZE) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.to_bytes(field_size, 'little')


def section(section_type: int, body: bytes) -> bytes:
    """Section header (type, size) followed by the body."""
    return u32(section_type) + u64(len(body)) + body


def header_body(
    field_size: int = FIELD_SIZE,
    prime: int = BLS12_381_R,
    n_wires: int = 4,
    n_pub_out: int = 1,
    n_pub_in: int = 1,
    n_prvt_in: int = 0,
    n_labels: int = 0,
    n_constraints: int = 0,
) -> bytes:
    return (
        u32(field_size)
        + prime.to_bytes(field_size, 'little')
        + u32(n_wires)
        + u32(n_pub_out)
        + u32(n_pub_in)
        + u32(n_prvt_in)
        + u64(n_labels)
        + u32(n_constraints)
    )


def header_section(**kwargs) -> bytes:
    return section(1, header_body(**kwargs))


def lc_body(terms: list[tuple[int, Coefficient]], field_size: int = FIELD_SIZE) -> bytes:
    out = u32(len(terms))
    for wire_id, coef in terms:
        out += u32(wire_id) + encode_coefficient(coef, field_size)
    return out


def constraints_body(constraints: list[tuple], field_size: int = FIELD_SIZE) -> bytes:
    """constraints: list of (A, B, C) term lists."""
    out = b''
    for a, b, c in constraints:
        out += lc_body(a, field_size) + lc_body(b, field_size) + lc_body(c, field_size)
    return out


def constraints_section(constraints: list[tuple], field_size: int = FIELD_SIZE) -> bytes:
    return section(2, constraints_body(constraints, field_size))


def build_r1cs(
    sections: list[bytes],
    magic: bytes = b'r1cs',
    version: int = 1,
    n_sections: int = None,
) -> bytes:
    """Assemble a container from already-encoded sections."""
    if n_sections is None:
        n_sections = len(sections)
    return magic + u32(version) + u32(n_sections) + b''.join(sections)
