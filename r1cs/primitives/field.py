"""Scalar fields of pairing-friendly curves and the raw coefficient codec.

Uses galois library for all field arithmetic. FR_BLS12_381 and FR_BN254 are the
field types; coefficients in R1CS files are reduced into one of them.

The primitive elements are passed explicitly so galois does not have to factor
p - 1 when the field classes are built.
"""

from typing import Optional

import galois

from r1cs.errors import FieldDecodeError

# --- Field Construction ---

BLS12_381_R = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001
BN254_R = 0x30644E72E131A029B85045B68181585D2833E84879B9709143E1F593F0000001

FR_BLS12_381 = galois.GF(BLS12_381_R, primitive_element=7, verify=False)
"""Scalar field of BLS12-381."""

FR_BN254 = galois.GF(BN254_R, primitive_element=5, verify=False)
"""Scalar field of BN254 (alt_bn128), the circom default."""

DEFAULT_FIELD = FR_BLS12_381

KNOWN_FIELDS = {
    BLS12_381_R: FR_BLS12_381,
    BN254_R: FR_BN254,
}


def prime_from_bytes(prime_bytes: bytes) -> int:
    """Interpret a serialized modulus as a little-endian integer."""
    return int.from_bytes(prime_bytes, "little")


def resolve_field(prime_bytes: bytes, default: Optional[type] = None) -> type:
    """Pick the galois field matching a header's prime modulus.

    Args:
        prime_bytes: Raw little-endian modulus bytes from the header
        default: Field to use when the prime is not a known curve scalar field

    Returns:
        A galois FieldArray subclass
    """
    field = KNOWN_FIELDS.get(prime_from_bytes(prime_bytes))
    if field is not None:
        return field
    return default if default is not None else DEFAULT_FIELD


# --- Coefficient Decoding ---


def minimal_le_bytes(raw: bytes) -> bytes:
    """Strip zero padding above the most significant nonzero byte.

    Bytes are scanned from the most significant end (the end of a little-endian
    string) and stop at the first nonzero byte. All-zero input yields b"".
    """
    end = len(raw)
    while end > 0 and raw[end - 1] == 0:
        end -= 1
    return bytes(raw[:end])


def decode_field_element(raw: bytes, field: type = DEFAULT_FIELD, field_size: Optional[int] = None):
    """Decode a little-endian coefficient into its canonical field element.

    Padding variants of the same integer, and integers congruent modulo the
    field prime, all decode to the same element.

    Args:
        raw: Serialized coefficient, least significant byte first
        field: galois field class to reduce into
        field_size: Expected byte width; checked when given

    Returns:
        0-dim galois FieldArray element

    Raises:
        FieldDecodeError: If raw does not have field_size bytes
    """
    if field_size is not None and len(raw) != field_size:
        raise FieldDecodeError(
            f"Coefficient has {len(raw)} bytes, expected {field_size}"
        )

    meaningful = minimal_le_bytes(raw)
    if not meaningful:
        return field(0)

    value = int.from_bytes(meaningful, "little") % field.order
    return field(value)
