"""R1CS header section (type 1)."""

from dataclasses import dataclass

from r1cs.primitives.bin_reader import BinFileReader
from r1cs.primitives.field import prime_from_bytes


@dataclass(frozen=True)
class R1CSHeader:
    """Circuit metadata.

    Wire 0 is conventionally the constant one, followed by public outputs,
    public inputs and private inputs. n_wires is expected to cover all of them
    but this is not checked.

    Attributes:
        field_size: Byte width of one serialized field element
        prime_bytes: Raw little-endian modulus, informational
        n_wires: Total number of wires
        n_pub_out: Number of public outputs
        n_pub_in: Number of public inputs
        n_prvt_in: Number of private inputs
        n_labels: Number of labels (metadata only)
        n_constraints: Declared number of constraints
    """
    field_size: int
    prime_bytes: bytes
    n_wires: int
    n_pub_out: int
    n_pub_in: int
    n_prvt_in: int
    n_labels: int
    n_constraints: int

    @property
    def prime(self) -> int:
        """Modulus as an integer."""
        return prime_from_bytes(self.prime_bytes)


def decode_header(reader: BinFileReader) -> R1CSHeader:
    """Read header fields in file order from the current position."""
    field_size = reader.read_u32_le()
    prime_bytes = reader.read_bytes(field_size)
    n_wires = reader.read_u32_le()
    n_pub_out = reader.read_u32_le()
    n_pub_in = reader.read_u32_le()
    n_prvt_in = reader.read_u32_le()
    n_labels = reader.read_u64_le()
    n_constraints = reader.read_u32_le()

    return R1CSHeader(
        field_size=field_size,
        prime_bytes=prime_bytes,
        n_wires=n_wires,
        n_pub_out=n_pub_out,
        n_pub_in=n_pub_in,
        n_prvt_in=n_prvt_in,
        n_labels=n_labels,
        n_constraints=n_constraints,
    )
