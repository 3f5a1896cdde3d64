"""Read-only R1CS document and its text dump."""

from typing import Iterator, Optional

from r1cs.constraints import R1CSConstraint
from r1cs.header import R1CSHeader
from r1cs.primitives.bin_reader import SectionDescriptor


class R1CS:
    """Parsed R1CS circuit: header plus constraints in file order.

    Built once by the parser and not modified afterwards. Every coefficient is
    an element of self.field, decoded with header.field_size bytes.
    """

    def __init__(
        self,
        header: R1CSHeader,
        constraints: list[R1CSConstraint],
        field: type,
        sections: Optional[list[SectionDescriptor]] = None,
    ) -> None:
        self._header = header
        self._constraints = tuple(constraints)
        self._field = field
        self._sections = tuple(sections or ())

    @classmethod
    def from_file(cls, path, config=None, observer=None) -> 'R1CS':
        """Read and parse an R1CS file. See r1cs.parser.read_r1cs."""
        from r1cs.parser import read_r1cs
        return read_r1cs(path, config=config, observer=observer)

    @property
    def header(self) -> R1CSHeader:
        return self._header

    @property
    def field(self) -> type:
        """galois field class the coefficients belong to."""
        return self._field

    @property
    def sections(self) -> tuple[SectionDescriptor, ...]:
        """Section table in file order, including unread sections."""
        return self._sections

    def num_wires(self) -> int:
        return self._header.n_wires

    def num_public_outputs(self) -> int:
        return self._header.n_pub_out

    def num_public_inputs(self) -> int:
        return self._header.n_pub_in

    def num_private_inputs(self) -> int:
        return self._header.n_prvt_in

    def num_constraints(self) -> int:
        """Number of constraints declared by the header."""
        return self._header.n_constraints

    def num_labels(self) -> int:
        return self._header.n_labels

    def prime_field_modulus(self) -> bytes:
        """Raw prime modulus bytes exactly as stored in the header."""
        return self._header.prime_bytes

    def constraints(self) -> tuple[R1CSConstraint, ...]:
        return self._constraints

    def __len__(self) -> int:
        return len(self._constraints)

    def __iter__(self) -> Iterator[R1CSConstraint]:
        return iter(self._constraints)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, R1CS):
            return NotImplemented
        return (
            self._header == other._header
            and self._field is other._field
            and self._constraints == other._constraints
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"R1CS(n_wires={self.num_wires()}, n_constraints={self.num_constraints()}, "
            f"loaded={len(self)})"
        )

    def print_info(self, max_constraints: Optional[int] = 3) -> None:
        """Print the circuit summary. See format_info."""
        print(format_info(self, max_constraints))


def format_info(r1cs: R1CS, max_constraints: Optional[int] = 3) -> str:
    """Render a human-readable summary of the circuit.

    Args:
        r1cs: Parsed circuit
        max_constraints: Number of sample constraints to show; None shows all

    Returns:
        Multi-line text, no trailing newline
    """
    lines = [
        "R1CS Circuit Information:",
        f"  Total wires: {r1cs.num_wires()}",
        f"  Public outputs: {r1cs.num_public_outputs()}",
        f"  Public inputs: {r1cs.num_public_inputs()}",
        f"  Private inputs: {r1cs.num_private_inputs()}",
        f"  Constraints: {r1cs.num_constraints()}",
        f"  Constraints loaded: {len(r1cs)}",
    ]

    prime_bytes = r1cs.prime_field_modulus()
    display_bytes = min(len(prime_bytes), 8)
    lines.append(
        f"  Prime field modulus (first {display_bytes} bytes): {list(prime_bytes[:display_bytes])}"
    )

    constraints = r1cs.constraints()
    if constraints:
        shown = constraints if max_constraints is None else constraints[:max_constraints]
        lines.append("")
        lines.append("Sample constraints:")
        for i, constraint in enumerate(shown):
            lines.append(f"  Constraint #{i}: {constraint}")
        if len(constraints) > len(shown):
            lines.append(f"  ... and {len(constraints) - len(shown)} more constraints")

    return "\n".join(lines)
