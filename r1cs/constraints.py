"""R1CS constraints section (type 2).

Each constraint is three linear combinations A, B, C encoding

    (A . w) * (B . w) = (C . w)

over the wire vector w. A linear combination is serialized as

    term_count: u32
    repeated term_count times:
        wire_id:     u32
        coefficient: field_size bytes (little-endian)
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional

from r1cs.errors import WireIndexError
from r1cs.header import R1CSHeader
from r1cs.primitives.bin_reader import BinFileReader
from r1cs.primitives.field import decode_field_element


# --- Constraint Data Structures ---

@dataclass(frozen=True)
class Term:
    """One (wire, coefficient) pair of a linear combination."""
    wire_id: int
    coefficient: object  # 0-dim galois FieldArray

    def __str__(self) -> str:
        return f"{int(self.coefficient)}·x{self.wire_id}"


@dataclass(frozen=True)
class LinearCombination:
    """Sparse weighted sum of wires, terms kept in file order.

    Duplicate wire ids are legal and are not merged.
    """
    terms: tuple[Term, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.terms)

    def __iter__(self) -> Iterator[Term]:
        return iter(self.terms)

    def __getitem__(self, index: int) -> Term:
        return self.terms[index]

    def __str__(self) -> str:
        if not self.terms:
            return "0"
        return " + ".join(str(t) for t in self.terms)

    @property
    def wire_ids(self) -> list[int]:
        return [t.wire_id for t in self.terms]

    def merged(self) -> 'LinearCombination':
        """Combine terms sharing a wire by summing their coefficients.

        Terms are ordered by first appearance of each wire. Terms whose
        coefficients cancel are kept with a zero coefficient.
        """
        sums: dict[int, object] = {}
        for t in self.terms:
            if t.wire_id in sums:
                sums[t.wire_id] = sums[t.wire_id] + t.coefficient
            else:
                sums[t.wire_id] = t.coefficient
        return LinearCombination(tuple(Term(w, c) for w, c in sums.items()))


@dataclass(frozen=True)
class R1CSConstraint:
    """A single rank-1 constraint (A . w) * (B . w) = (C . w)."""
    a: LinearCombination
    b: LinearCombination
    c: LinearCombination

    def __str__(self) -> str:
        return f"({self.a}) · ({self.b}) = {self.c}"


# --- Decoding ---

def decode_linear_combination(
    reader: BinFileReader,
    field_size: int,
    field_type: type,
    n_wires: Optional[int] = None,
) -> LinearCombination:
    """Read one linear combination from the current position.

    Args:
        reader: Reader positioned at a term count
        field_size: Byte width of each coefficient
        field_type: galois field the coefficients are reduced into
        n_wires: If given, reject wire ids >= n_wires

    Raises:
        WireIndexError: If n_wires is given and a wire id is out of range
    """
    term_count = reader.read_u32_le()

    terms = []
    for _ in range(term_count):
        wire_id = reader.read_u32_le()
        if n_wires is not None and wire_id >= n_wires:
            raise WireIndexError(wire_id, n_wires)
        coef_bytes = reader.read_bytes(field_size)
        coefficient = decode_field_element(coef_bytes, field_type, field_size)
        terms.append(Term(wire_id, coefficient))

    return LinearCombination(tuple(terms))


def decode_constraint(
    reader: BinFileReader,
    field_size: int,
    field_type: type,
    n_wires: Optional[int] = None,
) -> R1CSConstraint:
    """Read the A, B and C combinations of one constraint, in that order."""
    a = decode_linear_combination(reader, field_size, field_type, n_wires)
    b = decode_linear_combination(reader, field_size, field_type, n_wires)
    c = decode_linear_combination(reader, field_size, field_type, n_wires)
    return R1CSConstraint(a, b, c)


def decode_constraints(
    reader: BinFileReader,
    header: R1CSHeader,
    field_type: type,
    check_wire_ids: bool = False,
    observer=None,
) -> list[R1CSConstraint]:
    """Read header.n_constraints constraints in file order.

    Args:
        reader: Reader positioned at the start of the constraints section body
        header: Decoded header supplying field_size and the constraint count
        field_type: galois field for coefficients
        check_wire_ids: Range-check wire ids against header.n_wires
        observer: Optional ParseObserver notified after each constraint
    """
    n_wires = header.n_wires if check_wire_ids else None

    constraints = []
    for i in range(header.n_constraints):
        constraint = decode_constraint(reader, header.field_size, field_type, n_wires)
        constraints.append(constraint)
        if observer is not None:
            observer.on_constraint(i, constraint)

    return constraints
