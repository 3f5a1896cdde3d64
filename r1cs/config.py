"""Parser configuration."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ParserConfig:
    """Strictness switches for the R1CS reader.

    The defaults are permissive: a missing constraints section yields an empty
    constraint list with a warning, wire ids are not range-checked and section
    bodies may contain trailing bytes.

    Attributes:
        require_constraints: Raise MissingConstraintsSectionError when the header
            declares constraints but no constraints section exists
        check_wire_ids: Raise WireIndexError for wire_id >= n_wires
        check_section_sizes: Raise SectionSizeError when a decoded section does
            not end exactly at its declared size
        field: galois field class for coefficients; None selects the field
            matching the header prime, falling back to BLS12-381 Fr
    """
    require_constraints: bool = False
    check_wire_ids: bool = False
    check_section_sizes: bool = False
    field: Optional[type] = None

    @classmethod
    def strict(cls, field: Optional[type] = None) -> 'ParserConfig':
        """Config with every structural check enabled."""
        return cls(
            require_constraints=True,
            check_wire_ids=True,
            check_section_sizes=True,
            field=field,
        )
