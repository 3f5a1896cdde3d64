"""Exceptions raised while reading an R1CS container.

Every error aborts the parse; no partial R1CS is ever returned.
"""


class R1CSParseError(ValueError):
    """Base class for all R1CS decoding failures."""


class R1CSIOError(R1CSParseError):
    """Underlying open/read/seek failure."""


class BadMagicError(R1CSParseError):
    def __init__(self, magic: bytes) -> None:
        self.magic = magic
        super().__init__(f"Invalid R1CS file: expected magic b'r1cs', got {magic!r}")


class UnsupportedVersionError(R1CSParseError):
    def __init__(self, version: int) -> None:
        self.version = version
        super().__init__(f"Unsupported R1CS version: {version}")


class MissingHeaderSectionError(R1CSParseError):
    def __init__(self) -> None:
        super().__init__("R1CS file is missing header section")


class MissingConstraintsSectionError(R1CSParseError):
    def __init__(self, n_constraints: int) -> None:
        self.n_constraints = n_constraints
        super().__init__(
            f"R1CS file is missing constraints section but header declares "
            f"{n_constraints} constraints"
        )


class FieldDecodeError(R1CSParseError):
    """Coefficient bytes could not be turned into a field element."""


class TruncatedFileError(R1CSParseError):
    """The data ended before a fixed-size field could be read."""


class TruncatedSectionError(TruncatedFileError):
    """A section extends past the end of the file, or a read crossed its end."""


class SectionSizeError(R1CSParseError):
    """A decoded section did not consume exactly its declared size."""


class WireIndexError(R1CSParseError):
    def __init__(self, wire_id: int, n_wires: int) -> None:
        self.wire_id = wire_id
        self.n_wires = n_wires
        super().__init__(f"Wire index {wire_id} out of range (n_wires={n_wires})")
