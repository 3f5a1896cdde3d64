"""R1CS file parser.

Two passes over a seekable input:
1. Scan the section table (types, offsets, sizes) without reading bodies.
2. Decode the first header section, then the first constraints section.

The header must be known before constraints can be decoded, but files may
store the constraints section first, hence the table scan.
"""

import warnings
from pathlib import Path
from typing import BinaryIO, Optional, Union

from r1cs.config import ParserConfig
from r1cs.constraints import decode_constraints
from r1cs.document import R1CS
from r1cs.errors import (
    MissingConstraintsSectionError,
    MissingHeaderSectionError,
    R1CSIOError,
)
from r1cs.header import decode_header
from r1cs.observer import ParseObserver
from r1cs.primitives.bin_reader import (
    CONSTRAINTS_SECTION,
    HEADER_SECTION,
    BinFileReader,
    find_section,
    scan_sections,
)
from r1cs.primitives.field import KNOWN_FIELDS, resolve_field


def read_r1cs(
    path: Union[str, Path],
    config: Optional[ParserConfig] = None,
    observer: Optional[ParseObserver] = None,
) -> R1CS:
    """Open and parse an R1CS file.

    The file handle is closed on return, whether parsing succeeded or not.

    Args:
        path: Path to a .r1cs file
        config: Strictness settings; defaults to ParserConfig()
        observer: Receives progress events; defaults to a silent observer

    Returns:
        Parsed R1CS

    Raises:
        R1CSIOError: If the file cannot be opened or read
        R1CSParseError: Any structural decoding failure
    """
    observer = observer if observer is not None else ParseObserver()
    observer.on_start(str(path))

    try:
        f = open(path, 'rb')
    except OSError as exc:
        raise R1CSIOError(f"Cannot open {path}: {exc}") from exc

    with f:
        return _parse(f, config, observer)


def parse_r1cs(
    stream: BinaryIO,
    config: Optional[ParserConfig] = None,
    observer: Optional[ParseObserver] = None,
) -> R1CS:
    """Parse an R1CS image from a caller-owned seekable binary stream.

    The stream is not closed.
    """
    observer = observer if observer is not None else ParseObserver()
    observer.on_start(getattr(stream, 'name', '<stream>'))
    return _parse(stream, config, observer)


def _parse(stream: BinaryIO, config: Optional[ParserConfig], observer: ParseObserver) -> R1CS:
    config = config if config is not None else ParserConfig()
    reader = BinFileReader(stream)

    sections = scan_sections(reader)
    observer.on_sections(sections)

    # Only the first header section is used
    header_section = find_section(sections, HEADER_SECTION)
    if header_section is None:
        raise MissingHeaderSectionError()

    observer.on_section(header_section)
    reader.start_read_section(header_section)
    header = decode_header(reader)
    reader.end_read_section(check=config.check_section_sizes)
    observer.on_header(header)

    if config.field is not None:
        field = config.field
    else:
        field = resolve_field(header.prime_bytes)
        if header.prime not in KNOWN_FIELDS:
            message = (
                f"Unknown field prime {header.prime:#x} in header; "
                f"coefficients reduced modulo {field.order:#x}"
            )
            warnings.warn(message)
            observer.on_warning(message)

    constraints = []
    constraints_section = find_section(sections, CONSTRAINTS_SECTION)
    if constraints_section is not None:
        observer.on_section(constraints_section)
        reader.start_read_section(constraints_section)
        constraints = decode_constraints(
            reader,
            header,
            field,
            check_wire_ids=config.check_wire_ids,
            observer=observer,
        )
        reader.end_read_section(check=config.check_section_sizes)
    elif header.n_constraints > 0:
        if config.require_constraints:
            raise MissingConstraintsSectionError(header.n_constraints)
        message = (
            f"Failed to read any constraints despite header indicating "
            f"{header.n_constraints} constraints"
        )
        warnings.warn(message)
        observer.on_warning(message)

    r1cs = R1CS(header, constraints, field, sections)
    observer.on_complete(r1cs)
    return r1cs
