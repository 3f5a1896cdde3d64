"""Section-based binary container reader.

R1CS files use the same container shape as other iden3 binaries:

    magic (4 bytes) | version (u32) | n_sections (u32)
    repeated: section_type (u32) | section_size (u64) | body

Sections may appear in any order, so the whole table is scanned before any body
is interpreted. All integers are little-endian.
"""

import io
import struct
from typing import BinaryIO, NamedTuple, Optional

from r1cs.errors import (
    BadMagicError,
    R1CSIOError,
    SectionSizeError,
    TruncatedFileError,
    TruncatedSectionError,
    UnsupportedVersionError,
)

R1CS_MAGIC = b'r1cs'
R1CS_VERSION = 1

# Section IDs
HEADER_SECTION = 1
CONSTRAINTS_SECTION = 2
WIRE2LABEL_SECTION = 3


class SectionDescriptor(NamedTuple):
    """Location of one section body; offset is absolute."""
    section_type: int
    offset: int
    size: int

    @property
    def end(self) -> int:
        return self.offset + self.size


class BinFileReader:
    """Little-endian reader over a seekable binary stream.

    The stream is owned by the caller. Reads never return short: running out of
    data raises TruncatedFileError, and while a section is open a read that
    would cross its end raises TruncatedSectionError.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self.stream = stream
        self.reading_section: Optional[SectionDescriptor] = None
        try:
            self.file_length = stream.seek(0, io.SEEK_END)
            stream.seek(0)
        except OSError as exc:
            raise R1CSIOError(f"Cannot seek input: {exc}") from exc

    def tell(self) -> int:
        try:
            return self.stream.tell()
        except OSError as exc:
            raise R1CSIOError(f"Cannot query position: {exc}") from exc

    def seek(self, pos: int) -> None:
        try:
            self.stream.seek(pos)
        except OSError as exc:
            raise R1CSIOError(f"Cannot seek to offset {pos}: {exc}") from exc

    def read_bytes(self, n: int) -> bytes:
        """Read exactly n raw bytes."""
        if self.reading_section is not None:
            pos = self.tell()
            if pos + n > self.reading_section.end:
                raise TruncatedSectionError(
                    f"Read of {n} bytes at offset {pos} crosses end of section "
                    f"{self.reading_section.section_type} (ends at {self.reading_section.end})"
                )
        try:
            data = self.stream.read(n)
        except OSError as exc:
            raise R1CSIOError(f"Read failed: {exc}") from exc
        if len(data) != n:
            raise TruncatedFileError(f"Unexpected end of data: wanted {n} bytes, got {len(data)}")
        return data

    def read_u32_le(self) -> int:
        """Read uint32 little-endian."""
        return struct.unpack('<I', self.read_bytes(4))[0]

    def read_u64_le(self) -> int:
        """Read uint64 little-endian."""
        return struct.unpack('<Q', self.read_bytes(8))[0]

    def start_read_section(self, section: SectionDescriptor) -> None:
        """Position the stream at a section body and bound reads to it."""
        self.seek(section.offset)
        self.reading_section = section

    def end_read_section(self, check: bool = False) -> None:
        """Release the section bound.

        Args:
            check: If True, verify exactly section.size bytes were consumed
        """
        section = self.reading_section
        self.reading_section = None
        if check and section is not None:
            consumed = self.tell() - section.offset
            if consumed != section.size:
                raise SectionSizeError(
                    f"Section {section.section_type} size mismatch: read {consumed} bytes, "
                    f"expected {section.size}"
                )


def scan_sections(reader: BinFileReader) -> list[SectionDescriptor]:
    """Read the container preamble and the section table.

    Bodies are skipped, not interpreted. Sections of unknown type are kept.

    Raises:
        BadMagicError: First four bytes are not b'r1cs'
        UnsupportedVersionError: Version is not 1
        TruncatedSectionError: A section claims to extend past the end of file
    """
    reader.seek(0)
    # A file shorter than the magic is reported as bad magic, not truncation.
    try:
        magic = reader.stream.read(len(R1CS_MAGIC))
    except OSError as exc:
        raise R1CSIOError(f"Read failed: {exc}") from exc
    if magic != R1CS_MAGIC:
        raise BadMagicError(magic)

    version = reader.read_u32_le()
    if version != R1CS_VERSION:
        raise UnsupportedVersionError(version)

    n_sections = reader.read_u32_le()

    sections = []
    for _ in range(n_sections):
        section_type = reader.read_u32_le()
        section_size = reader.read_u64_le()
        section = SectionDescriptor(section_type, reader.tell(), section_size)

        if section.end > reader.file_length:
            raise TruncatedSectionError(
                f"Section {section_type} at offset {section.offset} claims {section_size} bytes "
                f"but file is only {reader.file_length} bytes"
            )

        sections.append(section)
        reader.seek(section.end)

    return sections


def find_section(sections: list[SectionDescriptor], section_type: int) -> Optional[SectionDescriptor]:
    """Return the first section of the given type in file order."""
    for section in sections:
        if section.section_type == section_type:
            return section
    return None
