"""Parse progress observers.

The parser reports its checkpoints to an observer instead of writing to stdout.
ParseObserver is silent; PrintObserver gives the verbose console trace;
RecordingObserver keeps the events for inspection.
"""

from typing import Any

from r1cs.primitives.bin_reader import CONSTRAINTS_SECTION, HEADER_SECTION

SECTION_NAMES = {
    HEADER_SECTION: "header",
    CONSTRAINTS_SECTION: "constraints",
}


class ParseObserver:
    """No-op base observer. Override the hooks of interest."""

    def on_start(self, source: str) -> None:
        pass

    def on_sections(self, sections) -> None:
        pass

    def on_section(self, section) -> None:
        pass

    def on_header(self, header) -> None:
        pass

    def on_constraint(self, index: int, constraint) -> None:
        pass

    def on_warning(self, message: str) -> None:
        pass

    def on_complete(self, r1cs) -> None:
        pass


class PrintObserver(ParseObserver):
    """Prints parse progress to stdout."""

    def __init__(self) -> None:
        self.n_constraints = 0

    def on_start(self, source: str) -> None:
        print(f"Reading R1CS file from: {source}")

    def on_sections(self, sections) -> None:
        print(f"R1CS file has {len(sections)} sections")

    def on_section(self, section) -> None:
        name = SECTION_NAMES.get(section.section_type, f"type {section.section_type}")
        print(f"Reading {name} section of size {section.size} bytes")

    def on_header(self, header) -> None:
        self.n_constraints = header.n_constraints
        print(f"  Field size: {header.field_size} bytes")
        print(f"  Number of wires: {header.n_wires}")
        print(f"  Number of public outputs: {header.n_pub_out}")
        print(f"  Number of public inputs: {header.n_pub_in}")
        print(f"  Number of private inputs: {header.n_prvt_in}")
        print(f"  Number of constraints: {header.n_constraints}")

    def on_constraint(self, index: int, constraint) -> None:
        # First three and the last constraint only
        if index < 3 or index == self.n_constraints - 1:
            print(
                f"  Read constraint #{index}: {len(constraint.a)} A terms, "
                f"{len(constraint.b)} B terms, {len(constraint.c)} C terms"
            )
        elif index == 3:
            print(f"  ... and {self.n_constraints - 4} more constraints")

    def on_warning(self, message: str) -> None:
        print(f"Warning: {message}")

    def on_complete(self, r1cs) -> None:
        print(f"Successfully parsed R1CS file with {len(r1cs)} constraints")


class RecordingObserver(ParseObserver):
    """Collects (event, payload) tuples in the order they are emitted."""

    def __init__(self) -> None:
        self.events: list[tuple[str, Any]] = []

    def on_start(self, source: str) -> None:
        self.events.append(("start", source))

    def on_sections(self, sections) -> None:
        self.events.append(("sections", list(sections)))

    def on_section(self, section) -> None:
        self.events.append(("section", section))

    def on_header(self, header) -> None:
        self.events.append(("header", header))

    def on_constraint(self, index: int, constraint) -> None:
        self.events.append(("constraint", index))

    def on_warning(self, message: str) -> None:
        self.events.append(("warning", message))

    def on_complete(self, r1cs) -> None:
        self.events.append(("complete", len(r1cs)))

    def names(self) -> list[str]:
        """Event names only, in order."""
        return [name for name, _ in self.events]
