"""Shared fixtures for R1CS reader tests."""

import sys
from pathlib import Path

import pytest

# tests/ is inside the project root, so parent is the root
root_dir = Path(__file__).parent.parent
if str(root_dir) not in sys.path:
    sys.path.insert(0, str(root_dir))

from tests.r1cs_builder import ONE, build_r1cs, constraints_section, header_section  # noqa: E402


@pytest.fixture
def multiply_r1cs_bytes() -> bytes:
    """x1 * x2 = x3 with unit coefficients, header before constraints."""
    return build_r1cs([
        header_section(n_wires=5, n_pub_out=1, n_pub_in=1, n_prvt_in=0, n_constraints=1),
        constraints_section([
            ([(1, ONE)], [(2, ONE)], [(3, ONE)]),
        ]),
    ])


@pytest.fixture
def multiply_r1cs_file(tmp_path, multiply_r1cs_bytes) -> Path:
    path = tmp_path / "multiply.r1cs"
    path.write_bytes(multiply_r1cs_bytes)
    return path
