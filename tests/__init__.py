"""Tests - R1CS reader test suite and byte-image helpers."""
