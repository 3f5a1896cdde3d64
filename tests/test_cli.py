"""Tests for the r1cs-info command line entry point."""

import pytest

from r1cs_info import main
from tests.r1cs_builder import build_r1cs, constraints_section, header_section


def test_prints_summary(multiply_r1cs_file, capsys):
    assert main([str(multiply_r1cs_file)]) == 0
    out = capsys.readouterr().out
    assert "R1CS Circuit Information:" in out
    assert "Constraint #0: (1·x1) · (1·x2) = 1·x3" in out
    assert "Reading R1CS file" not in out


def test_verbose(multiply_r1cs_file, capsys):
    assert main([str(multiply_r1cs_file), "--verbose"]) == 0
    out = capsys.readouterr().out
    assert "Reading R1CS file from:" in out
    assert "R1CS Circuit Information:" in out


def test_all_constraints(tmp_path, capsys):
    many = [([(1, 1)], [(2, 1)], [(3, 1)])] * 5
    path = tmp_path / "many.r1cs"
    path.write_bytes(build_r1cs([header_section(n_constraints=5), constraints_section(many)]))

    assert main([str(path), "--all"]) == 0
    out = capsys.readouterr().out
    assert "Constraint #4:" in out

    assert main([str(path), "--max-constraints", "1"]) == 0
    out = capsys.readouterr().out
    assert "Constraint #1:" not in out
    assert "... and 4 more constraints" in out


def test_parse_error_exit_status(tmp_path, capsys):
    path = tmp_path / "bad.r1cs"
    path.write_bytes(b"nope" + b"\x00" * 8)

    assert main([str(path)]) == 1
    assert "ERROR: Invalid R1CS file" in capsys.readouterr().err


def test_strict_rejects_missing_constraints(tmp_path, capsys):
    path = tmp_path / "header_only.r1cs"
    path.write_bytes(build_r1cs([header_section(n_constraints=2)]))

    assert main([str(path), "--strict"]) == 1
    assert "missing constraints section" in capsys.readouterr().err


def test_check_wires(tmp_path, capsys):
    path = tmp_path / "wires.r1cs"
    path.write_bytes(build_r1cs([
        header_section(n_wires=2, n_constraints=1),
        constraints_section([([(1, 1)], [(5, 1)], [])]),
    ]))

    assert main([str(path), "--check-wires"]) == 1
    assert "Wire index 5" in capsys.readouterr().err


def test_negative_max_constraints_rejected(multiply_r1cs_file, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([str(multiply_r1cs_file), "--max-constraints", "-1"])
    assert exc_info.value.code == 2
    err = capsys.readouterr().err
    assert "must be >= 0, got -1" in err


def test_zero_max_constraints(multiply_r1cs_file, capsys):
    assert main([str(multiply_r1cs_file), "--max-constraints", "0"]) == 0
    out = capsys.readouterr().out
    assert "Constraint #0:" not in out
    assert "... and 1 more constraints" in out
