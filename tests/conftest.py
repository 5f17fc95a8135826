"""Shared fixtures: fixed-column PDB records and small test structures."""

from typing import Dict, List

import pytest


def fixed_columns(record: str, fields: Dict[int, str], width: int = 80) -> str:
    """Place each value at its 0-based start column of a blank record."""
    chars = list(record.ljust(width))
    for start, value in fields.items():
        chars[start : start + len(value)] = value
    return "".join(chars).rstrip()


def atom_line(
    serial: int,
    name: str,
    res_name: str,
    chain: str,
    res_seq: int,
    x: float,
    y: float,
    z: float,
    element: str = "",
    alt_loc: str = " ",
) -> str:
    element = element or name[0]
    return fixed_columns(
        "ATOM",
        {
            6: f"{serial:>5}",
            12: f" {name:<3}" if len(name) < 4 else name,
            16: alt_loc,
            17: f"{res_name:>3}",
            21: chain,
            22: f"{res_seq:>4}",
            30: f"{x:8.3f}",
            38: f"{y:8.3f}",
            46: f"{z:8.3f}",
            54: "  1.00",
            60: "  0.00",
            76: f"{element:>2}",
        },
    )


def helix_line(chain: str, start: int, stop: int) -> str:
    return fixed_columns(
        "HELIX",
        {7: "  1", 11: "  1", 15: "ALA", 19: chain, 21: f"{start:>4}",
         27: "ALA", 31: chain, 33: f"{stop:>4}"},
    )


def sheet_line(chain: str, start: int, stop: int) -> str:
    return fixed_columns(
        "SHEET",
        {7: "  1", 11: "  A", 14: " 2", 17: "SER", 21: chain, 22: f"{start:>4}",
         28: "SER", 32: chain, 33: f"{stop:>4}"},
    )


PEPTIDE_ATOMS = [
    # serial, name, residue, seq, x, y, z
    (1, "N", "ALA", 1, 0.000, 0.000, 0.000),
    (2, "CA", "ALA", 1, 1.450, 0.000, 0.000),
    (3, "C", "ALA", 1, 2.000, 1.400, 0.000),
    (4, "O", "ALA", 1, 1.300, 2.400, 0.000),
    (5, "CB", "ALA", 1, 1.900, -0.700, 1.200),
    (6, "N", "GLY", 2, 3.300, 1.600, 0.000),
    (7, "CA", "GLY", 2, 3.900, 2.900, 0.500),
    (8, "C", "GLY", 2, 5.400, 2.800, -0.300),
    (9, "O", "GLY", 2, 6.000, 1.700, -0.300),
    (10, "N", "SER", 3, 6.000, 4.000, 0.400),
    (11, "CA", "SER", 3, 7.450, 4.100, 0.000),
    (12, "C", "SER", 3, 8.000, 5.500, 0.000),
    (13, "O", "SER", 3, 7.300, 6.500, 0.000),
    (14, "CB", "SER", 3, 7.900, 3.400, 1.200),
    (15, "OG", "SER", 3, 9.300, 3.500, 1.300),
]


def peptide_lines(chain: str = "A", serial_offset: int = 0, shift: float = 0.0) -> List[str]:
    return [
        atom_line(serial + serial_offset, name, res, chain, seq, x + shift, y, z)
        for serial, name, res, seq, x, y, z in PEPTIDE_ATOMS
    ]


@pytest.fixture
def make_atom_line():
    return atom_line


@pytest.fixture
def make_helix_line():
    return helix_line


@pytest.fixture
def make_sheet_line():
    return sheet_line


@pytest.fixture
def peptide_pdb() -> str:
    """Single-model tripeptide ALA-GLY-SER on chain A with a HELIX over 1-2."""
    lines = ["HEADER    TEST PEPTIDE", helix_line("A", 1, 2)]
    lines += peptide_lines("A")
    lines += ["TER", "END"]
    return "\n".join(lines) + "\n"


@pytest.fixture
def nmr_pdb() -> str:
    """Two models, each with the tripeptide on chains A and B."""
    lines = [sheet_line("B", 2, 3)]
    for model in (1, 2):
        lines.append(f"MODEL     {model:>4}")
        lines += peptide_lines("A", shift=0.1 * model)
        lines += peptide_lines("B", serial_offset=15, shift=20.0 + 0.1 * model)
        lines.append("ENDMDL")
    lines.append("END")
    return "\n".join(lines) + "\n"
