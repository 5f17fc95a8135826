#!/usr/bin/env python3
# src/foldview/core/domain/tables/residues.py

"""
Residue table: one-letter and three-letter amino acid codes and properties.

Pyrrolysine (O) and selenocysteine (U) are included. D-isomers map to the
one-letter code of their L form. Anything else resolves to the unknown
residue UNK / X.
"""

from typing import Dict

UNKNOWN_THREE_LETTER = "UNK"
UNKNOWN_ONE_LETTER = "X"

ONE_TO_THREE: Dict[str, str] = {
    "A": "ALA",
    "C": "CYS",
    "D": "ASP",
    "E": "GLU",
    "F": "PHE",
    "H": "HIS",
    "I": "ILE",
    "K": "LYS",
    "L": "LEU",
    "M": "MET",
    "N": "ASN",
    "P": "PRO",
    "Q": "GLN",
    "R": "ARG",
    "S": "SER",
    "T": "THR",
    "V": "VAL",
    "W": "TRP",
    "Y": "TYR",
    "G": "GLY",
    "O": "PYL",
    "U": "SEC",
    "X": "UNK",
}

D_ISOMERS: Dict[str, str] = {
    "DAL": "A",
    "DCY": "C",
    "DAS": "D",
    "DGL": "E",
    "DPN": "F",
    "DHI": "H",
    "DIL": "I",
    "DLY": "K",
    "DLE": "L",
    "MED": "M",
    "DSG": "N",
    "DPR": "P",
    "DGN": "Q",
    "DAR": "R",
    "DSN": "S",
    "DTH": "T",
    "DVA": "V",
    "DTR": "W",
    "DTY": "Y",
}

THREE_TO_ONE: Dict[str, str] = {
    **{three: one for one, three in ONE_TO_THREE.items()},
    **D_ISOMERS,
}

# O is classified like K, U like C
PROPERTIES: Dict[str, str] = {
    "A": "Nonpolar",
    "C": "Polar",
    "D": "Neg. charged",
    "E": "Neg. charged",
    "F": "Aromatic",
    "H": "Pos. charged",
    "I": "Nonpolar",
    "K": "Pos. charged",
    "L": "Nonpolar",
    "M": "Nonpolar",
    "N": "Polar",
    "P": "Polar",
    "Q": "Polar",
    "R": "Pos. charged",
    "S": "Polar",
    "T": "Polar",
    "V": "Nonpolar",
    "W": "Aromatic",
    "Y": "Aromatic",
    "G": "Nonpolar",
    "O": "Pos. charged",
    "U": "Polar",
    "X": "Unknown",
}


def is_known_residue(three_letter: str) -> bool:
    """Return True if the three-letter code is in the residue table."""
    return three_letter in THREE_TO_ONE


def normalize_residue_name(three_letter: str) -> str:
    """Collapse codes missing from the table to UNK."""
    return three_letter if is_known_residue(three_letter) else UNKNOWN_THREE_LETTER


def three_to_one(three_letter: str) -> str:
    """
    Map a three-letter residue code to its one-letter code.

    Args:
        three_letter: Residue name as found in the residue-name column

    Returns:
        One-letter code, "X" for codes not in the table
    """
    return THREE_TO_ONE[normalize_residue_name(three_letter)]


def one_to_three(one_letter: str) -> str:
    """Map a one-letter code to its L-form three-letter code (UNK if unknown)."""
    return ONE_TO_THREE.get(one_letter, UNKNOWN_THREE_LETTER)


def residue_property(one_letter: str) -> str:
    """Return the physico-chemical class of an amino acid one-letter code."""
    return PROPERTIES.get(one_letter, PROPERTIES[UNKNOWN_ONE_LETTER])
