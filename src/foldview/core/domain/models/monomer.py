#!/usr/bin/env python3
# src/foldview/core/domain/models/monomer.py

"""
Domain model representing a monomer (amino acid residue) of a polymer.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .atom import Atom
from .secondary_structure import SecondaryStructure


@dataclass(frozen=True)
class Monomer:
    """One residue: its heavy atoms, one-letter label and residue number.

    All atoms of a monomer share model and chain. ``secondary_structure`` is
    None for residues not covered by a HELIX or SHEET record.
    """

    atoms: Tuple[Atom, ...]
    label: str
    residue_id: int
    secondary_structure: Optional[SecondaryStructure] = None

    @property
    def model(self) -> Optional[int]:
        return self.atoms[0].model if self.atoms else None

    @property
    def chain(self) -> Optional[str]:
        return self.atoms[0].chain if self.atoms else None

    @property
    def secondary_structure_or_coil(self) -> SecondaryStructure:
        return self.secondary_structure or SecondaryStructure.COIL

    def get_atom(self, role: str) -> Optional[Atom]:
        """
        Return the first atom whose name equals ``role``.

        Uniqueness of atom names is not validated: when a malformed file
        declares the same name twice, the first one encountered wins.

        Args:
            role: Atom name such as "CA" or "N"

        Returns:
            The matching atom, or None if the residue has no such atom
        """
        return next((atom for atom in self.atoms if atom.name == role), None)

    @property
    def c_alpha(self) -> Optional[Atom]:
        return self.get_atom("CA")

    @property
    def c_beta(self) -> Optional[Atom]:
        return self.get_atom("CB")

    @property
    def c(self) -> Optional[Atom]:
        return self.get_atom("C")

    @property
    def n(self) -> Optional[Atom]:
        return self.get_atom("N")
