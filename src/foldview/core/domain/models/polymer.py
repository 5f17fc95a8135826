#!/usr/bin/env python3
# src/foldview/core/domain/models/polymer.py

"""
Domain model representing a polymer: one chain instance within one model.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

import numpy as np

from ...config import BOND_CUTOFF
from .atom import Atom
from .bond import Bond
from .monomer import Monomer


@dataclass(frozen=True)
class Polymer:
    """Ordered monomers of one chain in one model.

    Attributes:
        monomers: Residues in file order
        number: 1-based number of the chain within its model
        label: Chain label
        model_number: Model index (0 when the file declares no MODEL records)
    """

    monomers: Tuple[Monomer, ...]
    number: int
    label: str
    model_number: int = 0

    @property
    def atoms(self) -> List[Atom]:
        """All atoms of all monomers, flattened in file order."""
        return [atom for monomer in self.monomers for atom in monomer.atoms]

    def get_coordinates(self) -> np.ndarray:
        """Get coordinates of all atoms in the polymer.

        Returns:
            numpy array of shape (n_atoms, 3) containing xyz coordinates
        """
        return np.array(
            [atom.coordinates for atom in self.atoms], dtype=np.float64
        ).reshape(-1, 3)

    def get_bonds(
        self,
        cutoff: float = BOND_CUTOFF,
        progress: Optional[Callable[[int, int], None]] = None,
    ) -> List[Bond]:
        """Infer the bonds between the atoms of this polymer by distance."""
        from ...geometry.bonds import infer_bonds

        return infer_bonds(self.atoms, cutoff=cutoff, progress=progress)

    @property
    def sequence(self) -> str:
        return "".join(monomer.label for monomer in self.monomers)
