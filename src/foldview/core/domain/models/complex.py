#!/usr/bin/env python3
# src/foldview/core/domain/models/complex.py

"""
Domain model representing a parsed structure: all polymers of all models.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from .atom import Atom
from .monomer import Monomer
from .polymer import Polymer


@dataclass(frozen=True)
class Complex:
    """Full result of parsing one PDB file.

    Attributes:
        polymers: Polymers across all models in file order
        number_of_models: Count of MODEL records (0 if the file declares none)
        chains: Distinct chain labels, sorted
        protein: Whether any ATOM record carried a three-letter residue name
    """

    polymers: Tuple[Polymer, ...] = field(default_factory=tuple)
    number_of_models: int = 0
    chains: Tuple[str, ...] = field(default_factory=tuple)
    protein: bool = False

    @property
    def model_count(self) -> int:
        """Number of model slots; a file without MODEL records has one."""
        return self.number_of_models if self.number_of_models > 0 else 1

    @staticmethod
    def model_slot(model_number: int) -> int:
        """Map a model number to its 0-based slot (models 0 and 1 share slot 0)."""
        return 0 if model_number == 0 else model_number - 1

    @property
    def is_empty(self) -> bool:
        return not self.polymers

    def polymers_in_model(self, slot: int) -> List[Polymer]:
        """Return the polymers whose model maps to the given slot."""
        return [p for p in self.polymers if self.model_slot(p.model_number) == slot]

    def first_model_polymers(self) -> List[Polymer]:
        return self.polymers_in_model(0)

    def first_model_monomers(self) -> List[Monomer]:
        return [m for polymer in self.first_model_polymers() for m in polymer.monomers]

    @property
    def atoms(self) -> List[Atom]:
        return [atom for polymer in self.polymers for atom in polymer.atoms]

    @property
    def monomers(self) -> List[Monomer]:
        return [m for polymer in self.polymers for m in polymer.monomers]
