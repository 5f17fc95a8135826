#!/usr/bin/env python3
# src/foldview/core/domain/models/bond.py

"""
Domain model representing a bond inferred between two atoms.
"""

from dataclasses import dataclass
from typing import FrozenSet

from .atom import Atom


@dataclass(frozen=True)
class Bond:
    """Represents a bond between two atoms of the same model.

    Bonds come from a distance heuristic, so no bond order is recorded.
    ``atom1`` precedes ``atom2`` in the atom list the bond was inferred from.
    """

    atom1: Atom
    atom2: Atom
    length: float

    @property
    def pair(self) -> FrozenSet[Atom]:
        """The bonded atoms as an unordered pair."""
        return frozenset((self.atom1, self.atom2))

    @property
    def model(self) -> int:
        return self.atom1.model
