#!/usr/bin/env python3
# src/foldview/core/domain/models/atom.py

"""
Domain model representing an atom in a molecular structure.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from ..tables.elements import element_color, element_radius


@dataclass(frozen=True, eq=False)
class Atom:
    """Represents an atom of an amino acid residue.

    Atoms compare and hash by identity: serial numbers repeat across models
    and malformed files may repeat them within a model.
    """

    element: str
    name: str
    atom_id: int
    coordinates: Tuple[float, float, float]
    model: int = 0
    chain: str = ""

    @property
    def radius(self) -> float:
        """Display radius looked up from the element table."""
        return element_radius(self.element)

    @property
    def color(self) -> str:
        """Display color looked up from the element table."""
        return element_color(self.element)

    def get_coordinates(self) -> np.ndarray:
        """Return the coordinates as a float64 array of shape (3,)."""
        return np.array(self.coordinates, dtype=np.float64)

    def distance_to(self, other: "Atom") -> float:
        return float(np.linalg.norm(self.get_coordinates() - other.get_coordinates()))
