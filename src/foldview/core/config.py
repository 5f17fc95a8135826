"""Tunable settings for the geometry derived from a parsed structure."""

from dataclasses import dataclass
from typing import Tuple

Point = Tuple[float, float, float]

BOND_CUTOFF = 2.0
FALLBACK_CBETA_OFFSET: Point = (1.0, 0.0, 0.0)
ORIGIN: Point = (0.0, 0.0, 0.0)


@dataclass(frozen=True)
class GeometrySettings:
    """Settings shared by bond inference, ribbons and centering.

    Attributes:
        bond_cutoff: Maximum distance (Angstroms) between two bonded atoms
        fallback_offset: Mean C-alpha/C-beta offset used when no residue of the
            complex has both atoms
        empty_model_centroid: Centroid reported for a model without atoms
    """

    bond_cutoff: float = BOND_CUTOFF
    fallback_offset: Point = FALLBACK_CBETA_OFFSET
    empty_model_centroid: Point = ORIGIN

    def __post_init__(self):
        if self.bond_cutoff <= 0:
            raise ValueError(f"Bond cutoff must be positive, got {self.bond_cutoff}")
