"""Control points of one ribbon segment between two adjacent residues."""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, eq=False)
class RibbonSegment:
    """Cross-sections of two consecutive residues of a polymer.

    ``points`` has shape (6, 3): opposite, C-alpha and C-beta of the previous
    residue followed by the same three points of the current residue. Mesh
    winding downstream relies on this left-to-right order.
    """

    points: np.ndarray
    chain: str
    model_number: int
    previous_residue_id: int
    residue_id: int

    @property
    def previous_section(self) -> np.ndarray:
        return self.points[:3]

    @property
    def current_section(self) -> np.ndarray:
        return self.points[3:]
