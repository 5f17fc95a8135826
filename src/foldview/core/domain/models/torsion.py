"""Backbone torsion angles of one residue."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TorsionAngles:
    """Phi and psi (degrees) of a residue, one point of a Ramachandran plot."""

    chain: str
    residue_id: int
    label: str
    phi: float
    psi: float
