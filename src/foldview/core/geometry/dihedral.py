#!/usr/bin/env python3
# src/foldview/core/geometry/dihedral.py

"""
Dihedral (torsion) angles and backbone phi/psi for Ramachandran plots.
"""

import logging
from typing import List, Sequence

import numpy as np

from ..domain.models.complex import Complex
from ..domain.models.torsion import TorsionAngles

logger = logging.getLogger(__name__)


def dihedral(
    p1: Sequence[float], p2: Sequence[float], p3: Sequence[float], p4: Sequence[float]
) -> float:
    """
    Compute the torsion angle defined by four points.

    Args:
        p1: First point
        p2: Second point
        p3: Third point
        p4: Fourth point

    Returns:
        Angle in degrees in the range (-180, 180]

    Raises:
        ValueError: If p2 and p3 coincide, leaving the rotation axis undefined
    """
    p1, p2, p3, p4 = (np.asarray(p, dtype=np.float64) for p in (p1, p2, p3, p4))

    b1 = -(p2 - p1)
    b2 = p3 - p2
    b3 = p4 - p3

    axis_length = np.linalg.norm(b2)
    if axis_length == 0:
        raise ValueError("Central points of a dihedral must not coincide")
    # b2 normalised so it does not scale the rejections below
    b2 = b2 / axis_length

    n1 = b1 - b2 * np.dot(b1, b2)
    n2 = b3 - b2 * np.dot(b3, b2)

    x = np.dot(n1, n2)
    y = np.dot(np.cross(b2, n1), n2)
    angle = float(np.degrees(np.arctan2(y, x)))
    return 180.0 if angle <= -180.0 else angle


def backbone_torsions(structure: Complex) -> List[TorsionAngles]:
    """
    Compute phi and psi for the interior residues of the first model.

    Phi uses C(i-1), N, C-alpha, C and psi uses N, C-alpha, C, N(i+1), so the
    first and last residue of each polymer have no entry. Residues missing
    any of the five atoms are skipped.

    Args:
        structure: Parsed complex

    Returns:
        Torsion angles in polymer and residue order
    """
    torsions = []
    for polymer in structure.first_model_polymers():
        monomers = polymer.monomers
        for i in range(1, len(monomers) - 1):
            current = monomers[i]
            atoms = (monomers[i - 1].c, current.n, current.c_alpha, current.c, monomers[i + 1].n)
            if any(atom is None for atom in atoms):
                logger.warning(
                    "Skipping torsions of residue %s%d: missing backbone atom",
                    polymer.label,
                    current.residue_id,
                )
                continue

            c_prior, n, c_alpha, c, n_next = (atom.coordinates for atom in atoms)
            try:
                phi = dihedral(c_prior, n, c_alpha, c)
                psi = dihedral(n, c_alpha, c, n_next)
            except ValueError as e:
                logger.warning(
                    "Skipping torsions of residue %s%d: %s",
                    polymer.label,
                    current.residue_id,
                    e,
                )
                continue

            torsions.append(
                TorsionAngles(
                    chain=polymer.label,
                    residue_id=current.residue_id,
                    label=current.label,
                    phi=phi,
                    psi=psi,
                )
            )
    return torsions
