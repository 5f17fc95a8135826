#!/usr/bin/env python3
# src/foldview/core/geometry/ribbon.py

"""
Ribbon control points along the protein backbone.

Every residue contributes a cross-section of three points: the C-alpha, the
C-beta and the point opposite the C-beta (the C-beta reflected through the
C-alpha). Residues without a C-beta (glycine, or incomplete files) get a
synthetic one placed at the complex-wide mean C-alpha/C-beta offset. A
segment joins the cross-sections of two consecutive residues of a polymer.
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from ..config import FALLBACK_CBETA_OFFSET, ORIGIN
from ..domain.models.complex import Complex
from ..domain.models.monomer import Monomer
from ..domain.models.ribbon_segment import RibbonSegment
from ..exceptions import MissingAtomError
from .centering import mean_point_per_model

logger = logging.getLogger(__name__)

Point = Tuple[float, float, float]


def mean_cbeta_offset(
    structure: Complex, fallback: Point = FALLBACK_CBETA_OFFSET
) -> np.ndarray:
    """
    Average the C-beta minus C-alpha offset over all residues of the complex.

    Components are averaged in absolute value; signed offsets point in all
    directions and would cancel out.

    Args:
        structure: Parsed complex
        fallback: Offset returned when no residue has both atoms

    Returns:
        Offset vector of shape (3,)
    """
    offsets = [
        np.abs(monomer.c_beta.get_coordinates() - monomer.c_alpha.get_coordinates())
        for monomer in structure.monomers
        if monomer.c_alpha is not None and monomer.c_beta is not None
    ]
    if not offsets:
        return np.asarray(fallback, dtype=np.float64)
    return np.mean(offsets, axis=0)


def monomer_control_points(
    monomer: Monomer,
    centroid: Sequence[float] = ORIGIN,
    mean_offset: Sequence[float] = FALLBACK_CBETA_OFFSET,
) -> np.ndarray:
    """
    Compute the ribbon cross-section of one residue.

    Args:
        monomer: Residue to compute the cross-section for
        centroid: Point subtracted from all coordinates
        mean_offset: Offset used to place a missing C-beta

    Returns:
        Array of shape (3, 3) holding opposite, C-alpha and C-beta

    Raises:
        MissingAtomError: If the residue has no C-alpha
    """
    if monomer.c_alpha is None:
        raise MissingAtomError("CA", monomer.residue_id, monomer.chain or "")

    centroid = np.asarray(centroid, dtype=np.float64)
    mean_offset = np.asarray(mean_offset, dtype=np.float64)
    c_alpha = monomer.c_alpha.get_coordinates() - centroid

    if monomer.c_beta is None:
        c_beta = c_alpha - mean_offset
        opposite = c_alpha + mean_offset
    else:
        c_beta = monomer.c_beta.get_coordinates() - centroid
        opposite = c_alpha - (c_beta - c_alpha)

    return np.vstack([opposite, c_alpha, c_beta])


def ribbon_segments(
    monomers: Sequence[Monomer],
    centroid: Sequence[float] = ORIGIN,
    mean_offset: Sequence[float] = FALLBACK_CBETA_OFFSET,
) -> List[RibbonSegment]:
    """
    Build one segment per pair of consecutive residues.

    A residue without a C-alpha is skipped together with both segments that
    would touch it; the strip resumes at the next residue.

    Args:
        monomers: Residues of one polymer in order
        centroid: Point subtracted from all coordinates
        mean_offset: Offset used to place missing C-beta atoms

    Returns:
        Segments in residue order
    """
    segments: List[RibbonSegment] = []
    previous: Optional[np.ndarray] = None
    previous_monomer: Optional[Monomer] = None

    for monomer in monomers:
        try:
            current = monomer_control_points(monomer, centroid, mean_offset)
        except MissingAtomError as e:
            logger.warning("Skipping ribbon around residue: %s", e)
            previous = previous_monomer = None
            continue

        if previous is not None:
            segments.append(
                RibbonSegment(
                    points=np.vstack([previous, current]),
                    chain=monomer.chain,
                    model_number=monomer.model,
                    previous_residue_id=previous_monomer.residue_id,
                    residue_id=monomer.residue_id,
                )
            )
        previous, previous_monomer = current, monomer

    return segments


def complex_ribbons(
    structure: Complex,
    fallback_offset: Point = FALLBACK_CBETA_OFFSET,
    empty_model_centroid: Point = ORIGIN,
    progress: Optional[Callable[[int, int], None]] = None,
) -> List[List[RibbonSegment]]:
    """
    Compute centred ribbon segments for every polymer of a complex.

    Args:
        structure: Parsed complex
        fallback_offset: Mean C-beta offset used when no residue has a C-beta
        empty_model_centroid: Centroid used for models without atoms
        progress: Optional callback receiving (polymers processed, total)

    Returns:
        One list of segments per polymer, in polymer order
    """
    centroids = mean_point_per_model(structure, empty_model_centroid)
    offset = mean_cbeta_offset(structure, fallback_offset)
    total = len(structure.polymers)

    ribbons = []
    for i, polymer in enumerate(structure.polymers):
        centroid = centroids[Complex.model_slot(polymer.model_number)]
        ribbons.append(ribbon_segments(polymer.monomers, centroid, offset))
        if progress:
            progress(i + 1, total)
    return ribbons
