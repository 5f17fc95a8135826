#!/usr/bin/env python3
# src/foldview/core/geometry/bonds.py

"""
Bond inference by interatomic distance.

Two atoms are reported as bonded when they belong to the same model and lie
within the cutoff (2 Angstroms by default). This is a heuristic, not a bond
order computation: it yields false positives and negatives near the cutoff
and between atoms that are close in space but unrelated. Every pair is
checked, so the cost is quadratic in the number of atoms; there is no
spatial partitioning.
"""

import logging
from typing import Callable, List, Optional, Sequence

import networkx as nx
import numpy as np

from ..config import BOND_CUTOFF
from ..domain.models.atom import Atom
from ..domain.models.bond import Bond

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


def infer_bonds(
    atoms: Sequence[Atom],
    cutoff: float = BOND_CUTOFF,
    progress: Optional[ProgressCallback] = None,
) -> List[Bond]:
    """
    Compute the bonded pairs among a list of atoms.

    Args:
        atoms: Atoms in file order, typically the atoms of one polymer
        cutoff: Maximum distance (inclusive) between bonded atoms
        progress: Optional callback receiving (atoms processed, total atoms)

    Returns:
        Bonds ordered by the index of their first and then their second atom;
        each unordered pair appears once and no atom is bonded to itself
    """
    total = len(atoms)
    bonds: List[Bond] = []
    if total < 2:
        if progress:
            progress(total, total)
        return bonds

    coords = np.array([atom.coordinates for atom in atoms], dtype=np.float64)
    models = np.array([atom.model for atom in atoms])

    for i in range(total - 1):
        distances = np.linalg.norm(coords[i + 1 :] - coords[i], axis=1)
        bonded = np.nonzero((distances <= cutoff) & (models[i + 1 :] == models[i]))[0]
        for offset in bonded:
            bonds.append(Bond(atoms[i], atoms[i + 1 + offset], float(distances[offset])))
        if progress:
            progress(i + 1, total)
    if progress:
        progress(total, total)

    logger.debug("Inferred %d bonds among %d atoms", len(bonds), total)
    return bonds


def bond_graph(atoms: Sequence[Atom], bonds: Sequence[Bond]) -> nx.Graph:
    """
    Build a NetworkX graph with atoms as nodes and bonds as edges.

    Args:
        atoms: Atoms to add as nodes
        bonds: Bonds between those atoms

    Returns:
        Graph whose edges carry the bond length as ``weight``
    """
    graph = nx.Graph()
    for atom in atoms:
        graph.add_node(
            atom,
            name=atom.name,
            element=atom.element,
            coord=atom.coordinates,
            model=atom.model,
            chain=atom.chain,
        )
    for bond in bonds:
        graph.add_edge(bond.atom1, bond.atom2, weight=bond.length)
    return graph
