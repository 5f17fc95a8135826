"""Geometry derived from a parsed structure."""

from .bonds import bond_graph, infer_bonds
from .centering import mean_point_per_model
from .dihedral import backbone_torsions, dihedral
from .ribbon import (
    complex_ribbons,
    mean_cbeta_offset,
    monomer_control_points,
    ribbon_segments,
)

__all__ = [
    "backbone_torsions",
    "bond_graph",
    "complex_ribbons",
    "dihedral",
    "infer_bonds",
    "mean_cbeta_offset",
    "mean_point_per_model",
    "monomer_control_points",
    "ribbon_segments",
]
