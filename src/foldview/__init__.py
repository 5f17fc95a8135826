"""Parse PDB structures and derive bonds, ribbons and backbone torsions."""

from .core import (
    Complex,
    GeometrySettings,
    PDBParseError,
    StructureService,
    parse_pdb,
)

__version__ = "0.1.0"

__all__ = [
    "Complex",
    "GeometrySettings",
    "PDBParseError",
    "StructureService",
    "parse_pdb",
]
