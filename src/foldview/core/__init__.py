"""Core domain models, parser, geometry and services for PDB structures."""

from .config import GeometrySettings
from .domain.models import (
    Atom,
    Bond,
    Complex,
    Monomer,
    Polymer,
    RibbonSegment,
    SecondaryStructure,
    TorsionAngles,
)
from .exceptions import (
    MissingAtomError,
    PDBParseError,
    StructureFetchError,
    StructureNotFoundError,
)
from .parsing import parse_pdb
from .services import CompositionService, StructureGeometry, StructureService

__all__ = [
    "Atom",
    "Bond",
    "Complex",
    "CompositionService",
    "GeometrySettings",
    "MissingAtomError",
    "Monomer",
    "PDBParseError",
    "Polymer",
    "RibbonSegment",
    "SecondaryStructure",
    "StructureFetchError",
    "StructureGeometry",
    "StructureNotFoundError",
    "StructureService",
    "TorsionAngles",
    "parse_pdb",
]
