"""Domain model classes."""

from .atom import Atom
from .bond import Bond
from .complex import Complex
from .monomer import Monomer
from .polymer import Polymer
from .ribbon_segment import RibbonSegment
from .secondary_structure import SecondaryStructure
from .torsion import TorsionAngles

__all__ = [
    "Atom",
    "Bond",
    "Complex",
    "Monomer",
    "Polymer",
    "RibbonSegment",
    "SecondaryStructure",
    "TorsionAngles",
]
