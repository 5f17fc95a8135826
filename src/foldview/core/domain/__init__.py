"""Core domain models and lookup tables."""

from .models import (
    Atom,
    Bond,
    Complex,
    Monomer,
    Polymer,
    RibbonSegment,
    SecondaryStructure,
    TorsionAngles,
)

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
