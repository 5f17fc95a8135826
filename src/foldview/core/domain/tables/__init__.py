"""Static lookup tables for residues and elements."""

from .elements import element_color, element_radius
from .residues import (
    one_to_three,
    residue_property,
    three_to_one,
    normalize_residue_name,
)

__all__ = [
    "element_color",
    "element_radius",
    "one_to_three",
    "residue_property",
    "three_to_one",
    "normalize_residue_name",
]
