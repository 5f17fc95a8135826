"""Element table: display radius (Angstroms) and color per element symbol."""

from typing import Dict

DEFAULT_ELEMENT = "DEFAULT"

# Covalent radii, Handbook of Chemistry and Physics (97th ed.), section 9.57
RADII: Dict[str, float] = {
    "O": 0.64,
    "C": 0.75,
    "N": 0.71,
    "S": 1.04,
    "SE": 1.18,
    DEFAULT_ELEMENT: 0.6,
}

COLORS: Dict[str, str] = {
    "O": "red",
    "C": "gray",
    "N": "blue",
    "S": "yellow",
    "SE": "orange",
    DEFAULT_ELEMENT: "green",
}


def table_key(element: str) -> str:
    """Return the table key used for an element symbol."""
    return element if element in RADII else DEFAULT_ELEMENT


def element_radius(element: str) -> float:
    return RADII[table_key(element)]


def element_color(element: str) -> str:
    return COLORS[table_key(element)]
