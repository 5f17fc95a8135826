"""Secondary structure classification of a residue."""

from enum import Enum


class SecondaryStructure(Enum):
    """HELIX or SHEET as declared by HELIX/SHEET records; COIL otherwise."""

    HELIX = "H"
    SHEET = "S"
    COIL = " "

    @property
    def code(self) -> str:
        """Single character used in secondary structure tracks."""
        return self.value
