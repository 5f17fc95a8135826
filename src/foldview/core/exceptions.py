"""Exceptions raised by the foldview core and its collaborators."""

from typing import Optional


class PDBParseError(ValueError):
    """A required numeric column of a PDB record could not be parsed."""

    def __init__(self, message: str, line_number: Optional[int] = None, line: str = ""):
        location = f" (line {line_number})" if line_number is not None else ""
        super().__init__(f"{message}{location}")
        self.line_number = line_number
        self.line = line


class MissingAtomError(LookupError):
    """A residue lacks an atom needed for a derived computation."""

    def __init__(self, role: str, residue_id: int, chain: str = ""):
        super().__init__(f"Residue {chain}{residue_id} has no {role} atom")
        self.role = role
        self.residue_id = residue_id
        self.chain = chain


class StructureNotFoundError(KeyError):
    """No structure with the requested identifier exists."""


class StructureFetchError(IOError):
    """Downloading a structure from a remote source failed."""
