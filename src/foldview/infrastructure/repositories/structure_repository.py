# src/foldview/infrastructure/repositories/structure_repository.py
"""Repository implementation for PDB structures stored in a directory."""

import logging
import os
from typing import Dict, List, Optional

from ...core.domain.models.complex import Complex
from ...core.interfaces.repository import Repository
from ...core.parsing.pdb_parser import parse_pdb

logger = logging.getLogger(__name__)

PDB_EXTENSION = ".pdb"


class StructureRepository(Repository[Complex]):
    """Repository for handling structure storage and retrieval.

    Files are read and written verbatim, so the original text of a structure
    round-trips unchanged next to its parsed Complex.
    """

    def __init__(self, data_dir: str):
        """
        Initialize repository with data directory.

        Args:
            data_dir: Directory containing ``<id>.pdb`` files
        """
        self._data_dir = data_dir
        self._cache: Dict[str, Complex] = {}

    def _path(self, id: str) -> str:
        return os.path.join(self._data_dir, f"{id}{PDB_EXTENSION}")

    def get(self, id: str) -> Optional[Complex]:
        """
        Retrieve the parsed structure for an ID.

        Args:
            id: Structure identifier (file name without extension)

        Returns:
            Parsed Complex, or None if no such file exists

        Raises:
            PDBParseError: If the stored file is corrupted
        """
        if id in self._cache:
            return self._cache[id]

        source = self.get_source(id)
        if source is None:
            return None

        structure = parse_pdb(source)
        logger.info(
            "Loaded %s: %d models, %d polymers",
            id,
            structure.number_of_models,
            len(structure.polymers),
        )
        self._cache[id] = structure
        return structure

    def get_source(self, id: str) -> Optional[str]:
        """Return the unmodified text of a stored structure."""
        file_path = self._path(id)
        if not os.path.exists(file_path):
            return None
        with open(file_path, "r", newline="") as f:
            return f.read()

    def list(self) -> List[str]:
        """
        List all available structures.

        Returns:
            Sorted structure IDs
        """
        if not os.path.isdir(self._data_dir):
            return []
        return sorted(
            os.path.splitext(file_name)[0]
            for file_name in os.listdir(self._data_dir)
            if file_name.endswith(PDB_EXTENSION)
        )

    def save(self, id: str, source: str) -> Complex:
        """
        Store the text of a structure and return it parsed.

        The text is parsed first, so a corrupted file is never written.

        Raises:
            PDBParseError: If the text is corrupted
        """
        structure = parse_pdb(source)
        os.makedirs(self._data_dir, exist_ok=True)
        with open(self._path(id), "w", newline="") as f:
            f.write(source)
        self._cache[id] = structure
        logger.info("Saved %s to %s", id, self._data_dir)
        return structure
