# src/foldview/core/services/structure_service.py
"""Service turning PDB text into a Complex and its derived geometry."""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

import numpy as np
from tqdm.auto import tqdm

from ..config import GeometrySettings
from ..domain.models.bond import Bond
from ..domain.models.complex import Complex
from ..domain.models.ribbon_segment import RibbonSegment
from ..domain.models.torsion import TorsionAngles
from ..geometry.bonds import infer_bonds
from ..geometry.centering import mean_point_per_model
from ..geometry.dihedral import backbone_torsions
from ..geometry.ribbon import complex_ribbons
from ..interfaces.repository import Repository
from ..parsing.pdb_parser import parse_pdb
from .base_service import BaseService

logger = logging.getLogger(__name__)


@dataclass
class StructureGeometry:
    """Everything derived from one Complex for display and reporting."""

    structure: Complex
    bonds: List[List[Bond]]
    ribbons: List[List[RibbonSegment]]
    torsions: List[TorsionAngles]
    centroids: np.ndarray

    @property
    def bond_count(self) -> int:
        return sum(len(bonds) for bonds in self.bonds)

    @property
    def segment_count(self) -> int:
        return sum(len(segments) for segments in self.ribbons)


def _advance(pbar: tqdm) -> Callable[[int, int], None]:
    """Adapt a (processed, total) callback to incremental tqdm updates."""
    reported = 0

    def callback(processed: int, total: int) -> None:
        nonlocal reported
        pbar.update(processed - reported)
        reported = processed

    return callback


class StructureService(BaseService[Complex]):
    """Parses structures and derives bonds, ribbons, torsions and centroids."""

    def __init__(
        self,
        repository: Optional[Repository[Complex]] = None,
        settings: Optional[GeometrySettings] = None,
        show_progress: bool = False,
    ):
        """
        Initialize the service.

        Args:
            repository: Optional source of stored structures
            settings: Geometry settings, defaults if omitted
            show_progress: Display tqdm progress bars for long computations
        """
        super().__init__(repository)
        self.settings = settings or GeometrySettings()
        self._show_progress = show_progress

    def parse(self, text: str) -> Complex:
        """
        Parse PDB text.

        Raises:
            PDBParseError: If the text is corrupted
        """
        structure = parse_pdb(text)
        if not structure.protein:
            logger.warning("Structure contains no protein residues")
        return structure

    def compute_bonds(self, structure: Complex) -> List[List[Bond]]:
        """
        Infer bonds polymer by polymer.

        Args:
            structure: Parsed complex

        Returns:
            One list of bonds per polymer, in polymer order
        """
        total = sum(len(polymer.atoms) for polymer in structure.polymers)
        bonds = []
        with tqdm(
            total=total,
            desc="Inferring bonds",
            unit="atom",
            disable=not self._show_progress,
        ) as pbar:
            for polymer in structure.polymers:
                bonds.append(
                    infer_bonds(
                        polymer.atoms,
                        cutoff=self.settings.bond_cutoff,
                        progress=_advance(pbar),
                    )
                )
        logger.info(
            "Inferred %d bonds in %d polymers",
            sum(len(b) for b in bonds),
            len(bonds),
        )
        return bonds

    def compute_ribbons(self, structure: Complex) -> List[List[RibbonSegment]]:
        with tqdm(
            total=len(structure.polymers),
            desc="Computing ribbons",
            unit="chain",
            disable=not self._show_progress,
        ) as pbar:
            return complex_ribbons(
                structure,
                fallback_offset=self.settings.fallback_offset,
                empty_model_centroid=self.settings.empty_model_centroid,
                progress=_advance(pbar),
            )

    def compute_torsions(self, structure: Complex) -> List[TorsionAngles]:
        return backbone_torsions(structure)

    def compute_centroids(self, structure: Complex) -> np.ndarray:
        return mean_point_per_model(structure, self.settings.empty_model_centroid)

    def analyze(self, structure: Complex) -> StructureGeometry:
        """Derive all geometric artifacts of a parsed complex."""
        return StructureGeometry(
            structure=structure,
            bonds=self.compute_bonds(structure),
            ribbons=self.compute_ribbons(structure),
            torsions=self.compute_torsions(structure),
            centroids=self.compute_centroids(structure),
        )

    def analyze_text(self, text: str) -> StructureGeometry:
        return self.analyze(self.parse(text))

    def analyze_by_id(self, id: str) -> StructureGeometry:
        """Load a structure from the repository and analyze it."""
        return self.analyze(self.get_by_id(id))
