# src/foldview/core/services/composition_service.py
"""Service reporting sequences and residue composition of a structure."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ..domain.models.complex import Complex
from ..domain.models.monomer import Monomer
from ..domain.tables.residues import one_to_three, residue_property

logger = logging.getLogger(__name__)


@dataclass
class CompositionReport:
    """Counts of residues, secondary structure types and residue properties."""

    total: int = 0
    residues: Dict[str, int] = field(default_factory=dict)
    secondary_structure: Dict[str, int] = field(default_factory=dict)
    properties: Dict[str, int] = field(default_factory=dict)

    @staticmethod
    def fractions(counts: Dict[str, int]) -> Dict[str, float]:
        """Convert counts to fractions of their sum."""
        total = sum(counts.values())
        return {key: count / total for key, count in counts.items()} if total else {}


@dataclass(frozen=True)
class ChainSequence:
    """One-letter sequence of a polymer with its aligned secondary structure."""

    chain: str
    sequence: str
    secondary_structure: str


class CompositionService:
    """Service for sequence and composition reports."""

    def composition(
        self, structure: Complex, selection: Optional[Sequence[Monomer]] = None
    ) -> CompositionReport:
        """
        Count residues, secondary structure and residue properties.

        All models are assumed to share one composition, so only the first
        model is counted unless a selection of monomers is given.

        Args:
            structure: Parsed complex
            selection: Optional monomers to count instead of the first model

        Returns:
            CompositionReport with residues keyed by three-letter code
        """
        monomers = list(selection) if selection else structure.first_model_monomers()
        return self.count(monomers)

    @staticmethod
    def count(monomers: Sequence[Monomer]) -> CompositionReport:
        residues = Counter(one_to_three(m.label) for m in monomers)
        secondary = Counter(m.secondary_structure_or_coil.name for m in monomers)
        properties = Counter(residue_property(m.label) for m in monomers)
        return CompositionReport(
            total=len(monomers),
            residues=dict(residues),
            secondary_structure=dict(secondary),
            properties=dict(properties),
        )

    def sequences(self, structure: Complex) -> List[List[ChainSequence]]:
        """
        Build the sequence of every polymer, grouped by model slot.

        Returns:
            One list per model slot, each holding the chains of that model
        """
        per_model: List[List[ChainSequence]] = [[] for _ in range(structure.model_count)]
        for polymer in structure.polymers:
            per_model[Complex.model_slot(polymer.model_number)].append(
                ChainSequence(
                    chain=polymer.label,
                    sequence=polymer.sequence,
                    secondary_structure="".join(
                        m.secondary_structure_or_coil.code for m in polymer.monomers
                    ),
                )
            )
        return per_model

    @staticmethod
    def has_secondary_structure(structure: Complex) -> bool:
        """Whether any residue is tagged HELIX or SHEET."""
        return any(m.secondary_structure is not None for m in structure.monomers)
