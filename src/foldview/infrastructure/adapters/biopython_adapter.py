"""Adapter handing parsed structures to Biopython."""

import logging
import warnings

import numpy as np
from Bio.PDB.PDBExceptions import PDBConstructionWarning
from Bio.PDB.Structure import Structure
from Bio.PDB.StructureBuilder import StructureBuilder

from ...core.domain.models.complex import Complex
from ...core.domain.tables.residues import one_to_three

logger = logging.getLogger(__name__)


class BiopythonAdapter:
    """Adapter for Bio.PDB structure analysis functionality."""

    def to_structure(self, structure: Complex, structure_id: str = "structure") -> Structure:
        """
        Convert a Complex to a Bio.PDB Structure.

        One Bio.PDB model is created per model slot. Residue names are rebuilt
        from the one-letter labels, so D-isomers come back under the name of
        their L form and unknown residues as UNK.

        Args:
            structure: Parsed complex
            structure_id: ID of the resulting structure

        Returns:
            Bio.PDB Structure holding the heavy atoms of the primary conformer

        Raises:
            PDBConstructionException: If a residue repeats an atom name
        """
        builder = StructureBuilder()
        builder.init_structure(structure_id)

        with warnings.catch_warnings():
            # chains split by other chains in the file are merged on purpose
            warnings.simplefilter("ignore", PDBConstructionWarning)
            for slot in range(structure.model_count):
                builder.init_model(slot, serial_num=slot + 1)
                for polymer in structure.polymers_in_model(slot):
                    builder.init_chain(polymer.label)
                    builder.init_seg("    ")
                    for monomer in polymer.monomers:
                        builder.init_residue(
                            one_to_three(monomer.label), " ", monomer.residue_id, " "
                        )
                        for atom in monomer.atoms:
                            builder.init_atom(
                                atom.name,
                                np.array(atom.coordinates, "f"),
                                0.0,
                                1.0,
                                " ",
                                f"{atom.name:^4}",
                                serial_number=atom.atom_id,
                                element=atom.element or None,
                            )

        result = builder.get_structure()
        logger.debug("Built Bio.PDB structure %s with %d models", structure_id, len(result))
        return result
