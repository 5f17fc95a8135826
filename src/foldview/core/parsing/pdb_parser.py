#!/usr/bin/env python3
# src/foldview/core/parsing/pdb_parser.py

"""
Parser for fixed-column PDB text.

The parser extracts the atoms of amino acid residues together with the
secondary structure declared by HELIX and SHEET records and arranges them
into the Complex -> Polymer -> Monomer -> Atom hierarchy.

Parsing is a fold over the lines of the file: every line is handed to
``step`` together with a ``ParserState`` accumulator, and ``finish`` turns the
final state into a Complex. Each transition can be exercised on its own.

HELIX and SHEET records are only consulted when a residue is closed, so
they have to precede the ATOM records they describe (as the format
prescribes). This ordering is not validated.
"""

import logging
import math
from dataclasses import dataclass, field
from functools import reduce
from typing import Dict, List, Optional, Set, Tuple

from ..domain.models.atom import Atom
from ..domain.models.complex import Complex
from ..domain.models.monomer import Monomer
from ..domain.models.polymer import Polymer
from ..domain.models.secondary_structure import SecondaryStructure
from ..domain.tables.residues import normalize_residue_name, three_to_one
from ..exceptions import PDBParseError

logger = logging.getLogger(__name__)

# Column ranges (0-based, half-open)
RESIDUE_NAME = slice(17, 20)
ALT_LOC = slice(16, 17)
CHAIN_ID = slice(21, 22)
RESIDUE_SEQ = slice(22, 26)
ATOM_SERIAL = slice(6, 11)
ATOM_NAME = slice(12, 16)
X_COORD = slice(30, 38)
Y_COORD = slice(38, 46)
Z_COORD = slice(46, 54)
ELEMENT = slice(76, 78)

HELIX_CHAIN = slice(19, 20)
HELIX_START = slice(21, 25)
HELIX_STOP = slice(33, 37)

SHEET_CHAIN = slice(21, 22)
SHEET_START = slice(22, 26)
SHEET_STOP = slice(33, 37)

PRIMARY_ALT_LOCS = (" ", "A")
HYDROGEN = "H"


@dataclass
class ParserState:
    """Accumulator threaded through the lines of a PDB file."""

    line_number: int = 0
    model: int = 0
    previous_model: int = 0
    previous_chain: str = ""
    previous_residue_id: Optional[int] = None
    previous_residue_name: str = ""
    polymer_count: int = 1
    atoms: List[Atom] = field(default_factory=list)
    monomers: List[Monomer] = field(default_factory=list)
    polymers: List[Polymer] = field(default_factory=list)
    helices: Dict[str, Set[int]] = field(default_factory=dict)
    sheets: Dict[str, Set[int]] = field(default_factory=dict)
    chains: Set[str] = field(default_factory=set)
    protein: bool = False

    def secondary_structure_of(
        self, chain: str, residue_id: int
    ) -> Optional[SecondaryStructure]:
        """Look up a residue in the HELIX then the SHEET ranges."""
        if residue_id in self.helices.get(chain, ()):
            return SecondaryStructure.HELIX
        if residue_id in self.sheets.get(chain, ()):
            return SecondaryStructure.SHEET
        return None


def _malformed(line: str, columns: slice, what: str, state: ParserState) -> PDBParseError:
    return PDBParseError(f"Invalid {what} {line[columns]!r}", state.line_number, line)


def _parse_int(line: str, columns: slice, what: str, state: ParserState) -> int:
    text = line[columns].strip()
    # int() also accepts digit groups such as "1_0"
    if "_" in text:
        raise _malformed(line, columns, what, state)
    try:
        return int(text)
    except ValueError as e:
        raise _malformed(line, columns, what, state) from e


def _parse_float(line: str, columns: slice, what: str, state: ParserState) -> float:
    text = line[columns].strip()
    if "_" in text:
        raise _malformed(line, columns, what, state)
    try:
        value = float(text)
    except ValueError as e:
        raise _malformed(line, columns, what, state) from e
    # float() also accepts "nan" and "inf"
    if not math.isfinite(value):
        raise _malformed(line, columns, what, state)
    return value


def close_residue(state: ParserState) -> ParserState:
    """Turn the atoms collected so far into a Monomer of the previous residue."""
    state.monomers.append(
        Monomer(
            atoms=tuple(state.atoms),
            label=three_to_one(state.previous_residue_name),
            residue_id=state.previous_residue_id,
            secondary_structure=state.secondary_structure_of(
                state.previous_chain, state.previous_residue_id
            ),
        )
    )
    state.atoms = []
    return state


def close_polymer(state: ParserState) -> ParserState:
    """Turn the monomers collected so far into a Polymer of the previous chain."""
    state.polymers.append(
        Polymer(
            monomers=tuple(state.monomers),
            number=state.polymer_count,
            label=state.previous_chain,
            model_number=state.previous_model,
        )
    )
    state.monomers = []
    return state


def read_model(state: ParserState) -> ParserState:
    state.model += 1
    return state


def _read_range(
    state: ParserState,
    line: str,
    ranges: Dict[str, Set[int]],
    chain_columns: slice,
    start_columns: slice,
    stop_columns: slice,
    record: str,
) -> ParserState:
    chain = line[chain_columns]
    start = _parse_int(line, start_columns, f"{record} start residue", state)
    stop = _parse_int(line, stop_columns, f"{record} stop residue", state)
    ranges.setdefault(chain, set()).update(range(start, stop + 1))
    return state


def read_helix(state: ParserState, line: str) -> ParserState:
    """Record every residue of a HELIX record as helical."""
    return _read_range(
        state, line, state.helices, HELIX_CHAIN, HELIX_START, HELIX_STOP, "HELIX"
    )


def read_sheet(state: ParserState, line: str) -> ParserState:
    """Record every residue of a SHEET record as strand."""
    return _read_range(
        state, line, state.sheets, SHEET_CHAIN, SHEET_START, SHEET_STOP, "SHEET"
    )


def read_atom(state: ParserState, line: str) -> ParserState:
    """
    Consume one ATOM record.

    Only residues with a three-letter name are considered; one- and
    two-letter names (nucleotides and the like) are skipped. Hydrogens and
    alternate locations other than blank/A are not kept, but the residue and
    chain boundaries they imply are still honoured.

    Args:
        state: Current parser state
        line: The ATOM record

    Returns:
        The updated state

    Raises:
        PDBParseError: If a numeric column cannot be parsed
    """
    residue_name = line[RESIDUE_NAME].strip()
    if len(residue_name) != 3:
        return state
    state.protein = True

    element = line[ELEMENT].strip()
    if element == HYDROGEN:
        return state

    chain = line[CHAIN_ID]
    state.chains.add(chain)
    if not state.monomers:
        state.previous_chain = chain
        state.previous_model = state.model

    residue_id = _parse_int(line, RESIDUE_SEQ, "residue sequence number", state)
    if state.previous_residue_id is None:
        state.previous_residue_id = residue_id
    if not state.previous_residue_name:
        state.previous_residue_name = residue_name
    state.previous_residue_name = normalize_residue_name(state.previous_residue_name)

    if state.previous_residue_id != residue_id:
        close_residue(state)
        state.previous_residue_id = residue_id
        state.previous_residue_name = residue_name

    if state.model != state.previous_model:
        close_polymer(state)
        state.polymer_count = 1
    elif chain != state.previous_chain:
        close_polymer(state)
        state.polymer_count += 1

    if line[ALT_LOC] in PRIMARY_ALT_LOCS:
        state.atoms.append(
            Atom(
                element=element,
                name=line[ATOM_NAME].strip(),
                atom_id=_parse_int(line, ATOM_SERIAL, "atom serial number", state),
                coordinates=(
                    _parse_float(line, X_COORD, "x coordinate", state),
                    _parse_float(line, Y_COORD, "y coordinate", state),
                    _parse_float(line, Z_COORD, "z coordinate", state),
                ),
                model=state.model,
                chain=chain,
            )
        )
    return state


def step(state: ParserState, numbered_line: Tuple[int, str]) -> ParserState:
    """Dispatch one line to the transition for its record type."""
    state.line_number, line = numbered_line
    if line.startswith("ATOM"):
        return read_atom(state, line)
    if line.startswith("HELIX"):
        return read_helix(state, line)
    if line.startswith("SHEET"):
        return read_sheet(state, line)
    if line.startswith("MODEL"):
        return read_model(state)
    return state


def finish(state: ParserState) -> Complex:
    """Flush the residue and polymer in progress and build the Complex."""
    if state.previous_residue_id is not None:
        close_residue(state)
        close_polymer(state)

    result = Complex(
        polymers=tuple(state.polymers),
        number_of_models=state.model,
        chains=tuple(sorted(state.chains)),
        protein=state.protein,
    )
    logger.debug(
        "Parsed %d lines: %d models, %d polymers, chains %s",
        state.line_number,
        result.number_of_models,
        len(result.polymers),
        ",".join(result.chains),
    )
    return result


def parse_pdb(text: str) -> Complex:
    """
    Parse PDB text into a Complex.

    Args:
        text: Content of a PDB file (LF or CRLF line endings)

    Returns:
        The parsed Complex; empty when the text holds no amino acid atoms

    Raises:
        PDBParseError: If a numeric column of a relevant record is malformed
    """
    return finish(reduce(step, enumerate(text.splitlines(), start=1), ParserState()))
