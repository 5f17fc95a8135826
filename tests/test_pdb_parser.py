import pytest

from foldview.core.domain.models import SecondaryStructure
from foldview.core.exceptions import PDBParseError
from foldview.core.parsing import ParserState, finish, parse_pdb, step


class TestParsePeptide:
    """Tests for a single-model file without MODEL records."""

    def test_hierarchy(self, peptide_pdb):
        structure = parse_pdb(peptide_pdb)

        assert structure.number_of_models == 0
        assert structure.chains == ("A",)
        assert structure.protein
        assert len(structure.polymers) == 1

        polymer = structure.polymers[0]
        assert polymer.label == "A"
        assert polymer.number == 1
        assert polymer.model_number == 0
        assert polymer.sequence == "AGS"
        assert [m.residue_id for m in polymer.monomers] == [1, 2, 3]
        assert [len(m.atoms) for m in polymer.monomers] == [5, 4, 6]

    def test_atom_fields(self, peptide_pdb):
        atom = parse_pdb(peptide_pdb).polymers[0].monomers[0].c_alpha
        assert atom.name == "CA"
        assert atom.element == "C"
        assert atom.atom_id == 2
        assert atom.coordinates == pytest.approx((1.45, 0.0, 0.0))
        assert atom.model == 0
        assert atom.chain == "A"

    def test_helix_tags_residues(self, peptide_pdb):
        monomers = parse_pdb(peptide_pdb).polymers[0].monomers
        assert [m.secondary_structure for m in monomers] == [
            SecondaryStructure.HELIX,
            SecondaryStructure.HELIX,
            None,
        ]

    def test_crlf_line_endings(self, peptide_pdb):
        lf = parse_pdb(peptide_pdb)
        crlf = parse_pdb(peptide_pdb.replace("\n", "\r\n"))
        assert crlf.polymers[0].sequence == lf.polymers[0].sequence
        assert len(crlf.atoms) == len(lf.atoms) == 15


class TestParseModels:
    """Tests for multi-model, multi-chain files."""

    def test_polymers_per_model_and_chain(self, nmr_pdb):
        structure = parse_pdb(nmr_pdb)

        assert structure.number_of_models == 2
        assert structure.model_count == 2
        assert structure.chains == ("A", "B")
        assert [(p.label, p.number, p.model_number) for p in structure.polymers] == [
            ("A", 1, 1),
            ("B", 2, 1),
            ("A", 1, 2),
            ("B", 2, 2),
        ]

    def test_atoms_belong_to_their_polymer(self, nmr_pdb):
        for polymer in parse_pdb(nmr_pdb).polymers:
            assert len(polymer.atoms) == 15
            assert {atom.chain for atom in polymer.atoms} == {polymer.label}
            assert {atom.model for atom in polymer.atoms} == {polymer.model_number}

    def test_sheet_tags_only_its_chain(self, nmr_pdb):
        structure = parse_pdb(nmr_pdb)
        chain_a, chain_b = structure.first_model_polymers()
        assert all(m.secondary_structure is None for m in chain_a.monomers)
        assert [m.secondary_structure for m in chain_b.monomers] == [
            None,
            SecondaryStructure.SHEET,
            SecondaryStructure.SHEET,
        ]

    def test_chains_are_sorted(self, make_atom_line):
        text = "\n".join(
            [
                make_atom_line(1, "CA", "ALA", "C", 1, 0.0, 0.0, 0.0),
                make_atom_line(2, "CA", "ALA", "C", 2, 3.8, 0.0, 0.0),
                make_atom_line(3, "CA", "ALA", "A", 1, 20.0, 0.0, 0.0),
                make_atom_line(4, "CA", "ALA", "A", 2, 23.8, 0.0, 0.0),
            ]
        )
        structure = parse_pdb(text)
        assert structure.chains == ("A", "C")
        assert [p.label for p in structure.polymers] == ["C", "A"]
        assert [len(p.monomers) for p in structure.polymers] == [2, 2]
        assert [p.number for p in structure.polymers] == [1, 2]


class TestRecordFiltering:
    """Tests for the ATOM records that are skipped or normalized."""

    def test_hydrogens_are_dropped(self, make_atom_line):
        text = "\n".join(
            [
                make_atom_line(1, "N", "GLY", "A", 1, 0.0, 0.0, 0.0),
                make_atom_line(2, "H", "GLY", "A", 1, 0.0, 1.0, 0.0),
                make_atom_line(3, "CA", "GLY", "A", 1, 1.5, 0.0, 0.0),
            ]
        )
        monomer = parse_pdb(text).polymers[0].monomers[0]
        assert [atom.name for atom in monomer.atoms] == ["N", "CA"]

    def test_only_primary_alternate_locations_are_kept(self, make_atom_line):
        text = "\n".join(
            [
                make_atom_line(1, "CA", "SER", "A", 1, 0.0, 0.0, 0.0),
                make_atom_line(2, "OG", "SER", "A", 1, 1.0, 0.0, 0.0, alt_loc="A"),
                make_atom_line(3, "OG", "SER", "A", 1, 1.2, 0.0, 0.0, alt_loc="B"),
            ]
        )
        atoms = parse_pdb(text).polymers[0].monomers[0].atoms
        assert [atom.atom_id for atom in atoms] == [1, 2]

    def test_unknown_residue_becomes_x(self, make_atom_line):
        text = "\n".join(
            [
                make_atom_line(1, "CA", "ZZZ", "A", 1, 0.0, 0.0, 0.0),
                make_atom_line(2, "CA", "DAL", "A", 2, 3.8, 0.0, 0.0),
                make_atom_line(3, "CA", "ZZZ", "A", 3, 7.6, 0.0, 0.0),
            ]
        )
        structure = parse_pdb(text)
        assert structure.protein
        assert structure.polymers[0].sequence == "XAX"

    def test_nucleotides_are_skipped(self, make_atom_line):
        text = "\n".join(
            [
                make_atom_line(1, "P", "DA", "A", 1, 0.0, 0.0, 0.0),
                make_atom_line(2, "P", "DT", "A", 2, 6.0, 0.0, 0.0),
            ]
        )
        structure = parse_pdb(text)
        assert not structure.protein
        assert structure.is_empty
        assert structure.chains == ()

    def test_non_atom_records_are_ignored(self, make_atom_line):
        text = "\n".join(
            [
                "REMARK   2 RESOLUTION. 1.80 ANGSTROMS.",
                make_atom_line(1, "CA", "ALA", "A", 1, 0.0, 0.0, 0.0),
                "HETATM    2  O   HOH A 101       5.000   5.000   5.000  1.00  0.00           O",
                "TER",
            ]
        )
        structure = parse_pdb(text)
        assert len(structure.atoms) == 1


class TestEdgeCases:
    def test_empty_input(self):
        structure = parse_pdb("")
        assert structure.polymers == ()
        assert structure.number_of_models == 0
        assert structure.chains == ()
        assert not structure.protein

    def test_single_atom(self, make_atom_line):
        structure = parse_pdb(make_atom_line(1, "CA", "GLY", "A", 4, 1.0, 2.0, 3.0))
        assert len(structure.polymers) == 1
        assert structure.polymers[0].monomers[0].residue_id == 4

    def test_malformed_coordinate_raises(self, make_atom_line):
        good = make_atom_line(1, "CA", "ALA", "A", 1, 0.0, 0.0, 0.0)
        bad = make_atom_line(2, "CA", "ALA", "A", 2, 0.0, 0.0, 0.0)
        bad = bad[:30] + "   abcde" + bad[38:]

        with pytest.raises(PDBParseError) as excinfo:
            parse_pdb("\n".join([good, bad]))
        assert excinfo.value.line_number == 2
        assert excinfo.value.line == bad

    @pytest.mark.parametrize("text", ["     nan", "     inf", "    -inf", "  1_0.00"])
    def test_non_numeric_coordinate_raises(self, make_atom_line, text):
        line = make_atom_line(1, "CA", "ALA", "A", 1, 0.0, 0.0, 0.0)
        line = line[:30] + f"{text:>8}" + line[38:]

        with pytest.raises(PDBParseError) as excinfo:
            parse_pdb(line)
        assert excinfo.value.line_number == 1

    def test_malformed_atom_serial_raises(self, make_atom_line):
        line = make_atom_line(1, "CA", "ALA", "A", 1, 0.0, 0.0, 0.0)
        line = line[:6] + "  ab1" + line[11:]
        with pytest.raises(PDBParseError, match="atom serial number"):
            parse_pdb(line)

    @pytest.mark.parametrize("text", ["  x1", " 1_0"])
    def test_malformed_residue_number_raises(self, make_atom_line, text):
        line = make_atom_line(1, "CA", "ALA", "A", 1, 0.0, 0.0, 0.0)
        line = line[:22] + text + line[26:]
        with pytest.raises(PDBParseError, match="residue sequence number"):
            parse_pdb(line)

    def test_hydrogens_alone_still_mark_protein(self, make_atom_line):
        text = "\n".join(
            [
                make_atom_line(1, "H", "ALA", "A", 1, 0.0, 0.0, 0.0),
                make_atom_line(2, "HA", "ALA", "A", 1, 1.0, 0.0, 0.0, element="H"),
            ]
        )
        structure = parse_pdb(text)
        assert structure.protein
        assert structure.polymers == ()
        assert structure.chains == ()

    def test_malformed_helix_raises(self, make_helix_line):
        line = make_helix_line("A", 1, 5)
        line = line[:21] + "  ??" + line[25:]
        with pytest.raises(PDBParseError):
            parse_pdb(line)


class TestTransitions:
    """Tests for the individual parser state transitions."""

    def test_helix_and_sheet_ranges(self, make_helix_line, make_sheet_line):
        state = step(ParserState(), (1, make_helix_line("A", 3, 5)))
        state = step(state, (2, make_sheet_line("A", 5, 6)))

        assert state.helices == {"A": {3, 4, 5}}
        assert state.sheets == {"A": {5, 6}}
        assert state.secondary_structure_of("A", 5) is SecondaryStructure.HELIX
        assert state.secondary_structure_of("A", 6) is SecondaryStructure.SHEET
        assert state.secondary_structure_of("B", 5) is None

    def test_model_records_count(self):
        state = ParserState()
        for number, line in enumerate(["MODEL        1", "ENDMDL", "MODEL        2"], 1):
            state = step(state, (number, line))
        assert state.model == 2
        assert state.line_number == 3

    def test_residue_boundary_closes_monomer(self, make_atom_line):
        state = step(ParserState(), (1, make_atom_line(1, "CA", "ALA", "A", 1, 0.0, 0.0, 0.0)))
        assert state.monomers == []
        assert len(state.atoms) == 1

        state = step(state, (2, make_atom_line(2, "CA", "GLY", "A", 2, 3.8, 0.0, 0.0)))
        assert [m.label for m in state.monomers] == ["A"]
        assert state.previous_residue_id == 2
        assert state.previous_residue_name == "GLY"

    def test_finish_flushes_pending_residue(self, make_atom_line):
        state = step(ParserState(), (1, make_atom_line(1, "CA", "ALA", "A", 1, 0.0, 0.0, 0.0)))
        structure = finish(state)
        assert structure.polymers[0].sequence == "A"

    def test_finish_on_fresh_state_is_empty(self):
        assert finish(ParserState()).is_empty
