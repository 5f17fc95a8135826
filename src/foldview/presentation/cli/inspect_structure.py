"""Command-line interface for inspecting a PDB structure."""

import argparse
import csv
import json
import logging
import os
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Dict, List, Optional

from ...core.config import GeometrySettings
from ...core.exceptions import PDBParseError, StructureFetchError
from ...core.services.composition_service import CompositionService
from ...core.services.structure_service import StructureGeometry, StructureService
from ...infrastructure.clients.rcsb_client import RCSBClient

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool, log_file: Optional[str] = None) -> None:
    """Configure root logging for the command line tool."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    root_logger.setLevel(logging.INFO if verbose else logging.ERROR)


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Parse a PDB structure and report its geometry"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("pdb_file", nargs="?", help="Path to a PDB file")
    source.add_argument("--pdb-id", help="Download this entry from the RCSB PDB")
    parser.add_argument(
        "--output-dir",
        default=".",
        help="Directory for summary.json and ramachandran.csv",
    )
    parser.add_argument(
        "--bond-cutoff",
        type=float,
        default=GeometrySettings.bond_cutoff,
        help="Distance cutoff for bond inference (Angstroms)",
    )
    parser.add_argument(
        "--save-source",
        action="store_true",
        help="Also write the unmodified PDB text to the output directory",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress progress bars"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Show detailed processing information"
    )
    return parser


def build_summary(geometry: StructureGeometry) -> Dict:
    """Collect the JSON-serialisable summary of an analyzed structure."""
    structure = geometry.structure
    composition_service = CompositionService()
    composition = composition_service.composition(structure)

    return {
        "number_of_models": structure.number_of_models,
        "chains": list(structure.chains),
        "protein": structure.protein,
        "polymers": [
            {
                "chain": polymer.label,
                "number": polymer.number,
                "model": polymer.model_number,
                "residues": len(polymer.monomers),
                "atoms": len(polymer.atoms),
                "bonds": len(bonds),
                "ribbon_segments": len(segments),
            }
            for polymer, bonds, segments in zip(
                structure.polymers, geometry.bonds, geometry.ribbons
            )
        ],
        "sequences": [
            [asdict(chain) for chain in model]
            for model in composition_service.sequences(structure)
        ],
        "composition": {
            "total": composition.total,
            "residues": composition.residues,
            "secondary_structure": composition.secondary_structure,
            "properties": composition.properties,
        },
        "centroids": geometry.centroids.tolist(),
        "bonds": geometry.bond_count,
        "ribbon_segments": geometry.segment_count,
        "torsions": len(geometry.torsions),
    }


def write_ramachandran(geometry: StructureGeometry, path: Path) -> None:
    with open(path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["chain", "residue_id", "residue", "phi", "psi"])
        for torsion in geometry.torsions:
            writer.writerow(
                [
                    torsion.chain,
                    torsion.residue_id,
                    torsion.label,
                    f"{torsion.phi:.3f}",
                    f"{torsion.psi:.3f}",
                ]
            )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the structure inspection CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    try:
        settings = GeometrySettings(bond_cutoff=args.bond_cutoff)
    except ValueError as e:
        parser.error(str(e))

    if args.pdb_id:
        name = args.pdb_id.lower()
        try:
            text = RCSBClient().download(args.pdb_id)
        except StructureFetchError as e:
            logger.error("Could not download %s: %s", args.pdb_id, e)
            return 1
    else:
        name = Path(args.pdb_file).stem
        try:
            with open(args.pdb_file, "r", encoding="utf-8", newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Could not read %s: %s", args.pdb_file, e)
            return 1

    service = StructureService(settings=settings, show_progress=not args.quiet)
    try:
        structure = service.parse(text)
    except PDBParseError as e:
        logger.error("The PDB file %s is corrupted: %s", name, e)
        return 1

    if not structure.protein:
        print(f"{name}: no protein present")

    geometry = service.analyze(structure)

    output_dir = Path(args.output_dir)
    os.makedirs(output_dir, exist_ok=True)
    summary = build_summary(geometry)
    with open(output_dir / "summary.json", "w") as f:
        json.dump(summary, f, indent=2)
    write_ramachandran(geometry, output_dir / "ramachandran.csv")
    if args.save_source:
        with open(output_dir / f"{name}.pdb", "w", newline="") as f:
            f.write(text)

    print(
        f"{name}: {len(structure.polymers)} polymers, "
        f"{structure.model_count} model(s), chains {', '.join(structure.chains) or '-'}, "
        f"{geometry.bond_count} bonds, {len(geometry.torsions)} torsion pairs"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
