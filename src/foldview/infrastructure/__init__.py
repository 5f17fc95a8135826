"""Infrastructure: structure storage, remote download and library adapters."""

from .adapters.biopython_adapter import BiopythonAdapter
from .clients.rcsb_client import RCSBClient
from .repositories.structure_repository import StructureRepository

__all__ = ["BiopythonAdapter", "RCSBClient", "StructureRepository"]
