"""Application services."""

from .base_service import BaseService
from .composition_service import ChainSequence, CompositionReport, CompositionService
from .structure_service import StructureGeometry, StructureService

__all__ = [
    "BaseService",
    "ChainSequence",
    "CompositionReport",
    "CompositionService",
    "StructureGeometry",
    "StructureService",
]
