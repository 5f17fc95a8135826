"""Abstract base class for repositories following the Repository Pattern."""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """
    Generic repository interface for structures identified by a string ID.

    Structures are stored as their original text so they round-trip
    unchanged; ``get`` returns the parsed entity.
    """

    @abstractmethod
    def get(self, id: str) -> Optional[T]:
        """Retrieve a parsed entity by ID, or None if absent."""
        pass

    @abstractmethod
    def list(self) -> List[str]:
        """List the IDs of all stored entities."""
        pass

    @abstractmethod
    def get_source(self, id: str) -> Optional[str]:
        """Retrieve the original text of an entity."""
        pass

    @abstractmethod
    def save(self, id: str, source: str) -> T:
        """Store an entity's original text and return the parsed entity."""
        pass
