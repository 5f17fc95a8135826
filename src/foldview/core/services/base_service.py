"""Base service class implementing common business logic patterns."""

from typing import Generic, Optional, TypeVar

from ..exceptions import StructureNotFoundError
from ..interfaces.repository import Repository

T = TypeVar("T")


class BaseService(Generic[T]):
    """
    Base service class providing common business logic operations.

    Implements the Service Layer pattern; the repository is optional so a
    service can also work on text or entities handed in by the caller.
    """

    def __init__(self, repository: Optional[Repository[T]] = None):
        """Initialize service with an optional repository dependency."""
        self._repository = repository

    def get_by_id(self, id: str) -> T:
        """
        Retrieve entity by ID.

        Args:
            id: Entity identifier

        Returns:
            Entity instance

        Raises:
            StructureNotFoundError: If no repository is configured or the
                entity is not found
        """
        if self._repository is None:
            raise StructureNotFoundError(f"No repository configured to look up {id}")
        entity = self._repository.get(id)
        if entity is None:
            raise StructureNotFoundError(f"Entity with id {id} not found")
        return entity
