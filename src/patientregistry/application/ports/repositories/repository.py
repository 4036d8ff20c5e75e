"""
Generic repository interface for keyed entity storage.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Abstract keyed store, keyed by integer identity."""

    @abstractmethod
    def add(self, key: int, entity: T) -> int:
        """Insert an entity under a new key and return the key."""
        pass

    @abstractmethod
    def find_by_id(self, key: int) -> Optional[T]:
        """Find an entity by key; None when absent."""
        pass

    @abstractmethod
    def find_all(self) -> List[T]:
        """Return every stored entity in insertion order."""
        pass

    @abstractmethod
    def update(self, key: int, entity: T) -> None:
        """Replace the entity stored under an existing key."""
        pass

    @abstractmethod
    def delete(self, key: int) -> None:
        """Remove the entity stored under an existing key."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every entity."""
        pass
