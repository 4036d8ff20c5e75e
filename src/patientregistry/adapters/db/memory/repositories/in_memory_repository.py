"""
In-memory implementation of the generic Repository port.
"""

from typing import Dict, List, Optional, Type

from patientregistry.application.ports.repositories.repository import Repository, T
from patientregistry.domain.errors import AlreadyExistsError, NotFoundError


def _require_key(key: int) -> int:
    # bool is an int subclass but never a valid identity
    if not isinstance(key, int) or isinstance(key, bool):
        raise TypeError(f"Repository keys must be integers, got {type(key).__name__}")
    return key


class InMemoryRepository(Repository[T]):
    """Dict-backed keyed store.

    Entries are kept in insertion order. The store is not thread-safe: it is
    meant to be used from a single thread (or a single event loop).
    """

    def __init__(self, entity_type: Optional[Type[T]] = None) -> None:
        self._data: Dict[int, T] = {}
        self._entity_type = entity_type

    def _require_entity(self, entity: T) -> None:
        if self._entity_type is not None and not isinstance(entity, self._entity_type):
            raise TypeError(f"Can only store {self._entity_type.__name__} instances")

    def add(self, key: int, entity: T) -> int:
        key = _require_key(key)
        self._require_entity(entity)

        if key in self._data:
            raise AlreadyExistsError("Entity already exists.", {"key": key})

        self._data[key] = entity
        return key

    def find_by_id(self, key: int) -> Optional[T]:
        return self._data.get(_require_key(key))

    def find_all(self) -> List[T]:
        return list(self._data.values())

    def update(self, key: int, entity: T) -> None:
        key = _require_key(key)
        self._require_entity(entity)

        if key not in self._data:
            raise NotFoundError("Entity not found.", {"key": key})

        self._data[key] = entity

    def delete(self, key: int) -> None:
        key = _require_key(key)

        if key not in self._data:
            raise NotFoundError("Entity not found.", {"key": key})

        del self._data[key]

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data
