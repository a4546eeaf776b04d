"""Defines the abstract interface for an entity store."""

from abc import ABC, abstractmethod
from typing import Callable, Generic, List, Optional

# Import the entity capability set
from entities.entity import E


class EntityStore(ABC, Generic[E]):
    """Abstract base class for a keyed, file-backed collection of entities.

    Responsibilities:
    - Holding at most one entity per id.
    - Looking entities up by id or by predicate.
    - Writing the full collection to its backing file and reading it back.
    """

    @abstractmethod
    def add(self, entity: E) -> None:
        """Adds a new entity.

        Raises:
            NullEntityError: If ``entity`` is None.
            DuplicateKeyError: If an entity with the same id is already held.
        """
        pass

    @abstractmethod
    def get_all(self) -> List[E]:
        """Returns a new list holding every entity currently in the store."""
        pass

    @abstractmethod
    def get_by_id(self, entity_id: int) -> Optional[E]:
        """Retrieves an entity by id, or None if it is not held."""
        pass

    @abstractmethod
    def find_first_matching(self, predicate: Callable[[E], bool]) -> Optional[E]:
        """Returns the first entity satisfying ``predicate``, or None."""
        pass

    @abstractmethod
    def remove_by_id(self, entity_id: int) -> bool:
        """Removes an entity by id. Returns whether anything was removed."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Discards every entity. The backing file is left untouched."""
        pass

    @property
    @abstractmethod
    def count(self) -> int:
        """The number of entities currently held."""
        pass

    @abstractmethod
    def save_to_file(self) -> None:
        """Writes every entity to the backing file, replacing its content.

        Raises:
            OSError: If the file or its parent directory cannot be written.
        """
        pass

    @abstractmethod
    def load_from_file(self) -> None:
        """Replaces the held entities with the content of the backing file.

        A missing or empty file leaves the store unchanged.

        Raises:
            MalformedDataError: If the content cannot be parsed into entities.
            OSError: If the file exists but cannot be read.
        """
        pass

    def __len__(self) -> int:
        return self.count
