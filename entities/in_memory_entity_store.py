"""In-memory implementation of the EntityStore interface, persisted as JSON."""

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Set, Type

# Import configuration settings
import config

# Import the interface and data structures
from entities.entity import E
from entities.entity_store import EntityStore
from entities.errors import (
    DuplicateKeyError,
    MalformedDataError,
    NotFoundError,
    NullEntityError,
)
from thefuzz import process


class InMemoryEntityStore(EntityStore[E]):
    """Holds entities in a dict keyed by id and persists them to a JSON file.

    The dict is the single source of truth while the process runs. The backing
    file may be stale or absent until ``save_to_file`` is called. The store
    performs no locking; callers sharing it across threads must serialize
    access themselves.
    """

    def __init__(self, file_path: str, entity_type: Type[E]):
        """Initializes an empty store.

        Args:
            file_path: Path of the JSON file used by save/load.
            entity_type: The entity class held by this store. Its ``from_dict``
                is used to rebuild entities when loading.
        """
        if not file_path:
            raise ValueError("Store file_path cannot be empty.")
        self._entities: Dict[int, E] = {}
        self._file_path = Path(file_path)
        self._entity_type = entity_type
        logging.info(
            "Initialized empty %s store backed by: %s",
            entity_type.__name__,
            self._file_path,
        )

    @classmethod
    def from_data(
        cls, file_path: str, entity_type: Type[E], entity_data: List[Dict[str, Any]]
    ) -> "InMemoryEntityStore[E]":
        """Creates a store populated from a list of entity records."""
        store = cls(file_path, entity_type)
        for i, data in enumerate(entity_data):
            try:
                store.add(entity_type.from_dict(data))
            except (KeyError, TypeError, ValueError) as e:
                raise ValueError(
                    f"Failed to process entity data at index {i}: {e}"
                ) from e

        logging.info("Finished initialization from data. Loaded %d entities.", store.count)
        return store

    @property
    def file_path(self) -> Path:
        return self._file_path

    @property
    def entity_type(self) -> Type[E]:
        return self._entity_type

    # --- Core Data Storage and Access ---

    def add(self, entity: E) -> None:
        """Adds a new entity, rejecting None, foreign types and duplicate ids."""
        if entity is None:
            raise NullEntityError("Entity cannot be None.")
        if not isinstance(entity, self._entity_type):
            raise TypeError(
                f"Expected {self._entity_type.__name__}, got {type(entity).__name__}."
            )
        if entity.id in self._entities:
            raise DuplicateKeyError(f"Entity with ID {entity.id} already exists.")
        self._entities[entity.id] = entity
        logging.info("Added entity to store: ID %d", entity.id)

    def get_all(self) -> List[E]:
        """Returns a new list of all entities."""
        return list(self._entities.values())

    def get_by_id(self, entity_id: int) -> Optional[E]:
        """Retrieves an entity by its id."""
        return self._entities.get(entity_id)

    def require(self, entity_id: int) -> E:
        """Retrieves an entity by its id, raising NotFoundError on a miss."""
        entity = self._entities.get(entity_id)
        if entity is None:
            raise NotFoundError(f"Entity with ID {entity_id} was not found.")
        return entity

    def contains(self, entity_id: int) -> bool:
        return entity_id in self._entities

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entities

    def find_first_matching(self, predicate: Callable[[E], bool]) -> Optional[E]:
        """Linear scan in insertion order."""
        for entity in self._entities.values():
            if predicate(entity):
                return entity
        return None

    def find_by_name(self, name: str) -> Optional[E]:
        """Looks up an entity by name, exact (case-insensitive) first, then fuzzy."""
        if not self._entities or not name:
            return None

        # Build name map on the fly
        name_to_id_map: Dict[str, int] = {}
        ambiguous_names: Set[str] = set()
        for entity in self._entities.values():
            lower_name = entity.name.lower()
            if lower_name in name_to_id_map and name_to_id_map[lower_name] != entity.id:
                ambiguous_names.add(lower_name)
            else:
                name_to_id_map[lower_name] = entity.id

        lookup_name = name.lower()

        # Exact match wins; an ambiguous exact name returns the first holder
        if lookup_name in name_to_id_map:
            if lookup_name in ambiguous_names:
                logging.warning(
                    "Name '%s' is shared by several entities. Returning the first.", name
                )
            return self._entities.get(name_to_id_map[lookup_name])

        best_match, score = process.extractOne(lookup_name, list(name_to_id_map.keys()))
        if score >= config.NAME_MATCH_THRESHOLD:
            if best_match in ambiguous_names:
                logging.warning(
                    "Fuzzy match '%s' for '%s' is ambiguous. Returning one possibility.",
                    best_match,
                    name,
                )
            return self._entities.get(name_to_id_map[best_match])

        return None  # No good match found

    def replace(self, entity: E) -> None:
        """Swaps the stored value for ``entity.id`` with ``entity``."""
        if entity is None:
            raise NullEntityError("Entity cannot be None.")
        if entity.id not in self._entities:
            raise NotFoundError(f"Entity with ID {entity.id} was not found.")
        self._entities[entity.id] = entity

    def update_quantity(self, entity_id: int, new_quantity: int) -> E:
        """Replaces an entity with a copy carrying ``new_quantity`` and returns it."""
        updated = self.require(entity_id).with_quantity(new_quantity)
        self._entities[entity_id] = updated
        logging.info("Updated quantity of ID %d to %d", entity_id, new_quantity)
        return updated

    def remove_by_id(self, entity_id: int) -> bool:
        if self._entities.pop(entity_id, None) is None:
            return False
        logging.info("Removed entity with ID %d", entity_id)
        return True

    def remove_first_matching(self, predicate: Callable[[E], bool]) -> bool:
        entity = self.find_first_matching(predicate)
        if entity is None:
            return False
        return self.remove_by_id(entity.id)

    def clear(self) -> None:
        count = len(self._entities)
        self._entities.clear()
        logging.info("Cleared %d entities from store", count)

    @property
    def count(self) -> int:
        return len(self._entities)

    # --- Aggregates ---

    def total_quantity(self) -> int:
        return sum(entity.quantity for entity in self._entities.values())

    def low_stock(self, threshold: int = config.LOW_STOCK_THRESHOLD) -> List[E]:
        """Returns entities at or below ``threshold``, the "Low Stock" cut-off."""
        return [e for e in self._entities.values() if e.quantity <= threshold]

    def statistics(self) -> str:
        if not self._entities:
            return "No items in log"
        return (
            f"Total Items: {len(self._entities)}, "
            f"Min ID: {min(self._entities)}, Max ID: {max(self._entities)}"
        )

    # --- Persistence ---

    def save_to_file(self) -> None:
        """Writes all entities, ordered by id, to the backing file as a JSON list.

        The payload is serialized before the file is opened, so a serialization
        failure leaves the previous file content intact. Missing parent
        directories are created. OSError propagates unchanged.
        """
        records = [
            entity.to_dict()
            for entity in sorted(self._entities.values(), key=lambda e: e.id)
        ]
        payload = json.dumps(records, ensure_ascii=False, indent=config.JSON_INDENT)

        directory = self._file_path.parent
        if not directory.exists():
            directory.mkdir(parents=True, exist_ok=True)
            logging.info("Created directory: %s", directory)

        with open(self._file_path, "w", encoding="utf-8") as f:
            f.write(payload)

        logging.info("Saved %d entities to %s", len(records), self._file_path)

    def load_from_file(self) -> None:
        """Replaces the held entities with the content of the backing file.

        The file is parsed into a fresh dict first; the held entities are only
        swapped out once every record has been validated.
        """
        if not self._file_path.exists():
            logging.info("File %s does not exist. Keeping current entities.", self._file_path)
            return

        try:
            with open(self._file_path, "r", encoding="utf-8") as f:
                content = f.read()
        except UnicodeDecodeError as e:
            raise MalformedDataError(f"File {self._file_path} is not valid UTF-8") from e

        if not content.strip():
            logging.info("File %s is empty. Keeping current entities.", self._file_path)
            return

        try:
            data = json.loads(content)
        except (ValueError, RecursionError) as e:
            raise MalformedDataError(f"Invalid JSON in {self._file_path}: {e}") from e

        self._entities = self._parse_records(data, str(self._file_path))
        logging.info("Loaded %d entities from %s", len(self._entities), self._file_path)

    # --- Helper Method ---

    def _parse_records(self, data: Any, source: str) -> Dict[int, E]:
        """Validates a decoded JSON document and builds an id-keyed dict from it."""
        if not isinstance(data, list):
            raise MalformedDataError(f"File {source} must contain a JSON list of entities.")

        parsed: Dict[int, E] = {}
        for i, record in enumerate(data):
            if not isinstance(record, dict):
                raise MalformedDataError(
                    f"Source '{source}': record at index {i} is not a JSON object."
                )
            try:
                entity = self._entity_type.from_dict(record)
            except (KeyError, TypeError, ValueError) as e:
                raise MalformedDataError(
                    f"Source '{source}': invalid record at index {i}: {e!r}"
                ) from e
            if entity.id in parsed:
                raise MalformedDataError(
                    f"Source '{source}': duplicate ID {entity.id} at index {i}."
                )
            parsed[entity.id] = entity
        return parsed
