"""
This module defines the capability set shared by every entity that can be held
in an entity store.

Concrete entity types (inventory records, electronics, groceries) do not share
a base class. Any class exposing the members below can be stored, looked up
by name and persisted.
"""

from typing import Any, Dict, Protocol, TypeVar


class StockEntity(Protocol):
    """
    The members a store relies on.

    Attributes:
        id: A positive integer, unique within a store and never changed.
        name: Human readable name, used for name lookups.
        quantity: Non-negative stock count.
    """

    id: int
    name: str
    quantity: int

    def with_quantity(self, new_quantity: int) -> "StockEntity":
        """Returns a copy with a different quantity."""
        ...

    def to_dict(self) -> Dict[str, Any]:
        """Returns a JSON-compatible record of every declared field."""
        ...

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StockEntity":
        """Rebuilds an entity from a record produced by ``to_dict``."""
        ...


E = TypeVar("E", bound=StockEntity)
