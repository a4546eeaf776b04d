"""
This module defines InventoryItem, the immutable record held by the inventory
store.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Dict, Optional

from items.fields import (
    parse_datetime,
    require_non_negative,
    require_not_future,
    require_positive_id,
    require_text,
    stock_status,
)


@dataclass(frozen=True, eq=False)
class InventoryItem:
    """
    A single inventory record.

    Instances never change after construction. ``with_quantity`` and
    ``with_name`` return validated copies instead. Two items are equal when
    their ids are equal, whatever their other fields hold.

    Attributes:
        id: Positive identifier, unique within a store.
        name: Non-blank display name.
        quantity: Units in stock, never negative.
        date_added: When the item was recorded. Never in the future at
            construction time.
    """

    id: int
    name: str
    quantity: int
    date_added: datetime

    def __post_init__(self):
        """Validate every field after initialization."""
        require_positive_id(self.id)
        require_text(self.name, "Name")
        require_non_negative(self.quantity, "Quantity")
        require_not_future(self.date_added, "Date added")

    @classmethod
    def create(
        cls,
        item_id: int,
        name: str,
        quantity: int,
        date_added: Optional[datetime] = None,
    ) -> "InventoryItem":
        """Validating factory. ``date_added`` defaults to the current time."""
        return cls(
            id=item_id,
            name=name,
            quantity=quantity,
            date_added=date_added if date_added is not None else datetime.now(),
        )

    def with_quantity(self, new_quantity: int) -> "InventoryItem":
        return replace(self, quantity=new_quantity)

    def with_name(self, new_name: str) -> "InventoryItem":
        return replace(self, name=new_name)

    @property
    def status(self) -> str:
        return stock_status(self.quantity)

    @property
    def age_days(self) -> int:
        return (datetime.now(self.date_added.tzinfo) - self.date_added).days

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "dateAdded": self.date_added.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InventoryItem":
        return cls(
            id=data["id"],
            name=data["name"],
            quantity=data["quantity"],
            date_added=parse_datetime(data["dateAdded"]),
        )

    def __eq__(self, other):
        if not isinstance(other, InventoryItem):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def __str__(self):
        return (
            f"InventoryItem {{ ID: {self.id}, Name: '{self.name}', "
            f"Quantity: {self.quantity}, DateAdded: {self.date_added:%Y-%m-%d}, "
            f"Status: {self.status}, Age: {self.age_days} days }}"
        )
