"""Electronic and grocery stock records used by the warehouse.

The two types share no base class; both satisfy ``entities.entity.StockEntity``.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Dict

from items.fields import (
    parse_datetime,
    require_datetime,
    require_non_negative,
    require_positive_id,
    require_text,
)


@dataclass(frozen=True, eq=False)
class ElectronicItem:
    """An electronic product with a brand and a warranty period."""

    id: int
    name: str
    quantity: int
    brand: str
    warranty_months: int

    def __post_init__(self):
        require_positive_id(self.id)
        require_text(self.name, "Name")
        require_non_negative(self.quantity, "Quantity")
        require_text(self.brand, "Brand")
        require_non_negative(self.warranty_months, "Warranty months")

    def with_quantity(self, new_quantity: int) -> "ElectronicItem":
        return replace(self, quantity=new_quantity)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "brand": self.brand,
            "warrantyMonths": self.warranty_months,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ElectronicItem":
        return cls(
            id=data["id"],
            name=data["name"],
            quantity=data["quantity"],
            brand=data["brand"],
            warranty_months=data["warrantyMonths"],
        )

    def __eq__(self, other):
        if not isinstance(other, ElectronicItem):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def __str__(self):
        return (
            f"Electronic [ID: {self.id}, Name: {self.name}, Quantity: {self.quantity}, "
            f"Brand: {self.brand}, Warranty: {self.warranty_months} months]"
        )


@dataclass(frozen=True, eq=False)
class GroceryItem:
    """A perishable product. ``expiry_date`` may be in the past or the future."""

    id: int
    name: str
    quantity: int
    expiry_date: datetime

    def __post_init__(self):
        require_positive_id(self.id)
        require_text(self.name, "Name")
        require_non_negative(self.quantity, "Quantity")
        require_datetime(self.expiry_date, "Expiry date")

    def with_quantity(self, new_quantity: int) -> "GroceryItem":
        return replace(self, quantity=new_quantity)

    def is_expired(self) -> bool:
        return datetime.now(self.expiry_date.tzinfo) > self.expiry_date

    def days_until_expiry(self) -> int:
        return (self.expiry_date - datetime.now(self.expiry_date.tzinfo)).days

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "expiryDate": self.expiry_date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GroceryItem":
        return cls(
            id=data["id"],
            name=data["name"],
            quantity=data["quantity"],
            expiry_date=parse_datetime(data["expiryDate"]),
        )

    def __eq__(self, other):
        if not isinstance(other, GroceryItem):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def __str__(self):
        if self.is_expired():
            expiry_status = " [EXPIRED]"
        else:
            expiry_status = f" [Expires in {self.days_until_expiry()} days]"
        return (
            f"Grocery [ID: {self.id}, Name: {self.name}, Quantity: {self.quantity}, "
            f"Expiry: {self.expiry_date:%Y-%m-%d}]{expiry_status}"
        )
