"""Unit tests for the electronic and grocery item types."""

import pytest
from datetime import datetime, timedelta

from entities.errors import ValidationError
from items.warehouse_items import ElectronicItem, GroceryItem

# --- Fixtures ---


@pytest.fixture
def laptop() -> ElectronicItem:
    return ElectronicItem(1001, "Laptop", 15, "Dell", 24)


@pytest.fixture
def milk() -> GroceryItem:
    return GroceryItem(2001, "Milk", 50, datetime.now() + timedelta(days=7, hours=1))


# --- ElectronicItem Tests ---


def test_electronic_item_fields(laptop):
    assert laptop.id == 1001
    assert laptop.brand == "Dell"
    assert laptop.warranty_months == 24


def test_electronic_item_validation():
    """Test that every field is validated on construction."""
    with pytest.raises(ValidationError):
        ElectronicItem(0, "Laptop", 1, "Dell", 12)
    with pytest.raises(ValidationError):
        ElectronicItem(1, "", 1, "Dell", 12)
    with pytest.raises(ValidationError):
        ElectronicItem(1, "Laptop", -1, "Dell", 12)
    with pytest.raises(ValidationError):
        ElectronicItem(1, "Laptop", 1, " ", 12)
    with pytest.raises(ValidationError):
        ElectronicItem(1, "Laptop", 1, "Dell", -12)


def test_electronic_with_quantity(laptop):
    updated = laptop.with_quantity(20)
    assert updated.quantity == 20
    assert laptop.quantity == 15
    assert updated == laptop


def test_electronic_round_trip(laptop):
    record = laptop.to_dict()
    assert record["warrantyMonths"] == 24
    assert ElectronicItem.from_dict(record).to_dict() == record


def test_electronic_str(laptop):
    assert str(laptop) == (
        "Electronic [ID: 1001, Name: Laptop, Quantity: 15, Brand: Dell, Warranty: 24 months]"
    )


# --- GroceryItem Tests ---


def test_grocery_allows_future_expiry(milk):
    """Test that expiry dates in the future are valid."""
    assert not milk.is_expired()
    assert milk.days_until_expiry() == 7
    assert "[Expires in 7 days]" in str(milk)


def test_grocery_expired():
    bread = GroceryItem(2002, "Bread", 30, datetime.now() - timedelta(days=2))
    assert bread.is_expired()
    assert "[EXPIRED]" in str(bread)


def test_grocery_validation():
    with pytest.raises(ValidationError):
        GroceryItem(2001, "Milk", -1, datetime.now())
    with pytest.raises(ValidationError):
        GroceryItem(2001, "Milk", 1, "2030-01-01")


def test_grocery_round_trip(milk):
    record = milk.to_dict()
    restored = GroceryItem.from_dict(record)
    assert restored.expiry_date == milk.expiry_date
    assert restored.to_dict() == record


# --- Variant Independence ---


def test_variants_are_independent(laptop, milk):
    """Test that the two variants share no class and never compare equal."""
    assert not isinstance(laptop, GroceryItem)
    assert not isinstance(milk, ElectronicItem)
    same_id_grocery = GroceryItem(1001, "Laptop", 15, datetime.now())
    assert laptop != same_id_grocery
