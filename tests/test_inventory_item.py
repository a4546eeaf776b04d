"""Unit tests for the InventoryItem value type."""

import pytest
from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone

from entities.errors import ValidationError
from items.inventory_item import InventoryItem

# --- Fixtures ---


@pytest.fixture
def added_on() -> datetime:
    return datetime.now() - timedelta(days=30)


@pytest.fixture
def headphones(added_on) -> InventoryItem:
    return InventoryItem.create(1, "Wireless Bluetooth Headphones", 25, added_on)


# --- Creation Tests ---


def test_create_success(headphones, added_on):
    """Test that the factory builds a fully populated item."""
    assert headphones.id == 1
    assert headphones.name == "Wireless Bluetooth Headphones"
    assert headphones.quantity == 25
    assert headphones.date_added == added_on


def test_create_defaults_date_to_now():
    """Test that omitting date_added stamps the item with the current time."""
    before = datetime.now()
    item = InventoryItem.create(7, "Desk Lamp", 3)
    assert before <= item.date_added <= datetime.now()
    assert item.age_days == 0


@pytest.mark.parametrize("bad_id", [0, -1])
def test_create_rejects_non_positive_id(bad_id):
    """Test that ids must be positive."""
    with pytest.raises(ValidationError, match="ID must be positive"):
        InventoryItem.create(bad_id, "Widget", 1)


@pytest.mark.parametrize("bad_name", ["", "   ", None])
def test_create_rejects_blank_name(bad_name):
    """Test that empty and whitespace-only names are rejected."""
    with pytest.raises(ValidationError, match="Name cannot be null or empty"):
        InventoryItem.create(1, bad_name, 1)


def test_create_rejects_negative_quantity():
    """Test that a negative quantity is rejected."""
    with pytest.raises(ValidationError, match="Quantity cannot be negative"):
        InventoryItem.create(1, "Widget", -1)


def test_create_rejects_non_integer_quantity():
    """Test that booleans and floats are not accepted as quantities."""
    with pytest.raises(ValidationError):
        InventoryItem.create(1, "Widget", True)
    with pytest.raises(ValidationError):
        InventoryItem.create(1, "Widget", 2.5)


def test_create_rejects_future_date():
    """Test that an item cannot be added in the future."""
    tomorrow = datetime.now() + timedelta(days=1)
    with pytest.raises(ValidationError, match="cannot be in the future"):
        InventoryItem.create(1, "Widget", 1, tomorrow)


def test_create_accepts_timezone_aware_date():
    """Test that aware datetimes are compared against aware 'now'."""
    yesterday = datetime.now(timezone.utc) - timedelta(days=1)
    item = InventoryItem.create(1, "Widget", 1, yesterday)
    assert item.age_days == 1


def test_validation_error_is_value_error():
    """Test that callers can catch validation failures as ValueError."""
    with pytest.raises(ValueError):
        InventoryItem.create(-5, "Widget", 1)


# --- Copy-with-change Tests ---


def test_with_quantity_returns_new_item(headphones):
    """Test that with_quantity leaves the original untouched."""
    updated = headphones.with_quantity(35)
    assert updated is not headphones
    assert updated.quantity == 35
    assert headphones.quantity == 25
    assert updated.name == headphones.name
    assert updated.date_added == headphones.date_added


def test_with_name_returns_new_item(headphones):
    """Test that with_name leaves the original untouched."""
    renamed = headphones.with_name("Noise Cancelling Headphones")
    assert renamed.name == "Noise Cancelling Headphones"
    assert headphones.name == "Wireless Bluetooth Headphones"


def test_with_field_revalidates(headphones):
    """Test that copies are validated like fresh items."""
    with pytest.raises(ValidationError):
        headphones.with_quantity(-1)
    with pytest.raises(ValidationError):
        headphones.with_name("  ")
    assert headphones.quantity == 25


def test_repeated_copies_never_alter_original(headphones):
    """Test that a chain of derived copies never changes the starting item."""
    snapshot = headphones.to_dict()
    copy = headphones
    for quantity in range(5):
        copy = copy.with_quantity(quantity).with_name(f"Copy {quantity}")
    assert headphones.to_dict() == snapshot
    assert headphones == copy  # Same id


def test_items_are_frozen(headphones):
    """Test that fields cannot be assigned after construction."""
    with pytest.raises(FrozenInstanceError):
        headphones.quantity = 99


# --- Equality Tests ---


def test_equality_and_hash_use_id_only(added_on):
    """Test that items with the same id are equal regardless of other fields."""
    a = InventoryItem.create(3, "Monitor", 8, added_on)
    b = InventoryItem.create(3, "Different Name", 100)
    c = InventoryItem.create(4, "Monitor", 8, added_on)
    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert len({a, b, c}) == 2


def test_not_equal_to_other_types(headphones):
    assert headphones != 1
    assert headphones != {"id": 1}


# --- Status Tests ---


@pytest.mark.parametrize(
    "quantity, expected",
    [
        (0, "Out of Stock"),
        (1, "Low Stock"),
        (8, "Low Stock"),
        (10, "Low Stock"),
        (11, "Normal Stock"),
        (15, "Normal Stock"),
        (25, "Normal Stock"),
        (50, "Normal Stock"),
        (51, "High Stock"),
    ],
)
def test_status_boundaries(quantity, expected):
    """Test stock classification, including the inclusive 10 and 50 boundaries."""
    assert InventoryItem.create(1, "Widget", quantity).status == expected


def test_status_follows_quantity_changes(headphones):
    """Test that status is derived from the current quantity."""
    assert headphones.status == "Normal Stock"
    assert headphones.with_quantity(0).status == "Out of Stock"


# --- Serialization Tests ---


def test_to_dict_uses_camel_case_keys(headphones, added_on):
    assert headphones.to_dict() == {
        "id": 1,
        "name": "Wireless Bluetooth Headphones",
        "quantity": 25,
        "dateAdded": added_on.isoformat(),
    }


def test_from_dict_restores_every_field(headphones):
    """Test that a record rebuilds an identical item."""
    restored = InventoryItem.from_dict(headphones.to_dict())
    assert restored.to_dict() == headphones.to_dict()
    assert restored.date_added == headphones.date_added


def test_from_dict_accepts_date_only():
    item = InventoryItem.from_dict(
        {"id": 2, "name": "Keyboard", "quantity": 15, "dateAdded": "2024-01-15"}
    )
    assert item.date_added == datetime(2024, 1, 15)


def test_from_dict_missing_key():
    with pytest.raises(KeyError):
        InventoryItem.from_dict({"id": 2, "name": "Keyboard", "quantity": 15})


def test_from_dict_invalid_values():
    """Test that bad values surface as ValidationError or parse errors."""
    with pytest.raises(ValidationError):
        InventoryItem.from_dict(
            {"id": "2", "name": "Keyboard", "quantity": 15, "dateAdded": "2024-01-15"}
        )
    with pytest.raises(ValueError):
        InventoryItem.from_dict(
            {"id": 2, "name": "Keyboard", "quantity": 15, "dateAdded": "yesterday"}
        )


def test_str_contains_status(headphones):
    text = str(headphones)
    assert "ID: 1" in text
    assert "Status: Normal Stock" in text
    assert "Age: 30 days" in text
