"""
This module defines the WarehouseManager class, which keeps electronics and
groceries in two independently typed stores and reports on both.
"""

import logging
from datetime import datetime, timedelta
from typing import List

import config
from core import reports
from entities.errors import DuplicateKeyError, NotFoundError, ValidationError
from entities.in_memory_entity_store import InMemoryEntityStore
from items.warehouse_items import ElectronicItem, GroceryItem


class WarehouseManager:
    """
    Coordinates the electronics and grocery stores.

    Mutating helpers catch the store's errors, log them and return False so
    the console flow can continue; the stores themselves stay unchanged.
    """

    def __init__(
        self,
        electronics_path: str = config.ELECTRONICS_DATA_FILE,
        groceries_path: str = config.GROCERIES_DATA_FILE,
    ):
        self.electronics: InMemoryEntityStore[ElectronicItem] = InMemoryEntityStore(
            electronics_path, ElectronicItem
        )
        self.groceries: InMemoryEntityStore[GroceryItem] = InMemoryEntityStore(
            groceries_path, GroceryItem
        )

    def seed_data(self) -> None:
        now = datetime.now()
        self.electronics.add(ElectronicItem(1001, "Laptop", 15, "Dell", 24))
        self.electronics.add(ElectronicItem(1002, "Smartphone", 25, "Samsung", 12))
        self.electronics.add(ElectronicItem(1003, "Tablet", 8, "Apple", 12))
        self.groceries.add(GroceryItem(2001, "Milk", 50, now + timedelta(days=7)))
        self.groceries.add(GroceryItem(2002, "Bread", 30, now + timedelta(days=3)))
        self.groceries.add(GroceryItem(2003, "Eggs", 40, now + timedelta(days=14)))
        logging.info(
            "Seeded warehouse with %d items",
            self.electronics.count + self.groceries.count,
        )

    def add_electronic_item(self, item: ElectronicItem) -> bool:
        return self._add(self.electronics, item)

    def add_grocery_item(self, item: GroceryItem) -> bool:
        return self._add(self.groceries, item)

    def _add(self, store: InMemoryEntityStore, item) -> bool:
        try:
            store.add(item)
        except DuplicateKeyError as e:
            logging.error("Cannot add item: %s", e)
            return False
        logging.info("Successfully added item: %s", item.name)
        return True

    def increase_stock(self, store: InMemoryEntityStore, item_id: int, amount: int) -> bool:
        try:
            item = store.require(item_id)
            updated = store.update_quantity(item_id, item.quantity + amount)
        except NotFoundError as e:
            logging.error("Cannot increase stock: %s", e)
            return False
        except ValidationError as e:
            logging.error("Invalid quantity operation: %s", e)
            return False
        logging.info("Stock increased: %s now has %d units", updated.name, updated.quantity)
        return True

    def remove_item_by_id(self, store: InMemoryEntityStore, item_id: int) -> bool:
        try:
            item = store.require(item_id)
        except NotFoundError as e:
            logging.error("Cannot remove item: %s", e)
            return False
        store.remove_by_id(item_id)
        logging.info("Successfully removed: %s (ID: %d)", item.name, item_id)
        return True

    def save(self) -> None:
        self.electronics.save_to_file()
        self.groceries.save_to_file()

    def load(self) -> None:
        self.electronics.load_from_file()
        self.groceries.load_from_file()

    def demonstrate_error_handling(self) -> List[bool]:
        """Runs three failing operations and returns each outcome."""
        outcomes = [
            self.add_electronic_item(ElectronicItem(1001, "Duplicate Laptop", 5, "HP", 12)),
            self.remove_item_by_id(self.electronics, 9999),
            self.increase_stock(self.electronics, 1001, -1000),
        ]
        return outcomes

    def statistics_report(self) -> str:
        e_units = self.electronics.total_quantity()
        g_units = self.groceries.total_quantity()
        lines = [
            "=== Warehouse Statistics ===",
            f"Electronic Items: {self.electronics.count} types, {e_units} total units",
            f"Grocery Items: {self.groceries.count} types, {g_units} total units",
            f"Total Inventory: {self.electronics.count + self.groceries.count} types, "
            f"{e_units + g_units} total units",
        ]
        expired = reports.format_expired(self.groceries.get_all())
        if expired:
            lines.append(expired)
        return "\n".join(lines)

    def print_all_items(self) -> None:
        print("Electronics:")
        print(reports.format_category(self.electronics))
        print("Groceries:")
        print(reports.format_category(self.groceries))
