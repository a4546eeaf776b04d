"""
This module contains InventoryApp, which drives an inventory store through a
full session: seeding, saving, clearing memory and reloading from disk.
"""

import logging
from datetime import datetime, timedelta
from typing import List

import config
from core import reports
from entities.in_memory_entity_store import InMemoryEntityStore
from items.inventory_item import InventoryItem

# (id, name, quantity, days ago)
SAMPLE_ITEMS = [
    (1, "Wireless Bluetooth Headphones", 25, 30),
    (2, "Gaming Mechanical Keyboard", 15, 20),
    (3, "4K Ultra HD Monitor", 8, 15),
    (4, "USB-C Fast Charging Cable", 50, 10),
    (5, "Ergonomic Office Chair", 0, 5),
]


class InventoryApp:
    """Runs the inventory record workflow against a single store."""

    def __init__(self, file_path: str = config.INVENTORY_DATA_FILE):
        self.store: InMemoryEntityStore[InventoryItem] = InMemoryEntityStore(
            file_path, InventoryItem
        )

    def seed_sample_data(self) -> List[InventoryItem]:
        """Adds the sample items and returns them."""
        now = datetime.now()
        items = [
            InventoryItem.create(item_id, name, quantity, now - timedelta(days=days))
            for item_id, name, quantity, days in SAMPLE_ITEMS
        ]
        for item in items:
            self.store.add(item)
        logging.info("Seeded %d sample items. %s", len(items), self.store.statistics())
        return items

    def save_data(self) -> None:
        try:
            self.store.save_to_file()
        except OSError:
            logging.exception("Failed to save data to %s", self.store.file_path)
            raise

    def load_data(self) -> None:
        try:
            self.store.load_from_file()
        except (OSError, ValueError):
            logging.exception("Failed to load data from %s", self.store.file_path)
            raise

    def clear_memory(self) -> None:
        """Empties the store to simulate a new session."""
        self.store.clear()

    def item_count(self) -> int:
        return self.store.count

    def print_all_items(self) -> None:
        items = self.store.get_all()
        print(reports.format_inventory_table(items))
        if items:
            print(reports.format_inventory_statistics(items))

    def demonstrate_immutability(self) -> str:
        """Derives two copies of the lowest-id item and shows the original is unchanged."""
        items = sorted(self.store.get_all(), key=lambda item: item.id)
        if not items:
            return "No items available for demonstration"

        original = items[0]
        more = original.with_quantity(original.quantity + 10)
        renamed = original.with_name(f"Updated {original.name}")
        return "\n".join(
            [
                f"Original item: {original}",
                f"With updated quantity: {more}",
                f"With updated name: {renamed}",
                f"Original unchanged: {original}",
                f"Copy equals original: {more == original}",
                f"Same object: {more is original}",
            ]
        )

    def run(self) -> None:
        """Seed, persist, forget, reload, then print what came back."""
        self.seed_sample_data()
        self.save_data()
        self.clear_memory()
        self.load_data()
        print(f"Data loaded successfully - {self.item_count()} items")
        self.print_all_items()
        print(self.demonstrate_immutability())
