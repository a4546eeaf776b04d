"""
Text rendering for store contents. Functions here only read from the values
they are given; they never modify a store.
"""

from datetime import datetime
from typing import Iterable, List

import config
from items.inventory_item import InventoryItem
from items.warehouse_items import GroceryItem

TABLE_WIDTH = 100


def format_inventory_table(items: Iterable[InventoryItem]) -> str:
    """Renders inventory items as a fixed-width table ordered by id."""
    ordered = sorted(items, key=lambda item: item.id)
    if not ordered:
        return "No items found in inventory"

    rule = "-" * TABLE_WIDTH
    lines = [
        f"Total Items: {len(ordered)}",
        rule,
        f"{'ID':<4} {'Name':<30} {'Quantity':<10} {'Date Added':<12} "
        f"{'Status':<15} {'Age (Days)':<12}",
        rule,
    ]
    for item in ordered:
        lines.append(
            f"{item.id:<4} {item.name:<30} {item.quantity:<10} "
            f"{item.date_added.strftime('%Y-%m-%d'):<12} {item.status:<15} "
            f"{item.age_days:<12}"
        )
    lines.append(rule)
    return "\n".join(lines)


def _comparable(value: datetime) -> datetime:
    """Aware datetimes become naive local time so they order against naive ones."""
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def format_inventory_statistics(items: List[InventoryItem]) -> str:
    if not items:
        return "Inventory Statistics: no items"

    total_units = sum(i.quantity for i in items)
    out_of_stock = sum(1 for i in items if i.quantity == config.OUT_OF_STOCK_QUANTITY)
    low_stock = sum(
        1 for i in items if 0 < i.quantity <= config.LOW_STOCK_THRESHOLD
    )
    oldest = min(items, key=lambda i: _comparable(i.date_added))
    newest = max(items, key=lambda i: _comparable(i.date_added))

    return "\n".join(
        [
            "Inventory Statistics:",
            f"   Total Inventory Units: {total_units}",
            f"   Average Quantity per Item: {total_units / len(items):.1f}",
            f"   Out of Stock Items: {out_of_stock}",
            f"   Low Stock Items (<={config.LOW_STOCK_THRESHOLD}): {low_stock}",
            f"   Oldest Item: {oldest.name} (Added: {oldest.date_added:%Y-%m-%d})",
            f"   Newest Item: {newest.name} (Added: {newest.date_added:%Y-%m-%d})",
        ]
    )


def format_category(store) -> str:
    """Lists a warehouse store's items with its totals and low-stock names."""
    items = sorted(store.get_all(), key=lambda item: item.id)
    if not items:
        return "No items found in this category."

    lines = [f"  {item}" for item in items]
    lines.append(
        f"  Total items: {len(items)}, Total quantity: {store.total_quantity()}"
    )
    low = store.low_stock()
    if low:
        lines.append(f"  Low stock items: {', '.join(i.name for i in low)}")
    return "\n".join(lines)


def format_expired(groceries: Iterable[GroceryItem]) -> str:
    expired = [g.name for g in groceries if g.is_expired()]
    if not expired:
        return ""
    return f"Expired grocery items: {', '.join(expired)}"
