import logging

import config
from core.inventory_app import InventoryApp
from core.warehouse_manager import WarehouseManager
from entities.errors import EntityStoreError


def main():
    """Runs the inventory record session and the warehouse demo."""
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    print("Launching Inventory Record System...")

    app = InventoryApp()
    try:
        app.run()
    except (EntityStoreError, OSError) as e:
        print(f"Inventory session failed: {e}")

    manager = WarehouseManager()
    manager.seed_data()
    manager.print_all_items()
    manager.increase_stock(manager.groceries, 2002, 20)
    manager.remove_item_by_id(manager.electronics, 1003)
    manager.demonstrate_error_handling()
    print(manager.statistics_report())
    try:
        manager.save()
    except OSError as e:
        print(f"Could not save warehouse data: {e}")


if __name__ == "__main__":
    main()
