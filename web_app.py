"""
This is the main file for the web application.
It exposes the inventory store over HTTP as JSON.
"""

import logging
from typing import Any, Dict

from flask import Flask, jsonify, request

import config
from entities.errors import (
    DuplicateKeyError,
    MalformedDataError,
    NotFoundError,
    ValidationError,
)
from entities.in_memory_entity_store import InMemoryEntityStore
from items.fields import parse_datetime
from items.inventory_item import InventoryItem

# --- Logging Configuration ---
logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

app = Flask(__name__)

# --- Store Initialization ---
logging.info("Initializing inventory store from %s...", config.INVENTORY_DATA_FILE)
store: InMemoryEntityStore[InventoryItem] = InMemoryEntityStore(
    config.INVENTORY_DATA_FILE, InventoryItem
)
try:
    store.load_from_file()
except (MalformedDataError, OSError):
    logging.exception("Could not load %s. Starting with an empty store.", store.file_path)


def _item_json(item: InventoryItem) -> Dict[str, Any]:
    """Stored fields plus the derived ones shown to clients."""
    return {**item.to_dict(), "status": item.status, "ageDays": item.age_days}


# --- Routes ---


@app.route("/items", methods=["GET"])
def list_items():
    items = sorted(store.get_all(), key=lambda item: item.id)
    return jsonify({"items": [_item_json(i) for i in items], "count": store.count})


@app.route("/items/<int:item_id>", methods=["GET"])
def get_item(item_id: int):
    item = store.get_by_id(item_id)
    if item is None:
        return jsonify({"error": f"Item {item_id} not found"}), 404
    return jsonify(_item_json(item))


@app.route("/items/search", methods=["GET"])
def search_items():
    name = request.args.get("name", "")
    if not name:
        return jsonify({"error": "Missing name"}), 400
    item = store.find_by_name(name)
    if item is None:
        return jsonify({"error": f"No item matching '{name}'"}), 404
    return jsonify(_item_json(item))


@app.route("/items", methods=["POST"])
def add_item():
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return jsonify({"error": "Expected a JSON object"}), 400
    date_added = None
    if data.get("dateAdded") is not None:
        try:
            date_added = parse_datetime(data["dateAdded"])
        except (TypeError, ValueError) as e:
            return jsonify({"error": f"Invalid dateAdded: {e}"}), 400
    try:
        item = InventoryItem.create(
            data["id"], data["name"], data["quantity"], date_added
        )
    except KeyError as e:
        return jsonify({"error": f"Missing field: {e.args[0]}"}), 400

    store.add(item)
    return jsonify(_item_json(item)), 201


@app.route("/items/<int:item_id>", methods=["DELETE"])
def delete_item(item_id: int):
    if not store.remove_by_id(item_id):
        return jsonify({"error": f"Item {item_id} not found"}), 404
    return jsonify({"message": f"Item {item_id} removed"})


@app.route("/items/<int:item_id>/quantity", methods=["POST"])
def set_quantity(item_id: int):
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return jsonify({"error": "Expected a JSON object"}), 400
    if "quantity" not in data:
        return jsonify({"error": "Missing quantity"}), 400
    item = store.update_quantity(item_id, data["quantity"])
    return jsonify(_item_json(item))


@app.route("/stats", methods=["GET"])
def stats():
    return jsonify(
        {
            "count": store.count,
            "totalQuantity": store.total_quantity(),
            "lowStock": [i.id for i in store.low_stock()],
            "summary": store.statistics(),
        }
    )


@app.route("/save", methods=["POST"])
def save():
    store.save_to_file()
    return jsonify({"message": f"Saved {store.count} items to {store.file_path}"})


@app.route("/reload", methods=["POST"])
def reload():
    store.load_from_file()
    return jsonify({"message": f"Loaded {store.count} items from {store.file_path}"})


# --- Error Handlers ---


@app.errorhandler(ValidationError)
def validation_error(e):
    return jsonify({"error": str(e)}), 400


@app.errorhandler(NotFoundError)
def not_found_error(e):
    return jsonify({"error": str(e)}), 404


@app.errorhandler(DuplicateKeyError)
def duplicate_key_error(e):
    return jsonify({"error": str(e)}), 409


@app.errorhandler(MalformedDataError)
def malformed_data_error(e):
    logging.error("Backing file is malformed: %s", e)
    return jsonify({"error": str(e)}), 500


@app.errorhandler(OSError)
def storage_error(e):
    logging.exception("Storage failure")
    return jsonify({"error": f"Storage failure: {e}"}), 500


# --- Run the App ---
if __name__ == "__main__":
    app.run(port=config.WEB_PORT, debug=True)
