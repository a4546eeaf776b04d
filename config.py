"""Configuration settings for the Inventory Record System."""

# --- Storage Paths ---
# Default backing files for each store. Relative paths resolve against the
# current working directory.
INVENTORY_DATA_FILE = "data/inventory_data.json"
ELECTRONICS_DATA_FILE = "data/electronics.json"
GROCERIES_DATA_FILE = "data/groceries.json"

# Indentation used when writing JSON backing files
JSON_INDENT = 2

# --- Stock Classification ---
OUT_OF_STOCK_QUANTITY = 0
LOW_STOCK_THRESHOLD = 10  # Inclusive upper bound for "Low Stock"
NORMAL_STOCK_THRESHOLD = 50  # Inclusive upper bound for "Normal Stock"

# Minimum thefuzz score (0-100) for a fuzzy name lookup to count as a match
NAME_MATCH_THRESHOLD = 75

# --- Logging ---
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"

# --- Web App ---
WEB_PORT = 5001
