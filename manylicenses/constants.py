"""Constants for manylicenses."""

# Exit codes
EXIT_SUCCESS = 0  # No violations found
EXIT_VIOLATIONS = 1  # Unapproved licenses found
EXIT_ERROR = 1  # Run aborted due to bad input or configuration

# Raw inventory values matching this (case-insensitively) are treated as absent
UNKNOWN_SENTINEL = "unknown"

# Record type carrying the inventory table in the input stream
TABLE_RECORD_TYPE = "table"

# Inventory columns understood by the row normalizer
COLUMN_NAME = "Name"
COLUMN_VERSION = "Version"
COLUMN_LICENSE = "License"
COLUMN_VENDOR_NAME = "VendorName"
COLUMN_VENDOR_URL = "VendorURL"
COLUMN_URL = "URL"

CSV_HEADER = "Name, Version, SPDX, Description, Authors/Contributors, URLs"

# Project manifest holding the `manylicenses` configuration key
PROJECT_MANIFEST_NAME = "package.json"
PROJECT_MANIFEST_KEY = "manylicenses"

# Directory holding per-package manifests, relative to the working directory
DEFAULT_MODULES_DIR = "node_modules"
