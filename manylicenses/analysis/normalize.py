"""Inventory row normalization."""
from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Optional

from manylicenses.constants import (
    COLUMN_LICENSE,
    COLUMN_NAME,
    COLUMN_URL,
    COLUMN_VENDOR_NAME,
    COLUMN_VENDOR_URL,
    COLUMN_VERSION,
    UNKNOWN_SENTINEL,
)
from manylicenses.models.inventory import InventoryTable, PackageRecord

# Inventory column -> PackageRecord field
COLUMN_FIELDS = {
    COLUMN_NAME: "name",
    COLUMN_VERSION: "version",
    COLUMN_LICENSE: "license_id",
    COLUMN_VENDOR_NAME: "vendor_author",
    COLUMN_VENDOR_URL: "vendor_homepage",
    COLUMN_URL: "vendor_repository",
}


def decode_value(raw: Optional[str]) -> Optional[str]:
    """Decode a raw inventory value, mapping the unknown sentinel to None.

    Args:
        raw: Raw cell value.

    Returns:
        The value, or None if it is missing or equals "unknown"
        (case-insensitive).
    """
    if raw is None or raw.lower() == UNKNOWN_SENTINEL:
        return None
    return raw


def normalize_row(head: Sequence[str], row: Sequence[str]) -> PackageRecord:
    """Convert one raw inventory row into a PackageRecord.

    Unrecognized columns are ignored. Missing columns and unknown values
    leave the field at its empty-string default.

    Args:
        head: Column names.
        row: Raw values aligned positionally to head.

    Returns:
        The canonical PackageRecord.
    """
    fields: dict[str, str] = {}
    for column, raw in zip(head, row):
        field = COLUMN_FIELDS.get(column)
        if field is None:
            continue
        value = decode_value(raw)
        if value is not None:
            fields[field] = value
    return PackageRecord(**fields)


def iter_records(table: InventoryTable) -> Iterator[PackageRecord]:
    """Yield normalized records for every row of a table, in order."""
    for row in table.body:
        yield normalize_row(table.head, row)
