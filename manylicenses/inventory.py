"""Inventory stream reading.

The inventory arrives as newline-delimited JSON, one record per line. Only
records of type ``"table"`` matter, and only the last of those is used.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional, TextIO

from pydantic import ValidationError

from manylicenses.constants import TABLE_RECORD_TYPE
from manylicenses.exceptions import InventoryError
from manylicenses.models.inventory import InventoryTable

logger = logging.getLogger(__name__)


def parse_records(text: str) -> list[Any]:
    """Parse newline-delimited JSON into a list of records.

    Blank lines are skipped.

    Args:
        text: The full input text.

    Returns:
        Parsed records in input order.

    Raises:
        InventoryError: If any non-blank line is not valid JSON.
    """
    records: list[Any] = []
    for line_number, line in enumerate(text.split("\n"), start=1):
        if not line.strip():
            continue
        try:
            records.append(json.loads(line))
        except json.JSONDecodeError as e:
            raise InventoryError(
                f"Invalid JSON on input line {line_number}: {e}"
            ) from e
    return records


def select_table(records: list[Any]) -> InventoryTable:
    """Pick the last table-typed record and validate its data.

    Args:
        records: Parsed input records.

    Returns:
        The validated InventoryTable.

    Raises:
        InventoryError: If no table record exists or its data is malformed.
    """
    table_record: Optional[dict[str, Any]] = None
    table_count = 0
    for record in records:
        if isinstance(record, dict) and record.get("type") == TABLE_RECORD_TYPE:
            table_record = record
            table_count += 1

    if table_record is None:
        raise InventoryError(f'No record of type "{TABLE_RECORD_TYPE}" found in input')

    if table_count > 1:
        logger.debug("Found %d table records, using the last one", table_count)

    try:
        return InventoryTable.model_validate(table_record.get("data"))
    except ValidationError as e:
        raise InventoryError(f"Malformed inventory table: {e}") from e


def read_inventory(stream: TextIO) -> InventoryTable:
    """Read the whole input stream and return its inventory table.

    Args:
        stream: Text stream to read fully (usually stdin).

    Returns:
        The last inventory table in the stream.

    Raises:
        InventoryError: On undecodable text, invalid JSON or a
            missing/malformed table.
    """
    try:
        text = stream.read()
    except UnicodeDecodeError as e:
        raise InventoryError(f"Input is not valid UTF-8: {e}") from e

    table = select_table(parse_records(text))
    logger.debug(
        "Read inventory with %d columns and %d rows", len(table.head), len(table.body)
    )
    return table
