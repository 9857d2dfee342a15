"""Tests for inventory stream reading."""
import io
import json

import pytest

from manylicenses.exceptions import InventoryError
from manylicenses.inventory import parse_records, read_inventory, select_table


def _table(head: list[str], body: list[list[str]]) -> dict:
    return {"type": "table", "data": {"head": head, "body": body}}


class TestParseRecords:
    """Tests for parse_records function."""

    def test_parses_each_line(self) -> None:
        """Test that every line becomes one record."""
        text = '{"type": "info"}\n{"type": "table", "data": {}}\n'

        records = parse_records(text)

        assert records == [{"type": "info"}, {"type": "table", "data": {}}]

    def test_blank_lines_skipped(self) -> None:
        """Test that blank lines are ignored."""
        records = parse_records('\n{"a": 1}\n\n   \n{"b": 2}')

        assert records == [{"a": 1}, {"b": 2}]

    def test_empty_input_gives_no_records(self) -> None:
        """Test that empty input parses to an empty list."""
        assert parse_records("") == []

    def test_invalid_json_raises(self) -> None:
        """Test that malformed JSON is a fatal input error."""
        with pytest.raises(InventoryError) as exc_info:
            parse_records('{"type": "info"}\nnot json\n')

        assert "line 2" in str(exc_info.value)


class TestSelectTable:
    """Tests for select_table function."""

    def test_no_table_raises(self) -> None:
        """Test that input without a table record is rejected."""
        with pytest.raises(InventoryError, match='type "table"'):
            select_table([{"type": "info", "data": "hello"}])

    def test_last_table_wins(self) -> None:
        """Test that the last table record is used."""
        records = [
            _table(["Name"], [["first"]]),
            {"type": "info"},
            _table(["Name"], [["second"]]),
        ]

        table = select_table(records)

        assert table.body == [["second"]]

    def test_non_dict_records_ignored(self) -> None:
        """Test that scalar or list records are skipped."""
        records = [42, ["table"], _table(["Name"], [["pkg"]])]

        table = select_table(records)

        assert table.head == ["Name"]

    def test_missing_data_raises(self) -> None:
        """Test that a table record without data is rejected."""
        with pytest.raises(InventoryError, match="Malformed inventory table"):
            select_table([{"type": "table"}])

    def test_row_length_mismatch_raises(self) -> None:
        """Test that rows must align with the head."""
        with pytest.raises(InventoryError, match="Malformed inventory table"):
            select_table([_table(["Name", "License"], [["pkg"]])])


class TestReadInventory:
    """Tests for read_inventory function."""

    def test_reads_whole_stream(self) -> None:
        """Test reading a table from a text stream."""
        stream = io.StringIO(
            json.dumps(_table(["Name", "License"], [["a", "MIT"], ["b", "ISC"]]))
        )

        table = read_inventory(stream)

        assert table.head == ["Name", "License"]
        assert len(table.body) == 2

    def test_empty_stream_raises(self) -> None:
        """Test that an empty stream has no table."""
        with pytest.raises(InventoryError):
            read_inventory(io.StringIO(""))

    def test_invalid_utf8_raises(self) -> None:
        """Test that undecodable bytes are a fatal input error."""
        stream = io.TextIOWrapper(io.BytesIO(b"\xff\xfe\n"), encoding="utf-8")

        with pytest.raises(InventoryError, match="not valid UTF-8"):
            read_inventory(stream)
