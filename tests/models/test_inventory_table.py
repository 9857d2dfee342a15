"""Tests for inventory Pydantic models."""
import pytest
from pydantic import ValidationError

from manylicenses.models.inventory import InventoryTable, PackageRecord


class TestInventoryTable:
    """Tests for InventoryTable model."""

    def test_valid_table(self) -> None:
        """Test a table whose rows match the head."""
        table = InventoryTable(head=["Name", "License"], body=[["a", "MIT"]])

        assert table.body == [["a", "MIT"]]

    def test_empty_body_allowed(self) -> None:
        """Test a table with no rows."""
        table = InventoryTable(head=["Name"])

        assert table.body == []

    def test_row_length_must_match_head(self) -> None:
        """Test that short or long rows are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            InventoryTable(head=["Name", "License"], body=[["a", "MIT", "extra"]])

        assert "row 0" in str(exc_info.value)

    def test_duplicate_columns_rejected(self) -> None:
        """Test that column names must be unique."""
        with pytest.raises(ValidationError, match="unique"):
            InventoryTable(head=["Name", "Name"], body=[])

    def test_non_string_values_rejected(self) -> None:
        """Test that row values must be strings."""
        with pytest.raises(ValidationError):
            InventoryTable(head=["Name"], body=[[None]])  # type: ignore[list-item]


class TestPackageRecord:
    """Tests for PackageRecord model."""

    def test_defaults_are_empty_strings(self) -> None:
        """Test that every field defaults to the empty string."""
        record = PackageRecord()

        assert record.name == ""
        assert record.version == ""
        assert record.license_id == ""
        assert record.vendor_author == ""
        assert record.vendor_homepage == ""
        assert record.vendor_repository == ""

    def test_record_is_frozen(self) -> None:
        """Test that records cannot be modified."""
        record = PackageRecord(name="a")

        with pytest.raises(ValidationError):
            record.name = "b"  # type: ignore[misc]
