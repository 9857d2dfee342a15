"""Inventory Pydantic models."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class InventoryTable(BaseModel):
    """Tabular dependency inventory produced by an external discovery tool.

    Rows are positional: each value belongs to the column of the same
    index in ``head``.
    """

    model_config = {"extra": "forbid"}

    head: list[str] = Field(description="Ordered column names")
    body: list[list[str]] = Field(
        default_factory=list,
        description="Rows of raw string values aligned to head",
    )

    @model_validator(mode="after")
    def _check_shape(self) -> InventoryTable:
        if len(set(self.head)) != len(self.head):
            raise ValueError("column names in head must be unique")
        for index, row in enumerate(self.body):
            if len(row) != len(self.head):
                raise ValueError(
                    f"row {index} has {len(row)} values, expected {len(self.head)}"
                )
        return self


class PackageRecord(BaseModel):
    """Canonical package record derived from one inventory row."""

    model_config = {"extra": "forbid", "frozen": True}

    name: str = Field(default="", description="Package name")
    version: str = Field(default="", description="Package version")
    license_id: str = Field(
        default="", description="Declared SPDX-style license identifier"
    )
    vendor_author: str = Field(default="", description="Vendor (author) name")
    vendor_homepage: str = Field(default="", description="Vendor homepage URL")
    vendor_repository: str = Field(default="", description="Repository URL")
