"""Configuration Pydantic models for manylicenses."""
from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator


class ManyLicensesConfig(BaseModel):
    """Policy configuration read from a configuration file.

    Each field accepts either a single string or a list of strings; a lone
    string is treated as a one-element list. All fields are optional with
    None defaults to allow partial configuration.
    """

    model_config = {"extra": "forbid", "populate_by_name": True}

    approve: Optional[List[str]] = Field(
        default=None,
        description="Approved SPDX license identifiers.",
    )
    exclude: Optional[List[str]] = Field(
        default=None,
        description="Package names to skip entirely.",
    )
    exclude_prefix: Optional[List[str]] = Field(
        default=None,
        alias="excludePrefix",
        description="Package name prefixes to skip entirely.",
    )

    @field_validator("approve", "exclude", "exclude_prefix", mode="before")
    @classmethod
    def _coerce_list(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value
