"""Report-related Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from manylicenses.models.policy import PolicyViolation


class ReportOptions(BaseModel):
    """Output options for a compliance run."""

    model_config = {"extra": "forbid"}

    csv: bool = Field(default=False, description="Emit CSV rows")
    counts: bool = Field(default=False, description="Emit license counts")


class ReportResult(BaseModel):
    """Result of a compliance run over one inventory table."""

    model_config = {"extra": "forbid"}

    counts: dict[str, int] = Field(
        default_factory=dict,
        description="Occurrences per license identifier (non-excluded records)",
    )
    violations: list[PolicyViolation] = Field(
        default_factory=list,
        description="Violations in input order",
    )
    csv_rows: list[str] = Field(
        default_factory=list,
        description="Rendered CSV data lines in input order",
    )
    total_records: int = Field(default=0, description="Rows in the inventory table")
    excluded_count: int = Field(default=0, description="Rows skipped by exclusion")

    @property
    def has_violations(self) -> bool:
        """True if at least one violation was collected."""
        return len(self.violations) > 0

    @property
    def unapproved_licenses(self) -> list[str]:
        """Offending license identifiers, de-duplicated in first-seen order."""
        return list(dict.fromkeys(v.license_id for v in self.violations))

    @property
    def failure_message(self) -> Optional[str]:
        """Run-level failure message, or None when the run succeeded."""
        if not self.has_violations:
            return None
        quoted = ", ".join(f'"{license_id}"' for license_id in self.unapproved_licenses)
        return f"Unapproved licenses: {quoted}"
