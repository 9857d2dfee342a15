"""Pydantic data models for manylicenses."""

from manylicenses.models.config import ManyLicensesConfig
from manylicenses.models.inventory import InventoryTable, PackageRecord
from manylicenses.models.manifest import (
    EnrichedRecord,
    PackageManifest,
    PersonRef,
    RepositoryRef,
)
from manylicenses.models.policy import Policy, PolicyViolation
from manylicenses.models.report import ReportOptions, ReportResult

__all__ = [
    "EnrichedRecord",
    "InventoryTable",
    "ManyLicensesConfig",
    "PackageManifest",
    "PackageRecord",
    "PersonRef",
    "Policy",
    "PolicyViolation",
    "RepositoryRef",
    "ReportOptions",
    "ReportResult",
]
