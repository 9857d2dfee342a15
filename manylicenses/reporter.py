"""Compliance run: classification and reporting over an inventory table."""
from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Optional

from manylicenses.analysis.classifier import Classification, classify
from manylicenses.analysis.enrichment import enrich_record
from manylicenses.analysis.normalize import iter_records
from manylicenses.models.inventory import InventoryTable, PackageRecord
from manylicenses.models.policy import Policy, PolicyViolation
from manylicenses.models.report import ReportOptions, ReportResult
from manylicenses.output.report_csv import CsvFormatter
from manylicenses.resolvers.base import BaseManifestResolver

logger = logging.getLogger(__name__)

ViolationCallback = Callable[[PolicyViolation], None]


class Reporter:
    """Accumulate counts, CSV rows and violations for one run.

    Records must be fed in input order. Excluded records leave no trace
    besides the excluded count.
    """

    def __init__(
        self,
        options: ReportOptions,
        resolver: Optional[BaseManifestResolver] = None,
        on_violation: Optional[ViolationCallback] = None,
    ) -> None:
        """Initialize the reporter.

        Args:
            options: Output options (CSV, counts).
            resolver: Manifest resolver used to enrich CSV rows. Without
                one, rows use inventory fields only.
            on_violation: Called with each violation as it is collected.
        """
        self._options = options
        self._resolver = resolver
        self._on_violation = on_violation
        self._csv = CsvFormatter()
        self._counts: dict[str, int] = {}
        self._violations: list[PolicyViolation] = []
        self._csv_rows: list[str] = []
        self._total = 0
        self._excluded = 0

    def add(self, record: PackageRecord, classification: Classification) -> None:
        """Account for one classified record."""
        self._total += 1

        if classification.is_excluded:
            self._excluded += 1
            return

        if classification.violation is not None:
            self._violations.append(classification.violation)
            if self._on_violation is not None:
                self._on_violation(classification.violation)

        if self._options.csv:
            manifest = (
                self._resolver.resolve(record.name) if self._resolver is not None else None
            )
            self._csv_rows.append(self._csv.format_record(enrich_record(record, manifest)))

        self._counts[record.license_id] = self._counts.get(record.license_id, 0) + 1

    def result(self) -> ReportResult:
        """Build the result of the run so far."""
        return ReportResult(
            counts=dict(self._counts),
            violations=list(self._violations),
            csv_rows=list(self._csv_rows),
            total_records=self._total,
            excluded_count=self._excluded,
        )


def run_check(
    table: InventoryTable,
    policy: Policy,
    options: Optional[ReportOptions] = None,
    resolver: Optional[BaseManifestResolver] = None,
    on_violation: Optional[ViolationCallback] = None,
) -> ReportResult:
    """Classify every row of a table and report the outcome.

    All rows are processed even after a violation; the caller decides the
    run's exit status from the returned result.

    Args:
        table: The inventory table.
        policy: The run's policy.
        options: Output options. Defaults to no CSV and no counts.
        resolver: Optional manifest resolver for CSV enrichment.
        on_violation: Optional callback for each violation as it is found.

    Returns:
        ReportResult with counts, violations and CSV rows.
    """
    if options is None:
        options = ReportOptions()

    if policy.requires_verification() and not policy.approved_licenses:
        logger.warning("No approved licenses configured; skipping license verification")

    reporter = Reporter(options, resolver=resolver, on_violation=on_violation)
    for record in iter_records(table):
        reporter.add(record, classify(record, policy))

    result = reporter.result()
    logger.debug(
        "Checked %d records: %d excluded, %d violation(s)",
        result.total_records,
        result.excluded_count,
        len(result.violations),
    )
    return result
