"""Policy classification of package records."""
from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Optional

from manylicenses.models.inventory import PackageRecord
from manylicenses.models.policy import Policy, PolicyViolation


class Outcome(Enum):
    """Classification outcome for a single record."""

    ACCEPTED = "accepted"
    EXCLUDED = "excluded"
    VIOLATING = "violating"


class Classification(NamedTuple):
    """Result of classifying one record.

    Attributes:
        outcome: The classification outcome.
        violation: The violation details when outcome is VIOLATING.
    """

    outcome: Outcome
    violation: Optional[PolicyViolation] = None

    @property
    def is_excluded(self) -> bool:
        """True if the record is skipped entirely."""
        return self.outcome == Outcome.EXCLUDED


def classify(record: PackageRecord, policy: Policy) -> Classification:
    """Classify a record against the policy.

    Exclusion takes precedence over verification. An empty approved set
    rejects nothing.

    Args:
        record: The record to classify.
        policy: The run's policy.

    Returns:
        Classification with the outcome (and violation, if any).
    """
    if policy.is_excluded(record.name):
        return Classification(Outcome.EXCLUDED)

    if (
        policy.requires_verification()
        and policy.approved_licenses
        and not policy.is_approved(record.license_id)
    ):
        return Classification(
            Outcome.VIOLATING,
            PolicyViolation(
                name=record.name,
                version=record.version,
                license_id=record.license_id,
            ),
        )

    return Classification(Outcome.ACCEPTED)
