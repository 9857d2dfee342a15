"""Policy-related Pydantic models for manylicenses."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from manylicenses.models.config import ManyLicensesConfig


def split_option_values(values: Iterable[str]) -> list[str]:
    """Flatten repeated, comma-separated option values.

    ``["MIT,ISC", "Apache-2.0"]`` becomes ``["MIT", "ISC", "Apache-2.0"]``.
    Empty items are dropped.
    """
    result: list[str] = []
    for value in values:
        result.extend(item for item in value.split(",") if item)
    return result


def _unique(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(values))


class Policy(BaseModel):
    """Immutable license policy for a single run.

    Built once at startup from command-line options and configuration,
    then passed to the classifier for every record.
    """

    model_config = {"extra": "forbid", "frozen": True}

    approved_licenses: frozenset[str] = Field(
        default=frozenset(),
        description="Approved SPDX license identifiers",
    )
    excluded_names: frozenset[str] = Field(
        default=frozenset(),
        description="Package names that are skipped entirely",
    )
    excluded_prefixes: tuple[str, ...] = Field(
        default=(),
        description="Package name prefixes that are skipped entirely",
    )
    verify: bool = Field(
        default=True,
        description="Whether licenses are verified against the approved set",
    )

    def is_approved(self, license_id: str) -> bool:
        """Check whether a license identifier is in the approved set.

        Matching is exact and case-sensitive.
        """
        return license_id in self.approved_licenses

    def is_excluded(self, name: str) -> bool:
        """Check whether a package is excluded by name or name prefix."""
        if name in self.excluded_names:
            return True
        return any(name.startswith(prefix) for prefix in self.excluded_prefixes)

    def requires_verification(self) -> bool:
        """Return the verify flag."""
        return self.verify

    @classmethod
    def from_sources(
        cls,
        approve: Iterable[str] = (),
        exclude: Iterable[str] = (),
        exclude_prefix: Iterable[str] = (),
        verify: bool = True,
        config: Optional[ManyLicensesConfig] = None,
    ) -> Policy:
        """Build a policy from command-line values merged with configuration.

        Command-line values may be repeated and comma-separated. Values from
        the configuration are added to them; duplicates are dropped.

        Args:
            approve: Approved license identifiers from the command line.
            exclude: Excluded package names from the command line.
            exclude_prefix: Excluded name prefixes from the command line.
            verify: Verify flag (False for ``--no-verify``).
            config: Optional configuration loaded from a file.

        Returns:
            The merged, immutable Policy.
        """
        approved = split_option_values(approve)
        excluded = split_option_values(exclude)
        prefixes = split_option_values(exclude_prefix)

        if config is not None:
            approved.extend(config.approve or [])
            excluded.extend(config.exclude or [])
            prefixes.extend(config.exclude_prefix or [])

        return cls(
            approved_licenses=frozenset(approved),
            excluded_names=frozenset(excluded),
            excluded_prefixes=_unique(prefixes),
            verify=verify,
        )


class PolicyViolation(BaseModel):
    """A non-excluded package whose license is not approved."""

    model_config = {"extra": "forbid"}

    name: str = Field(description="Name of the package with violation")
    version: str = Field(default="", description="Version of the package")
    license_id: str = Field(
        default="", description="Declared license identifier (empty if none)"
    )

    def describe(self) -> str:
        """Human-readable one-line description of the violation."""
        return f'"{self.name}@{self.version}" has unapproved license: "{self.license_id}"'
