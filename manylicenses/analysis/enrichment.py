"""Metadata enrichment from per-package manifests.

Pure functions only: manifest lookup happens in the resolvers, and a failed
lookup reaches this module as ``None``.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from manylicenses.models.inventory import PackageRecord
from manylicenses.models.manifest import (
    EnrichedRecord,
    PackageManifest,
    PersonField,
    PersonRef,
    RepositoryField,
    RepositoryRef,
)


def person_name(value: PersonField) -> str:
    """Display name of a person field (plain string or ``{name}`` object)."""
    if isinstance(value, PersonRef):
        return value.name or ""
    return value


def repository_url(value: RepositoryField) -> str:
    """URL of a repository field (plain string or ``{url}`` object)."""
    if isinstance(value, RepositoryRef):
        return value.url or ""
    return value


def _contributor_name(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping) and isinstance(value.get("name"), str):
        return value["name"]
    return str(value)


def contributor_names(value: Any) -> list[str]:
    """Normalize a manifest contributors field into display names.

    Each entry becomes a string: strings are kept, objects with a string
    ``name`` give that name, and anything else is stringified. A present
    value that is not a list is normalized the same way into a one-entry
    list. None gives an empty list.
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [_contributor_name(entry) for entry in value]
    return [_contributor_name(value)]


def enrich_record(
    record: PackageRecord,
    manifest: Optional[PackageManifest] = None,
) -> EnrichedRecord:
    """Combine an inventory record with its package manifest.

    Manifest fields take precedence; vendor fields from the inventory are
    the fallback for author, homepage and repository.

    Args:
        record: Canonical record from the inventory.
        manifest: Package manifest, or None if unavailable.

    Returns:
        EnrichedRecord ready for CSV rendering.
    """
    if manifest is None:
        manifest = PackageManifest()

    author = (
        person_name(manifest.author)
        if manifest.author is not None
        else record.vendor_author
    )
    repository = (
        repository_url(manifest.repository)
        if manifest.repository is not None
        else record.vendor_repository
    )

    return EnrichedRecord(
        name=record.name,
        version=record.version,
        license_id=record.license_id,
        description=manifest.description or "",
        author=author,
        contributors=contributor_names(manifest.contributors),
        homepage=(
            manifest.homepage if manifest.homepage is not None else record.vendor_homepage
        ),
        repository_url=repository,
    )
