"""Base manifest resolver interface."""

from abc import ABC, abstractmethod
from typing import Optional

from manylicenses.models.manifest import PackageManifest


class BaseManifestResolver(ABC):
    """Abstract base class for per-package manifest lookups.

    Lookups are best effort: implementations must return None instead of
    raising when a manifest cannot be produced.
    """

    @abstractmethod
    def resolve(self, package_name: str) -> Optional[PackageManifest]:
        """Look up the manifest for a package.

        Args:
            package_name: The package name to look up.

        Returns:
            The package manifest, or None if unavailable.
        """
