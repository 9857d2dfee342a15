"""Manifest resolver reading package.json files from a node_modules tree."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from manylicenses.constants import DEFAULT_MODULES_DIR, PROJECT_MANIFEST_NAME
from manylicenses.models.manifest import PackageManifest
from manylicenses.resolvers.base import BaseManifestResolver

logger = logging.getLogger(__name__)


class NodeModulesManifestResolver(BaseManifestResolver):
    """Resolve manifests from ``<modules_dir>/<name>/package.json``.

    Scoped names such as ``@scope/pkg`` map to nested directories, as in
    an installed node_modules tree.
    """

    def __init__(self, modules_dir: Path | str | None = None) -> None:
        """Initialize the resolver.

        Args:
            modules_dir: Root directory of installed packages. Defaults to
                ``./node_modules``.
        """
        self._modules_dir = Path(modules_dir or DEFAULT_MODULES_DIR)

    @property
    def modules_dir(self) -> Path:
        """Root directory searched for package manifests."""
        return self._modules_dir

    def manifest_path(self, package_name: str) -> Path:
        """Path of the manifest for a package."""
        return self._modules_dir / package_name / PROJECT_MANIFEST_NAME

    def resolve(self, package_name: str) -> Optional[PackageManifest]:
        """Load and validate a package's manifest.

        Args:
            package_name: The package name to look up.

        Returns:
            PackageManifest, or None if the file is missing, unreadable,
            not JSON, or not a JSON object. Wrongly typed fields are
            read as None.
        """
        if not package_name:
            return None

        path = self.manifest_path(package_name)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.debug("No manifest for %s at %s: %s", package_name, path, e)
            return None

        try:
            return PackageManifest.model_validate(data)
        except ValidationError as e:
            logger.debug(
                "Ignoring malformed manifest for %s: %d validation error(s)",
                package_name,
                e.error_count(),
            )
            return None
