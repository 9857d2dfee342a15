"""Per-package manifest resolvers."""

from manylicenses.resolvers.base import BaseManifestResolver
from manylicenses.resolvers.node_modules import NodeModulesManifestResolver

__all__ = [
    "BaseManifestResolver",
    "NodeModulesManifestResolver",
]
