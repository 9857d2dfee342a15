"""Default configuration values for manylicenses."""

from __future__ import annotations

from manylicenses.models.config import ManyLicensesConfig

# Default configuration file names to search for
DEFAULT_CONFIG_NAMES = [".manylicenses.yaml", ".manylicenses.yml"]


def get_default_config() -> ManyLicensesConfig:
    """Get the default configuration.

    Returns:
        ManyLicensesConfig with all defaults (all fields None).
    """
    return ManyLicensesConfig()
