"""Configuration handling for manylicenses."""
from __future__ import annotations

from manylicenses.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from manylicenses.config.loader import (
    find_config_file,
    load_config,
    load_config_file,
    load_project_manifest_config,
    merge_configs,
)
from manylicenses.models.config import ManyLicensesConfig

__all__ = [
    "DEFAULT_CONFIG_NAMES",
    "ManyLicensesConfig",
    "find_config_file",
    "get_default_config",
    "load_config",
    "load_config_file",
    "load_project_manifest_config",
    "merge_configs",
]
