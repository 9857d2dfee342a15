"""Configuration file discovery and loading for manylicenses."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from manylicenses.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from manylicenses.constants import PROJECT_MANIFEST_KEY, PROJECT_MANIFEST_NAME
from manylicenses.exceptions import ConfigurationError
from manylicenses.models.config import ManyLicensesConfig

logger = logging.getLogger(__name__)


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find a YAML configuration file in the specified directory.

    Searches for `.manylicenses.yaml` first, then `.manylicenses.yml`.

    Args:
        start_dir: Directory to search. Defaults to current working directory.

    Returns:
        Path to the configuration file if found, None otherwise.
    """
    search_dir = start_dir or Path.cwd()
    for name in DEFAULT_CONFIG_NAMES:
        config_path = search_dir / name
        if config_path.exists():
            return config_path
    return None


def load_config_file(path: Path) -> ManyLicensesConfig:
    """Load and validate configuration from a YAML file.

    Args:
        path: Path to the configuration file.

    Returns:
        Validated ManyLicensesConfig instance.

    Raises:
        ConfigurationError: If file cannot be read, has invalid YAML,
            or fails Pydantic validation.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read configuration file '{path}': {e}"
        ) from e

    # Handle empty files - return default config
    if not content.strip():
        return get_default_config()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML syntax in '{path}': {e}"
        ) from e

    # Handle YAML that parses to None (empty or just comments)
    if data is None:
        return get_default_config()

    return _validate_config(data, str(path))


def load_project_manifest_config(start_dir: Path | None = None) -> ManyLicensesConfig:
    """Load the `manylicenses` key from the project's package.json.

    Unknown keys under `manylicenses` are logged and ignored. A missing,
    unreadable or unparseable package.json, or one without the
    key, yields the default configuration.

    Args:
        start_dir: Directory holding package.json. Defaults to cwd.

    Returns:
        ManyLicensesConfig from the manifest key, or defaults.

    Raises:
        ConfigurationError: If the key is present but fails validation.
    """
    manifest_path = (start_dir or Path.cwd()) / PROJECT_MANIFEST_NAME

    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return get_default_config()
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable %s: %s", manifest_path, e)
        return get_default_config()

    if not isinstance(data, dict) or data.get(PROJECT_MANIFEST_KEY) is None:
        return get_default_config()

    logger.debug("Using '%s' key from %s", PROJECT_MANIFEST_KEY, manifest_path)
    section = data[PROJECT_MANIFEST_KEY]
    source = f"{manifest_path}#{PROJECT_MANIFEST_KEY}"

    # Unknown keys are tolerated in the shared manifest
    if isinstance(section, dict):
        unknown = sorted(key for key in section if key not in _known_config_keys())
        if unknown:
            logger.warning(
                "Ignoring unknown keys in '%s': %s", source, ", ".join(unknown)
            )
            section = {k: v for k, v in section.items() if k not in unknown}

    return _validate_config(section, source)


def _known_config_keys() -> set[str]:
    """Return the field names and aliases ManyLicensesConfig accepts."""
    keys: set[str] = set()
    for name, field in ManyLicensesConfig.model_fields.items():
        keys.add(name)
        if field.alias:
            keys.add(field.alias)
    return keys


def _validate_config(data: Any, source: str) -> ManyLicensesConfig:
    """Validate raw configuration data.

    Args:
        data: Parsed configuration data.
        source: Description of where the data came from, for messages.

    Returns:
        Validated ManyLicensesConfig.

    Raises:
        ConfigurationError: If data is not a mapping or fails validation.
    """
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in '{source}': "
            f"expected a mapping at root level, got {type(data).__name__}"
        )

    try:
        return ManyLicensesConfig.model_validate(data)
    except ValidationError as e:
        error_messages = _format_validation_errors(e)
        raise ConfigurationError(
            f"Invalid configuration in '{source}': {error_messages}"
        ) from e


def _format_validation_errors(error: ValidationError) -> str:
    """Format Pydantic validation errors into a readable string.

    Args:
        error: The Pydantic ValidationError.

    Returns:
        Formatted error message string.
    """
    messages: list[str] = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"]) if err["loc"] else "root"
        msg = err["msg"]
        messages.append(f"{loc}: {msg}")
    return "; ".join(messages)


def merge_configs(*configs: ManyLicensesConfig) -> ManyLicensesConfig:
    """Concatenate the list values of several configurations, in order.

    A field stays None only if it is None in every configuration.

    Args:
        *configs: Configurations to merge.

    Returns:
        The merged ManyLicensesConfig.
    """
    merged: dict[str, list[str]] = {}
    for config in configs:
        for name in ManyLicensesConfig.model_fields:
            values = getattr(config, name)
            if values is not None:
                merged.setdefault(name, []).extend(values)
    return ManyLicensesConfig(**merged)


def load_config(config_path: str | None = None) -> ManyLicensesConfig:
    """Load configuration from files or use defaults.

    The YAML file is the explicitly given one, else a
    `.manylicenses.yaml`/`.yml` file in the current directory. Its values
    are merged with the `manylicenses` key of ./package.json, YAML values
    first. Either source may be absent.

    Args:
        config_path: Optional path to a YAML configuration file.
            If provided, must exist and be valid.

    Returns:
        ManyLicensesConfig with loaded or default values.

    Raises:
        ConfigurationError: If a configuration source is invalid.
    """
    if config_path is not None:
        # User specified a path - load it (Click validates existence)
        yaml_config = load_config_file(Path(config_path))
    else:
        discovered = find_config_file()
        if discovered is not None:
            logger.debug("Using configuration file %s", discovered)
            yaml_config = load_config_file(discovered)
        else:
            yaml_config = get_default_config()

    return merge_configs(yaml_config, load_project_manifest_config())
