"""Load snapshot settings from YAML/JSON configuration."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from raft_snapshots.constants import SNAPSHOTS_SECTION
from raft_snapshots.settings import SnapshotsSettings
from raft_snapshots.violations import ConfigFileError

logger = logging.getLogger(__name__)


def read_config_file(path: Path) -> dict[str, Any]:
    """Read a YAML (or JSON) configuration file.

    Args:
        path: Path to the configuration file

    Returns:
        dict: Parsed configuration, empty for an empty file

    Raises:
        ConfigFileError: If the top level is not a mapping
    """
    logger.debug("Reading configuration from %s", path)
    with open(path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f)

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigFileError(
            f"Configuration in {path} must be a mapping, got {type(config).__name__}"
        )
    return config


def snapshots_section(config: Mapping[str, Any]) -> dict[str, Any]:
    """Return the snapshots block of a configuration.

    A full agent configuration keeps the snapshot settings under a
    `snapshots` key; a bare section is returned as is.
    """
    if SNAPSHOTS_SECTION not in config:
        return dict(config)

    section = config[SNAPSHOTS_SECTION]
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigFileError(
            f"'{SNAPSHOTS_SECTION}' section must be a mapping, got {type(section).__name__}"
        )
    return section


def load_snapshots_settings(
    section: Mapping[str, Any] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> SnapshotsSettings:
    """Bind and validate snapshot settings.

    Values come from, in order of precedence: non-None `overrides` (keyed by
    attribute name), the config `section`, built-in defaults.

    Args:
        section: Structured-config snapshots block
        overrides: Values that take precedence over the section

    Returns:
        SnapshotsSettings: Validated settings

    Raises:
        pydantic.ValidationError: If a value has the wrong type
        InvalidSnapshotsConfigError: With every out-of-range value
    """
    settings = SnapshotsSettings.from_config(section or {})

    for name, value in (overrides or {}).items():
        if value is None:
            continue
        if name not in SnapshotsSettings.model_fields:
            raise ValueError(f"Unknown snapshots setting: {name}")
        logger.debug("Overriding %s with %r", name, value)
        setattr(settings, name, value)

    settings.require_valid()

    if settings.snapshots_enabled:
        logger.info(
            "Snapshots enabled: every %d entries, checked every %d ms, stored in %s",
            settings.min_entries_to_snapshot,
            settings.snapshot_check_interval,
            settings.snapshots_directory,
        )
    else:
        logger.info("Snapshots disabled")

    return settings
