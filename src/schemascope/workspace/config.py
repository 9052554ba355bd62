# Copyright 2026 Schemascope Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the schemascope inspector configuration file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from schemascope.errors import SchemascopeError
from schemascope.introspect.fields import IDENTITY_COLUMN
from schemascope.log import LOG_LEVELS
from schemascope.tables.listing import INTERNAL_TABLE_PREFIX

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".schemascope.yaml"


class InspectorConfigError(SchemascopeError):
    """Raised when an inspector configuration file is invalid or cannot be loaded."""


@dataclass
class InspectorConfig:
    """The parsed inspector configuration.

    Attributes:
        identity_column: Generated identity column left out of insert forms.
        internal_table_prefix: Prefix marking the storage engine's own tables.
        page_size: Number of rows shown per page.
        log_level: Minimum level of emitted log events.
    """

    identity_column: str = IDENTITY_COLUMN
    internal_table_prefix: str = INTERNAL_TABLE_PREFIX
    page_size: int = 50
    log_level: str = "WARNING"


def load_inspector_config(path: Path) -> InspectorConfig:
    """Load and parse an inspector configuration file.

    Args:
        path: Path to the ``.schemascope.yaml`` file.

    Returns:
        An InspectorConfig with unspecified keys left at their defaults.

    Raises:
        InspectorConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise InspectorConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise InspectorConfigError(f"Cannot read config file: {exc}") from exc

    return _parse_inspector_config(text, source_label=str(path))


def find_inspector_config(directory: Path) -> InspectorConfig:
    """Load ``.schemascope.yaml`` from *directory*, or return defaults when absent."""
    path = directory / CONFIG_FILE_NAME
    if not path.exists():
        return InspectorConfig()
    return load_inspector_config(path)


# ################
# Implementation
# ################


def _parse_inspector_config(text: str, source_label: str = "<string>") -> InspectorConfig:
    """Parse inspector config YAML text into an InspectorConfig.

    Raises:
        InspectorConfigError: If the YAML is invalid or a value has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise InspectorConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return InspectorConfig()
    if not isinstance(data, dict):
        raise InspectorConfigError(f"{source_label}: inspector config must be a YAML mapping")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise InspectorConfigError(f"{source_label}: unknown key(s): {', '.join(map(str, unknown))}")

    config = InspectorConfig()
    if "identity-column" in data:
        config.identity_column = _require_string(data, "identity-column", source_label)
    if "internal-table-prefix" in data:
        config.internal_table_prefix = _require_string(data, "internal-table-prefix", source_label)
    if "page-size" in data:
        config.page_size = _require_positive_int(data, "page-size", source_label)
    if "log-level" in data:
        level = _require_string(data, "log-level", source_label).upper()
        if level not in LOG_LEVELS:
            raise InspectorConfigError(f"{source_label}: 'log-level' must be one of {', '.join(LOG_LEVELS)}")
        config.log_level = level
    return config


_KNOWN_KEYS = frozenset({"identity-column", "internal-table-prefix", "page-size", "log-level"})


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a string field from a mapping, raising InspectorConfigError on a type mismatch."""
    value = mapping[key]
    if not isinstance(value, str):
        raise InspectorConfigError(f"{source_label}: '{key}' must be a string")
    return value


def _require_positive_int(mapping: dict[str, object], key: str, source_label: str) -> int:
    value = mapping[key]
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InspectorConfigError(f"{source_label}: '{key}' must be a positive integer")
    return value
