# Copyright 2026 Schemascope Contributors
# SPDX-License-Identifier: Apache-2.0

"""Inspector configuration for schemascope."""

from schemascope.workspace.config import (
    CONFIG_FILE_NAME,
    InspectorConfig,
    InspectorConfigError,
    find_inspector_config,
    load_inspector_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "InspectorConfig",
    "InspectorConfigError",
    "find_inspector_config",
    "load_inspector_config",
]
