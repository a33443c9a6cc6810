"""Layout document schema and loading.

Public API:
    - LayoutDocument: Root document model
    - PlacementConfig, WallConfig, DoorConfig: Entity models
    - EngineSettingsConfig: Tunable engine settings
    - load_layout: Load a document from a JSON file
    - load_layout_from_dict: Load a document from a dictionary
    - ConfigError: Exception for loading and validation errors
    - config_to_*: Convert documents to domain objects

Example:
    >>> from pathlib import Path
    >>> from backings.application.config import load_layout, ConfigError
    >>>
    >>> try:
    ...     document = load_layout(Path("level-2.json"))
    ...     print(f"{len(document.placements)} placements")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from backings.application.config.adapter import (
    config_to_doors,
    config_to_optimization_settings,
    config_to_placements,
    config_to_severity_policy,
    config_to_walls,
    placement_from_config,
)
from backings.application.config.loader import (
    ConfigError,
    load_layout,
    load_layout_from_dict,
)
from backings.application.config.schema import (
    SUPPORTED_VERSIONS,
    DimensionsConfig,
    DoorConfig,
    EngineSettingsConfig,
    LayoutDocument,
    LocationConfig,
    PlacementConfig,
    PointConfig,
    SeverityConfig,
    WallConfig,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "DimensionsConfig",
    "DoorConfig",
    "EngineSettingsConfig",
    "LayoutDocument",
    "LocationConfig",
    "PlacementConfig",
    "PointConfig",
    "SeverityConfig",
    "WallConfig",
    "config_to_doors",
    "config_to_optimization_settings",
    "config_to_placements",
    "config_to_severity_policy",
    "config_to_walls",
    "load_layout",
    "load_layout_from_dict",
    "placement_from_config",
]
