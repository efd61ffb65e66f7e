"""Estimate configuration schema and loading.

Public API:
    - EstimateConfiguration: Root configuration model
    - RoomConfig, AreaConfigSchema, CatalogConfig, LabourConfig: Section models
    - load_config: Load an estimate from a JSON file
    - load_config_from_dict: Load an estimate from a dictionary
    - ConfigError: Exception for configuration errors
    - validate_config: Advisory checks on a loaded estimate
    - config_to_*: Convert configuration models to domain objects

Example:
    >>> from pathlib import Path
    >>> from paintquote.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("estimate.json"))
    ...     print(f"{len(config.rooms)} rooms")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from paintquote.application.config.adapter import (
    config_to_area_configs,
    config_to_catalog,
    config_to_labour_settings,
    config_to_rooms,
    room_config_to_room,
)
from paintquote.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from paintquote.application.config.schema import (
    SUPPORTED_VERSIONS,
    AdjustmentConfig,
    AreaConfigSchema,
    CatalogConfig,
    EstimateConfiguration,
    LabourConfig,
    RoomConfig,
)
from paintquote.application.config.validator import (
    ValidationResult,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "ValidationResult",
    "AdjustmentConfig",
    "AreaConfigSchema",
    "CatalogConfig",
    "ConfigError",
    "EstimateConfiguration",
    "LabourConfig",
    "RoomConfig",
    "config_to_area_configs",
    "config_to_catalog",
    "config_to_labour_settings",
    "config_to_rooms",
    "load_config",
    "load_config_from_dict",
    "room_config_to_room",
    "validate_config",
]
