"""Configuration schema and loading system for shower glass designs.

This package provides JSON-based configuration loading and validation for
panel chains and laser-measured doors. It includes Pydantic models for schema
validation, a configuration loader with comprehensive error handling, and
adapters into domain objects.

Public API:
    - DesignConfiguration: Root configuration model
    - ChainConfigSchema / PanelConfigSchema: Panel chain models
    - OptionsConfigSchema / ViewConfigSchema: Fabrication and view options
    - DoorConfigSchema: Laser-measured door model
    - RulesConfigSchema: Fabrication rule overrides
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - config_to_rules / config_to_chain / config_to_design_state: Adapters

Example:
    >>> from pathlib import Path
    >>> from showers.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("walk-in.json"))
    ...     state = config_to_design_state(config)
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from showers.application.config.adapter import (
    config_to_chain,
    config_to_design_state,
    config_to_door_configuration,
    config_to_door_configurator,
    config_to_rules,
)
from showers.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from showers.application.config.schemas import (
    SUPPORTED_VERSIONS,
    ChainConfigSchema,
    DesignConfiguration,
    DoorConfigSchema,
    DoorPropertiesConfigSchema,
    FloorRakeConfigSchema,
    JunctionConfigSchema,
    NotchConfigSchema,
    OptionsConfigSchema,
    PanelConfigSchema,
    PanelRakeConfigSchema,
    RulesConfigSchema,
    TopEdgeConfigSchema,
    ViewConfigSchema,
    WallRakeConfigSchema,
)

__all__ = [
    # Loader
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    # Schemas
    "SUPPORTED_VERSIONS",
    "ChainConfigSchema",
    "DesignConfiguration",
    "DoorConfigSchema",
    "DoorPropertiesConfigSchema",
    "FloorRakeConfigSchema",
    "JunctionConfigSchema",
    "NotchConfigSchema",
    "OptionsConfigSchema",
    "PanelConfigSchema",
    "PanelRakeConfigSchema",
    "RulesConfigSchema",
    "TopEdgeConfigSchema",
    "ViewConfigSchema",
    "WallRakeConfigSchema",
    # Adapters
    "config_to_chain",
    "config_to_design_state",
    "config_to_door_configuration",
    "config_to_door_configurator",
    "config_to_rules",
]
