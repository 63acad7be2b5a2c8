"""Configuration schema models.

All models are re-exported here so callers can import from
``showers.application.config.schemas`` without knowing the sub-module.
"""

from showers.application.config.schemas.base import SUPPORTED_VERSIONS
from showers.application.config.schemas.chain_schema import (
    ChainConfigSchema,
    DoorPropertiesConfigSchema,
    JunctionConfigSchema,
    NotchConfigSchema,
    PanelConfigSchema,
    TopEdgeConfigSchema,
)
from showers.application.config.schemas.options_schema import (
    DoorConfigSchema,
    FloorRakeConfigSchema,
    OptionsConfigSchema,
    PanelRakeConfigSchema,
    ViewConfigSchema,
    WallRakeConfigSchema,
)
from showers.application.config.schemas.root import DesignConfiguration
from showers.application.config.schemas.rules_schema import RulesConfigSchema

__all__ = [
    "SUPPORTED_VERSIONS",
    # Chain
    "ChainConfigSchema",
    "DoorPropertiesConfigSchema",
    "JunctionConfigSchema",
    "NotchConfigSchema",
    "PanelConfigSchema",
    "TopEdgeConfigSchema",
    # Options
    "DoorConfigSchema",
    "FloorRakeConfigSchema",
    "OptionsConfigSchema",
    "PanelRakeConfigSchema",
    "ViewConfigSchema",
    "WallRakeConfigSchema",
    # Rules
    "RulesConfigSchema",
    # Root
    "DesignConfiguration",
]
