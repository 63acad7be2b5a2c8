"""Base enums and shared definitions for design configuration schemas.

The enums are imported directly from the domain layer, which defines them
as (str, Enum) so they validate straight from JSON strings.
"""

from showers.domain.value_objects import (
    DoorConfigType,
    GlassType,
    HandleType,
    HardwareFinish,
    HeightMode,
    HingeFamily,
    HingeSide,
    MountingStyle,
    PanelKind,
    SwingDirection,
    ThresholdType,
    TopEdgeType,
    WallRakeDirection,
)

# Supported schema versions for configuration files
# Version 1.0: Panel chain, options, view and rule overrides
# Version 1.1: Single-door laser measurement block
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})

__all__ = [
    "SUPPORTED_VERSIONS",
    "DoorConfigType",
    "GlassType",
    "HandleType",
    "HardwareFinish",
    "HeightMode",
    "HingeFamily",
    "HingeSide",
    "MountingStyle",
    "PanelKind",
    "SwingDirection",
    "ThresholdType",
    "TopEdgeType",
    "WallRakeDirection",
]
