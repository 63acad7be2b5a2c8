"""Value objects for the shower glass domain.

This module provides immutable data types used throughout the configurator.
All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Panel types and cutting specifications
from ._panels import (
    DoorProperties,
    HingeSide,
    NotchSpec,
    PanelKind,
    SwingDirection,
    TopEdge,
    TopEdgeType,
)

# Plan and screen geometry
from ._geometry import (
    Direction2D,
    Junction,
    JunctionAngle,
    NotchOutline,
    PanelSegment,
    PlanBounds,
    Point2D,
)

# Fabrication options and deductions
from ._fabrication import (
    CornerConfig,
    DeductionBreakdown,
    DeductionItem,
    FloorRake,
    HandleType,
    HeightMode,
    HingeFamily,
    MountingStyle,
    ThresholdType,
    WallRake,
    WallRakeDirection,
)

# Door measurements
from ._measurements import (
    DerivedValues,
    DoorConfigType,
    DoorMeasurements,
    GlassType,
    HardwareFinish,
)

__all__ = [
    # Panels
    "DoorProperties",
    "HingeSide",
    "NotchSpec",
    "PanelKind",
    "SwingDirection",
    "TopEdge",
    "TopEdgeType",
    # Geometry
    "Direction2D",
    "Junction",
    "JunctionAngle",
    "NotchOutline",
    "PanelSegment",
    "PlanBounds",
    "Point2D",
    # Fabrication
    "CornerConfig",
    "DeductionBreakdown",
    "DeductionItem",
    "FloorRake",
    "HandleType",
    "HeightMode",
    "HingeFamily",
    "MountingStyle",
    "ThresholdType",
    "WallRake",
    "WallRakeDirection",
    # Measurements
    "DerivedValues",
    "DoorConfigType",
    "DoorMeasurements",
    "GlassType",
    "HardwareFinish",
]
