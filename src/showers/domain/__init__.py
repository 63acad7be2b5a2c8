"""Domain layer - core business logic."""

from .entities import ChainConfigurationError, Panel, PanelChain
from .services import (
    ChainGeometryResolver,
    FabricationRules,
    FabricationService,
    NotchConfigurationError,
    NotchGeometryResolver,
    PerspectiveProjector,
)
from .value_objects import (
    CornerConfig,
    DerivedValues,
    DoorMeasurements,
    HingeSide,
    Junction,
    JunctionAngle,
    NotchSpec,
    PanelKind,
    PanelSegment,
    Point2D,
    TopEdge,
)

__all__ = [
    "ChainConfigurationError",
    "ChainGeometryResolver",
    "CornerConfig",
    "DerivedValues",
    "DoorMeasurements",
    "FabricationRules",
    "FabricationService",
    "HingeSide",
    "Junction",
    "JunctionAngle",
    "NotchConfigurationError",
    "NotchGeometryResolver",
    "NotchSpec",
    "Panel",
    "PanelChain",
    "PanelKind",
    "PanelSegment",
    "PerspectiveProjector",
    "Point2D",
    "TopEdge",
]
