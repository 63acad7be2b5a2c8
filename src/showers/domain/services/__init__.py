"""Domain services for shower glass geometry and fabrication.

This package provides all domain services of the configurator, including:
- Chain tracing from the anchor door panel
- Notch outlines in plan
- Oblique perspective projection
- Glass fabrication (deductions, weight, hinges, handles, supports, doors)
"""

from .chain_geometry import ChainGeometryResolver
from .notch_geometry import NotchConfigurationError, NotchGeometryResolver
from .perspective import (
    PerspectiveProjector,
    ProjectedPanel,
    ProjectionFit,
    ProjectionResult,
    Viewport,
)

# Export glass fabrication module
from .fabrication import (
    DEFAULT_RULES,
    DeductionEngine,
    DoorDerivationEngine,
    FabricationRules,
    FabricationService,
    GlassWeightCalculator,
    HandlePlacementResolver,
    HingePlacementResolver,
    HingeSelector,
    SupportChecker,
)

__all__ = [
    # Geometry
    "ChainGeometryResolver",
    "NotchConfigurationError",
    "NotchGeometryResolver",
    "PerspectiveProjector",
    "ProjectedPanel",
    "ProjectionFit",
    "ProjectionResult",
    "Viewport",
    # Fabrication
    "DEFAULT_RULES",
    "DeductionEngine",
    "DoorDerivationEngine",
    "FabricationRules",
    "FabricationService",
    "GlassWeightCalculator",
    "HandlePlacementResolver",
    "HingePlacementResolver",
    "HingeSelector",
    "SupportChecker",
]
