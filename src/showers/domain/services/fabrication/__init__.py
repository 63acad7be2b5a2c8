"""Glass fabrication package.

This package provides all components for turning openings into glass:
- Rules table with every fabrication constant
- Data models for deductions, hinges, handles and support checks
- Deduction engine for cut sizes
- Glass weight calculation
- Hinge placement and hinge family selection
- Handle placement
- Support structure checks
- Door derivation from laser measurements

All public symbols are re-exported from this module. The FabricationService
facade wires the specialised services around one rules table.

Example:
    >>> from showers.domain.services.fabrication import (
    ...     FabricationService,
    ...     FabricationRules,
    ... )
    >>> service = FabricationService(FabricationRules(ceiling_air_gap_mm=30))
    >>> result = service.derive_door(door_configuration)
"""

# Re-export configuration
from .rules import DEFAULT_RULES, FabricationRules

# Re-export data models
from .models import (
    DeductionOptions,
    DoorConfiguration,
    DoorDeductions,
    DoorGlassSize,
    DoorResult,
    HandlePlacement,
    HingePlacement,
    HingeSelection,
    PanelDeductions,
    PanelRakes,
    SupportCheck,
)

# Re-export specialized services
from .deduction_engine import DeductionEngine
from .door_derivation import DoorDerivationEngine
from .handle_placement import HandlePlacementResolver
from .hinge_service import HingePlacementResolver, HingeSelector
from .support_checker import SupportChecker
from .weight_calculator import GlassWeightCalculator

# Re-export the main facade service
from .fabrication_facade import FabricationService

__all__ = [
    # Configuration
    "DEFAULT_RULES",
    "FabricationRules",
    # Data models
    "DeductionOptions",
    "DoorConfiguration",
    "DoorDeductions",
    "DoorGlassSize",
    "DoorResult",
    "HandlePlacement",
    "HingePlacement",
    "HingeSelection",
    "PanelDeductions",
    "PanelRakes",
    "SupportCheck",
    # Main service facade
    "FabricationService",
    # Specialized services
    "DeductionEngine",
    "DoorDerivationEngine",
    "GlassWeightCalculator",
    "HandlePlacementResolver",
    "HingePlacementResolver",
    "HingeSelector",
    "SupportChecker",
]
