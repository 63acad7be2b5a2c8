"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from showers.domain.entities import PanelChain
from showers.domain.services import ProjectionResult, Viewport
from showers.domain.services.fabrication import (
    DEFAULT_RULES,
    DeductionOptions,
    DoorConfiguration,
    DoorResult,
    FabricationRules,
    HandlePlacement,
    HingePlacement,
    HingeSelection,
    PanelDeductions,
    PanelRakes,
    SupportCheck,
)
from showers.domain.value_objects import (
    CornerConfig,
    HandleType,
    HingeFamily,
    MountingStyle,
    NotchOutline,
    PanelSegment,
)


@dataclass
class DesignState:
    """Input DTO holding everything a chain recompute consumes.

    The chain is mutated in place by the caller between recomputes; the
    remaining fields are plain options.
    """

    chain: PanelChain
    mounting_style: MountingStyle = MountingStyle.CHANNEL
    options: DeductionOptions = field(default_factory=DeductionOptions)
    floor_to_ceiling: bool = False
    panel_height_mm: float = DEFAULT_RULES.panel_height_mm
    glass_thickness_mm: float = DEFAULT_RULES.glass_thickness_mm
    rakes: dict[str, PanelRakes] = field(default_factory=dict)
    requested_hinge: HingeFamily | None = None
    handle_type: HandleType = HandleType.KNOB
    view_angle_deg: float = DEFAULT_RULES.view_angle_deg
    viewport: Viewport = field(default_factory=Viewport)

    def validate(self, rules: FabricationRules = DEFAULT_RULES) -> list[str]:
        """Validate input and return list of error messages.

        Args:
            rules: Rules table whose glass weights define the accepted
                thicknesses.
        """
        errors: list[str] = []
        if len(self.chain) == 0:
            errors.append("Chain must contain at least one panel")
        if self.chain.anchor_id is None:
            errors.append("Chain has no anchor door panel")
        if self.panel_height_mm <= 0:
            errors.append("Panel height must be positive")
        if self.glass_thickness_mm <= 0:
            errors.append("Glass thickness must be positive")
        elif not rules.has_density(self.glass_thickness_mm):
            accepted = ", ".join(f"{t}mm" for t in sorted(rules.glass_weight_per_m2))
            errors.append(
                f"No glass weight defined for {self.glass_thickness_mm:g}mm glass "
                f"(accepted: {accepted})"
            )
        if not -90 <= self.view_angle_deg <= 90:
            errors.append("View angle must be between -90 and 90 degrees")
        unknown = sorted(set(self.rakes) - set(self.chain.panels))
        if unknown:
            errors.append(f"Rakes given for unknown panels: {', '.join(unknown)}")
        return errors


@dataclass(frozen=True)
class PanelFabrication:
    """Fabrication numbers for one panel of a chain."""

    panel_id: str
    corner_config: CornerConfig
    deductions: PanelDeductions
    weight_kg: float
    hinge_placement: HingePlacement | None = None
    hinge_selection: HingeSelection | None = None
    handle_placement: HandlePlacement | None = None

    @property
    def warnings(self) -> list[str]:
        sources = (self.hinge_placement, self.hinge_selection, self.handle_placement)
        return [s.warning for s in sources if s is not None and s.warning]


@dataclass(frozen=True)
class DerivedState:
    """Output DTO of a chain recompute.

    Every field is rebuilt from scratch on each recompute. When ``errors``
    is non-empty the remaining fields hold whatever could be computed.
    """

    segments: tuple[PanelSegment, ...] = ()
    notch_outlines: dict[str, NotchOutline] = field(default_factory=dict)
    projection: ProjectionResult | None = None
    support: SupportCheck = field(default_factory=SupportCheck)
    fabrication: dict[str, PanelFabrication] = field(default_factory=dict)
    warnings: tuple[str, ...] = ()
    errors: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def segment_for(self, panel_id: str) -> PanelSegment:
        for segment in self.segments:
            if segment.panel_id == panel_id:
                return segment
        raise KeyError(panel_id)


class DoorScreen(str, Enum):
    """Screens of the single-door configurator, in order."""

    OPTIONS = "options"
    DIMENSIONS = "dimensions"
    TECHNICAL = "technical"
    CONFIRMATION = "confirmation"


@dataclass(frozen=True)
class DoorState:
    """Snapshot of the door configurator after the last mutation."""

    screen: DoorScreen
    configuration: DoorConfiguration
    result: DoorResult

    @property
    def warnings(self) -> tuple[str, ...]:
        return self.result.warnings

    @property
    def next_required_inputs(self) -> tuple[str, ...]:
        return self.result.next_required_inputs
