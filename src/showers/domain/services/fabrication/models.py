"""Fabrication data models.

This module provides the result records of the fabrication services:
- DeductionOptions / PanelRakes: inputs describing seals, threshold and rakes
- DoorConfiguration: door options and measurements for one derivation pass
- PanelDeductions: cut size and itemised deductions of one panel
- DoorDeductions: door seal, bottom and air-gap deductions
- DoorGlassSize: final door glass size after deductions
- HingePlacement / HingeSelection: hinge offsets and hardware family
- HandlePlacement: handle height and hinge interference check
- SupportCheck: support panel and support bar requirements
- DoorResult: complete door derivation output
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ...value_objects import (
    DeductionBreakdown,
    DerivedValues,
    DoorConfigType,
    DoorMeasurements,
    FloorRake,
    GlassType,
    HandleType,
    HardwareFinish,
    HeightMode,
    HingeFamily,
    ThresholdType,
    WallRake,
)
from .rules import DEFAULT_RULES


@dataclass(frozen=True)
class DeductionOptions:
    """Door seal and threshold options.

    Attributes:
        seals_required: Whether seals are fitted to the door edges.
        threshold: Threshold under the door.
        ceiling_air_gap_mm: Air gap below the ceiling for floor-to-ceiling doors.
    """

    seals_required: bool = True
    threshold: ThresholdType = ThresholdType.NONE
    ceiling_air_gap_mm: float = DEFAULT_RULES.ceiling_air_gap_mm

    def __post_init__(self) -> None:
        if self.ceiling_air_gap_mm < 0:
            raise ValueError("Ceiling air gap must be non-negative")


@dataclass(frozen=True)
class PanelRakes:
    """Floor and wall rakes affecting a single panel."""

    floor: FloorRake | None = None
    wall: WallRake | None = None


@dataclass(frozen=True)
class DoorConfiguration:
    """Everything the door derivation needs for one pass.

    Attributes:
        measurements: Laser readings taken so far.
        door_type: Left, right or double door.
        height_mode: How the door height is measured.
        seals_required: Whether seals are fitted.
        threshold: Threshold under the door.
        ceiling_air_gap_mm: Air gap below the ceiling.
        requested_hinge: Hinge family chosen by the user, if any.
        handle_type: Knob or pull handle.
        glass_thickness_mm: Glass thickness, used for the weight.
        glass_type: Glass tint or finish.
        hardware_finish: Hinge and handle finish.
    """

    measurements: DoorMeasurements = field(default_factory=DoorMeasurements)
    door_type: DoorConfigType = DoorConfigType.RIGHT
    height_mode: HeightMode = HeightMode.STANDARD
    seals_required: bool = True
    threshold: ThresholdType = ThresholdType.NONE
    ceiling_air_gap_mm: float = DEFAULT_RULES.ceiling_air_gap_mm
    requested_hinge: HingeFamily | None = None
    handle_type: HandleType = HandleType.KNOB
    glass_thickness_mm: float = DEFAULT_RULES.glass_thickness_mm
    glass_type: GlassType = GlassType.CLEAR
    hardware_finish: HardwareFinish = HardwareFinish.CHROME

    def __post_init__(self) -> None:
        if self.ceiling_air_gap_mm < 0:
            raise ValueError("Ceiling air gap must be non-negative")
        if self.glass_thickness_mm <= 0:
            raise ValueError("Glass thickness must be positive")

    @property
    def leaf_count(self) -> int:
        return 2 if self.door_type is DoorConfigType.DOUBLE else 1


@dataclass(frozen=True)
class PanelDeductions:
    """Cut size of a panel with its itemised deductions.

    ``cut_width`` and ``cut_height`` are the nominal cut sizes. The per-side
    values add any floor or wall rake on top of them.
    """

    tight_width: float
    tight_height: float
    vertical: DeductionBreakdown
    horizontal: DeductionBreakdown
    cut_height_left: float
    cut_height_right: float
    cut_width_top: float
    cut_width_bottom: float

    @property
    def cut_width(self) -> float:
        return self.tight_width - self.horizontal.total

    @property
    def cut_height(self) -> float:
        return self.tight_height - self.vertical.total

    @property
    def breakdown(self) -> list[str]:
        return self.horizontal.breakdown + self.vertical.breakdown


@dataclass(frozen=True)
class DoorDeductions:
    """Deductions applied to a door measured with the laser method.

    Attributes:
        hinge_side_mm: Hinge side gap or seal.
        handle_side_mm: Handle side gap or seal.
        bottom_mm: Bottom gap, sweep or threshold clearance.
        ceiling_air_gap_mm: Air gap below the ceiling.
        height_mode: How the door height was measured.
    """

    hinge_side_mm: float
    handle_side_mm: float
    bottom_mm: float
    ceiling_air_gap_mm: float = 0.0
    height_mode: HeightMode = HeightMode.STANDARD

    @property
    def total_width_mm(self) -> float:
        return self.hinge_side_mm + self.handle_side_mm

    @property
    def total_height_mm(self) -> float:
        if self.height_mode is HeightMode.FLOOR_TO_CEILING:
            return self.bottom_mm + self.ceiling_air_gap_mm
        return self.bottom_mm

    def to_dict(self) -> dict[str, float]:
        return {
            "hinge_side": self.hinge_side_mm,
            "handle_side": self.handle_side_mm,
            "bottom": self.bottom_mm,
            "total_width": self.total_width_mm,
            "total_height": self.total_height_mm,
        }


@dataclass(frozen=True)
class DoorGlassSize:
    """Final manufactured size of a door leaf.

    A value is None while the derived opening size it depends on is unknown.

    Attributes:
        width_bottom_mm: Leaf width at the bottom.
        width_top_mm: Leaf width at the top.
        height_left_mm: Leaf height on the left edge.
        height_right_mm: Leaf height on the right edge.
        leaf_count: 2 for a double door, otherwise 1.
    """

    width_bottom_mm: float | None = None
    width_top_mm: float | None = None
    height_left_mm: float | None = None
    height_right_mm: float | None = None
    leaf_count: int = 1

    @property
    def width_mm(self) -> float | None:
        return self.width_bottom_mm

    @property
    def height_mm(self) -> float | None:
        return self.height_left_mm

    @property
    def is_complete(self) -> bool:
        return self.width_bottom_mm is not None and self.height_left_mm is not None

    def average_width_mm(self) -> float | None:
        return _average(self.width_bottom_mm, self.width_top_mm)

    def average_height_mm(self) -> float | None:
        return _average(self.height_left_mm, self.height_right_mm)


def _average(first: float | None, second: float | None) -> float | None:
    values = [v for v in (first, second) if v is not None]
    if not values:
        return None
    return sum(values) / len(values)


@dataclass(frozen=True)
class HingePlacement:
    """Hinge offsets measured from the glass edges to the hinge centres.

    Attributes:
        top_offset_mm: Top edge to top hinge centre.
        bottom_offset_mm: Bottom edge to bottom hinge centre.
        clear_gap_mm: Clear glass between the two hinge cut-outs.
        cutout_height_mm: Height of each hinge cut-out.
        warning: Set when the clear gap is below the serviceable minimum.
    """

    top_offset_mm: float
    bottom_offset_mm: float
    clear_gap_mm: float
    cutout_height_mm: float = 60.0
    warning: str | None = None

    @property
    def bottom_cutout_top_mm(self) -> float:
        return self.bottom_offset_mm + self.cutout_height_mm / 2


@dataclass(frozen=True)
class HingeSelection:
    """Chosen hinge family for a door.

    Attributes:
        family: Selected hinge family.
        is_upgrade: True when the standard family was replaced automatically.
        reason: Human-readable explanation of the choice.
        warning: Set when the door exceeds a hinge limit.
    """

    family: HingeFamily
    is_upgrade: bool = False
    reason: str = ""
    warning: str | None = None


@dataclass(frozen=True)
class HandlePlacement:
    """Handle height on the door glass.

    Attributes:
        handle_type: Knob or pull handle.
        height_mm: Knob centre or pull handle bottom, from the glass bottom.
        top_mm: Top of the handle hardware.
        edge_clearance_mm: Distance of the handle holes from the glass edge.
        is_valid: False when the handle would clash with a hinge cut-out.
        warning: Set when ``is_valid`` is False.
    """

    handle_type: HandleType
    height_mm: float
    top_mm: float
    edge_clearance_mm: float
    is_valid: bool = True
    warning: str | None = None


@dataclass(frozen=True)
class SupportCheck:
    """Support structures required by a chain layout."""

    support_panel_required: bool = False
    support_panel_reason: str | None = None
    support_bar_required: bool = False
    support_bar_reason: str | None = None
    support_bar_panel_id: str | None = None

    @property
    def warnings(self) -> list[str]:
        return [r for r in (self.support_panel_reason, self.support_bar_reason) if r]


@dataclass(frozen=True)
class DoorResult:
    """Complete output of a door derivation pass."""

    derived: DerivedValues
    deductions: DoorDeductions
    glass_size: DoorGlassSize
    weight_kg: float | None = None
    hinge_placement: HingePlacement | None = None
    hinge_selection: HingeSelection | None = None
    handle_placement: HandlePlacement | None = None
    warnings: tuple[str, ...] = field(default_factory=tuple)
    next_required_inputs: tuple[str, ...] = field(default_factory=tuple)
