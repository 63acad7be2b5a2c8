"""Design option and view configuration schemas.

This module contains the models for the fabrication options of a chain
(OptionsConfigSchema with its per-panel rake models), the perspective view
(ViewConfigSchema), and a single door measured with lasers
(DoorConfigSchema).
"""

from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from showers.application.config.schemas.base import (
    DoorConfigType,
    GlassType,
    HandleType,
    HardwareFinish,
    HeightMode,
    HingeFamily,
    HingeSide,
    MountingStyle,
    ThresholdType,
    WallRakeDirection,
)
from showers.domain.value_objects import DoorMeasurements


class FloorRakeConfigSchema(BaseModel):
    """Floor fall across one panel."""

    model_config = ConfigDict(extra="forbid")

    amount_mm: float = Field(..., ge=0.0, le=100.0)
    lower_side: HingeSide


class WallRakeConfigSchema(BaseModel):
    """Out-of-plumb wall beside one panel."""

    model_config = ConfigDict(extra="forbid")

    amount_mm: float = Field(..., ge=0.0, le=100.0)
    direction: WallRakeDirection


class PanelRakeConfigSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    floor: FloorRakeConfigSchema | None = None
    wall: WallRakeConfigSchema | None = None


class OptionsConfigSchema(BaseModel):
    """Fabrication options applied to every panel of the chain.

    Attributes:
        mounting_style: Channel or clamp mounting for fixed glass.
        seals_required: Whether doors are fitted with seals.
        threshold: Threshold fitted under doors.
        height_mode: How door heights are measured.
        floor_to_ceiling: Whether the panels run floor to ceiling.
        ceiling_air_gap_mm: Air gap kept below the ceiling (0 to 100).
        panel_height_mm: Tight height of every panel.
        glass_thickness_mm: Glass thickness (6, 8 or 10).
        rakes: Floor and wall rakes keyed by panel id.
        requested_hinge: Hinge family requested for doors.
        handle_type: Door handle hardware.
    """

    model_config = ConfigDict(extra="forbid")

    mounting_style: MountingStyle = MountingStyle.CHANNEL
    seals_required: bool = True
    threshold: ThresholdType = ThresholdType.NONE
    height_mode: HeightMode = HeightMode.STANDARD
    floor_to_ceiling: bool = False
    ceiling_air_gap_mm: float = Field(default=40.0, ge=0.0, le=100.0)
    panel_height_mm: float = Field(default=2100.0, gt=0.0, le=3500.0)
    glass_thickness_mm: Literal[6, 8, 10] = 10
    rakes: dict[str, PanelRakeConfigSchema] = Field(default_factory=dict)
    requested_hinge: HingeFamily | None = None
    handle_type: HandleType = HandleType.KNOB


class ViewConfigSchema(BaseModel):
    """Perspective view settings."""

    model_config = ConfigDict(extra="forbid")

    view_angle_deg: float = Field(default=30.0, ge=-90.0, le=90.0)
    zoom: float = Field(default=1.0, ge=0.5, le=2.0)
    width: float = Field(default=1200.0, gt=0.0)
    height: float = Field(default=800.0, gt=0.0)
    padding: float = Field(default=200.0, ge=0.0)

    @model_validator(mode="after")
    def validate_padding(self) -> "ViewConfigSchema":
        """The drawing area must be larger than its padding."""
        if self.width <= self.padding or self.height <= self.padding:
            raise ValueError("width and height must exceed padding")
        return self


class DoorConfigSchema(BaseModel):
    """A single door measured with vertical and horizontal lasers.

    Measurements are keyed by reading name; unknown names are rejected and
    missing readings stay empty.
    """

    model_config = ConfigDict(extra="forbid")

    door_type: DoorConfigType = DoorConfigType.RIGHT
    height_mode: HeightMode = HeightMode.STANDARD
    seals_required: bool = True
    threshold: ThresholdType = ThresholdType.NONE
    ceiling_air_gap_mm: float = Field(default=40.0, ge=0.0, le=100.0)
    requested_hinge: HingeFamily | None = None
    handle_type: HandleType = HandleType.KNOB
    glass_thickness_mm: Literal[6, 8, 10] = 10
    glass_type: GlassType = GlassType.CLEAR
    hardware_finish: HardwareFinish = HardwareFinish.CHROME
    measurements: dict[str, float] = Field(default_factory=dict)

    @field_validator("measurements")
    @classmethod
    def validate_measurements(cls, v: dict[str, float]) -> dict[str, float]:
        """Reject unknown reading names and non-positive readings."""
        known = set(DoorMeasurements.field_names())
        unknown = sorted(set(v) - known)
        if unknown:
            raise ValueError(f"Unknown measurements: {', '.join(unknown)}")
        for name, value in v.items():
            if value <= 0:
                raise ValueError(f"Measurement {name} must be positive")
        return v
