"""Fabrication rule override schema.

Every field is optional; only the values present in a configuration file
replace the defaults of the FabricationRules table.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RulesConfigSchema(BaseModel):
    """Overrides for individual fabrication constants.

    Field names match the attributes of FabricationRules.
    """

    model_config = ConfigDict(extra="forbid")

    glass_weight_per_m2: dict[int, float] | None = None

    channel_vertical_mm: float | None = Field(default=None, ge=0.0, le=50.0)
    channel_floor_to_ceiling_mm: float | None = Field(default=None, ge=0.0, le=50.0)
    channel_wall_mm: float | None = Field(default=None, ge=0.0, le=50.0)
    clamp_mm: float | None = Field(default=None, ge=0.0, le=50.0)
    corner_long_panel_mm: float | None = Field(default=None, ge=0.0, le=50.0)
    corner_short_panel_mm: float | None = Field(default=None, ge=0.0, le=50.0)

    hinge_side_seal_mm: float | None = Field(default=None, ge=0.0, le=50.0)
    handle_side_seal_mm: float | None = Field(default=None, ge=0.0, le=50.0)
    door_side_no_seal_mm: float | None = Field(default=None, ge=0.0, le=50.0)
    bottom_seal_mm: float | None = Field(default=None, ge=0.0, le=50.0)
    bottom_clear_threshold_mm: float | None = Field(default=None, ge=0.0, le=50.0)
    bottom_tapered_threshold_mm: float | None = Field(default=None, ge=0.0, le=50.0)
    bottom_no_seal_mm: float | None = Field(default=None, ge=0.0, le=50.0)
    support_panel_head_mm: float | None = Field(default=None, ge=0.0, le=50.0)

    narrow_fixed_panel_mm: float | None = Field(default=None, gt=0.0)
    wide_return_panel_mm: float | None = Field(default=None, gt=0.0)

    standard_hinge_max_width_mm: float | None = Field(default=None, gt=0.0)
    standard_hinge_max_weight_kg: float | None = Field(default=None, gt=0.0)
    heavy_hinge_max_width_mm: float | None = Field(default=None, gt=0.0)
    heavy_hinge_max_weight_kg: float | None = Field(default=None, gt=0.0)

    hinge_offset_ratio: float | None = Field(default=None, gt=0.0, lt=0.5)
    hinge_min_offset_mm: float | None = Field(default=None, gt=0.0)
    hinge_max_offset_mm: float | None = Field(default=None, gt=0.0)
    hinge_cutout_height_mm: float | None = Field(default=None, gt=0.0)
    hinge_min_clear_gap_mm: float | None = Field(default=None, ge=0.0)

    knob_center_mm: float | None = Field(default=None, gt=0.0)
    pull_handle_bottom_mm: float | None = Field(default=None, gt=0.0)

    @field_validator("glass_weight_per_m2")
    @classmethod
    def validate_densities(
        cls, v: dict[int, float] | None
    ) -> dict[int, float] | None:
        """Weights per square metre must be positive."""
        if v is None:
            return v
        if not v:
            raise ValueError("glass_weight_per_m2 must not be empty")
        for thickness, weight in v.items():
            if thickness <= 0 or weight <= 0:
                raise ValueError(
                    f"Invalid glass weight {weight} for {thickness}mm glass"
                )
        return v

    def overrides(self) -> dict[str, object]:
        """Return only the fields set in the configuration."""
        return self.model_dump(exclude_none=True)
