"""Fabrication rules table.

Every shop constant used by the deduction, hinge, handle, support and weight
services lives in FabricationRules so that a rule change is a one-line edit
that the whole engine picks up.
"""

from __future__ import annotations

from dataclasses import dataclass, field


def _default_densities() -> dict[int, float]:
    # kg per square metre by glass thickness in mm
    return {6: 15.0, 8: 20.0, 10: 25.0}


@dataclass(frozen=True)
class FabricationRules:
    """Configuration for glass fabrication calculations.

    All lengths are in millimetres and weights in kilograms.

    Attributes:
        glass_thickness_mm: Default glass thickness.
        glass_weight_per_m2: Weight per square metre keyed by thickness.
        channel_vertical_mm: Top/bottom channel deduction.
        channel_floor_to_ceiling_mm: Top/bottom channel deduction when the
            panel runs floor to ceiling.
        channel_wall_mm: Wall channel deduction per side.
        clamp_mm: Clamp deduction per clamped edge.
        corner_long_panel_mm: Corner deduction for the panel running past a
            90 degree corner.
        corner_short_panel_mm: Corner deduction for the panel butting into it
            (silicone gap plus glass plus channel).
        hinge_side_seal_mm: Door hinge-side deduction with seals.
        handle_side_seal_mm: Door handle-side deduction with seals.
        door_side_no_seal_mm: Door side deduction without seals.
        bottom_seal_mm: Door bottom deduction with a sweep seal.
        bottom_clear_threshold_mm: Door bottom deduction over a clear threshold.
        bottom_tapered_threshold_mm: Door bottom deduction over a tapered threshold.
        bottom_no_seal_mm: Door bottom deduction without seals.
        ceiling_air_gap_mm: Default air gap below the ceiling.
        max_ceiling_air_gap_mm: Largest air gap the configurator accepts.
        support_panel_head_mm: Head clearance when a support panel is fitted.
        narrow_fixed_panel_mm: Fixed panels at or below this width beside a
            door need a support panel.
        wide_return_panel_mm: Return panels at or above this width need a
            support bar.
        standard_hinge_max_width_mm: Width limit of the standard hinge.
        standard_hinge_max_weight_kg: Weight limit of the standard hinge.
        heavy_hinge_max_width_mm: Width limit of the heavy-duty hinge.
        heavy_hinge_max_weight_kg: Weight limit of the heavy-duty hinge.
        hinge_offset_ratio: Target hinge offset as a fraction of door height.
        hinge_min_offset_mm: Lower clamp of the hinge offset.
        hinge_max_offset_mm: Upper clamp of the hinge offset.
        hinge_cutout_height_mm: Height of a hinge cut-out.
        hinge_min_clear_gap_mm: Minimum serviceable gap between hinges.
        knob_center_mm: Knob centre height from the bottom of the glass.
        pull_handle_bottom_mm: Pull handle bottom height.
        handle_hole_spacing_mm: Pull handle hole centres.
        knob_radius_mm: Knob radius.
        handle_edge_clearance_mm: Handle holes from the glass edge.
        handle_hinge_clearance_mm: Minimum distance from a hinge cut-out.
        panel_height_mm: Default panel height for projection.
        view_angle_deg: Default projection azimuth.
    """

    glass_thickness_mm: float = 10.0
    glass_weight_per_m2: dict[int, float] = field(default_factory=_default_densities)

    channel_vertical_mm: float = 10.0
    channel_floor_to_ceiling_mm: float = 12.0
    channel_wall_mm: float = 5.0
    clamp_mm: float = 3.0
    corner_long_panel_mm: float = 1.0
    corner_short_panel_mm: float = 13.0

    hinge_side_seal_mm: float = 8.0
    handle_side_seal_mm: float = 9.0
    door_side_no_seal_mm: float = 5.0
    bottom_seal_mm: float = 10.0
    bottom_clear_threshold_mm: float = 16.0
    bottom_tapered_threshold_mm: float = 18.0
    bottom_no_seal_mm: float = 8.0
    ceiling_air_gap_mm: float = 40.0
    max_ceiling_air_gap_mm: float = 100.0
    support_panel_head_mm: float = 4.0

    narrow_fixed_panel_mm: float = 200.0
    wide_return_panel_mm: float = 1200.0

    standard_hinge_max_width_mm: float = 800.0
    standard_hinge_max_weight_kg: float = 38.0
    heavy_hinge_max_width_mm: float = 1000.0
    heavy_hinge_max_weight_kg: float = 50.0

    hinge_offset_ratio: float = 0.14
    hinge_min_offset_mm: float = 230.0
    hinge_max_offset_mm: float = 300.0
    hinge_cutout_height_mm: float = 60.0
    hinge_min_clear_gap_mm: float = 400.0

    knob_center_mm: float = 950.0
    pull_handle_bottom_mm: float = 850.0
    handle_hole_spacing_mm: float = 203.0
    knob_radius_mm: float = 25.0
    handle_edge_clearance_mm: float = 75.0
    handle_hinge_clearance_mm: float = 50.0

    panel_height_mm: float = 2100.0
    view_angle_deg: float = 30.0

    def __post_init__(self) -> None:
        if self.glass_thickness_mm <= 0:
            raise ValueError("Glass thickness must be positive")
        if self.glass_thickness_mm not in self.glass_weight_per_m2:
            raise ValueError(
                f"No glass weight defined for {self.glass_thickness_mm:g}mm glass"
            )
        if any(weight <= 0 for weight in self.glass_weight_per_m2.values()):
            raise ValueError("Glass weights must be positive")
        if self.hinge_min_offset_mm > self.hinge_max_offset_mm:
            raise ValueError("Minimum hinge offset cannot exceed the maximum")
        if not 0 < self.hinge_offset_ratio < 0.5:
            raise ValueError("Hinge offset ratio must be between 0 and 0.5")
        if self.standard_hinge_max_width_mm > self.heavy_hinge_max_width_mm:
            raise ValueError("Standard hinge width limit cannot exceed the heavy-duty limit")
        if self.standard_hinge_max_weight_kg > self.heavy_hinge_max_weight_kg:
            raise ValueError("Standard hinge weight limit cannot exceed the heavy-duty limit")
        if not 0 <= self.ceiling_air_gap_mm <= self.max_ceiling_air_gap_mm:
            raise ValueError(
                f"Ceiling air gap must be between 0 and {self.max_ceiling_air_gap_mm:g}mm"
            )
        if self.panel_height_mm <= 0:
            raise ValueError("Panel height must be positive")
        if not -90 <= self.view_angle_deg <= 90:
            raise ValueError("View angle must be between -90 and 90 degrees")

    def has_density(self, thickness_mm: float) -> bool:
        """True if the thickness is a whole millimetre with a weight entry."""
        return thickness_mm == int(thickness_mm) and int(thickness_mm) in self.glass_weight_per_m2

    def density_for(self, thickness_mm: float) -> float:
        """Glass weight per square metre for a thickness.

        Raises:
            ValueError: If the thickness has no weight entry. Fractional
                thicknesses are never truncated to a listed one.
        """
        if not self.has_density(thickness_mm):
            raise ValueError(f"No glass weight defined for {thickness_mm:g}mm glass")
        return self.glass_weight_per_m2[int(thickness_mm)]


DEFAULT_RULES = FabricationRules()
